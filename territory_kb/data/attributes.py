"""Attribute store: non-localized territory records keyed by canonical code.

The store's key set is the authoritative universe of valid territory codes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from territory_kb.data.codes import normalize, normalize_keys
from territory_kb.errors import NotFoundError
from territory_kb.models.territory import AttributeRecord

logger = logging.getLogger(__name__)


class AttributeStore:
    """Read-only map of territory code -> AttributeRecord."""

    def __init__(self, records: Mapping[str, AttributeRecord | None]) -> None:
        """Index records by canonical code.

        A code mapped to None is part of the universe but has no record.

        Raises:
            DatasetError: If two keys normalize to the same code.
        """
        by_code = normalize_keys(records, "territory_info")
        self._codes = frozenset(by_code)
        self._records: dict[str, AttributeRecord] = {
            code: record for code, record in by_code.items() if record is not None
        }
        logger.debug("Built attribute store with %d territories", len(self._codes))

    @property
    def codes(self) -> frozenset[str]:
        return self._codes

    def is_valid(self, territory_code: str | Enum) -> bool:
        return normalize(territory_code) in self._codes

    def get(self, territory_code: str | Enum) -> AttributeRecord:
        """Attribute record of a code, as a copy callers are free to mutate.

        Raises:
            NotFoundError: If the code has no record.
        """
        code = normalize(territory_code)
        try:
            record = self._records[code]
        except KeyError:
            raise NotFoundError(
                f"territory code: {code} has no attribute record"
            ) from None
        return record.model_copy(deep=True)

    def __contains__(self, territory_code: object) -> bool:
        if not isinstance(territory_code, (str, Enum)):
            return False
        return self.is_valid(territory_code)

    def __len__(self) -> int:
        return len(self._codes)
