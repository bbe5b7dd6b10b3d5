"""Territory identifier canonicalization.

Every code used as a lookup key goes through ``normalize`` first, both when
tables are built and when they are queried.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TypeVar

from territory_kb.errors import DatasetError

V = TypeVar("V")


def normalize(territory_code: str | Enum) -> str:
    """Canonicalize a territory identifier.

    'gb' -> 'GB', TerritoryEnum.GB -> 'GB'. No validity check is made.
    """
    if isinstance(territory_code, Enum):
        territory_code = territory_code.value
    return str(territory_code).upper()


def normalize_many(territory_codes: Iterable[str | Enum]) -> list[str]:
    """Normalize a sequence of codes, preserving order."""
    return [normalize(code) for code in territory_codes]


def normalize_keys(mapping: Mapping[str, V], table: str) -> dict[str, V]:
    """Re-key a mapping by canonical code, preserving order.

    Raises:
        DatasetError: If two keys canonicalize to the same code
            ('gb' and 'GB').
    """
    result: dict[str, V] = {}
    originals: dict[str, str] = {}
    for key, value in mapping.items():
        code = normalize(key)
        if code in originals:
            raise DatasetError(
                f"{table}: keys '{originals[code]}' and '{key}' both "
                f"normalize to territory code {code}"
            )
        originals[code] = key
        result[code] = value
    return result
