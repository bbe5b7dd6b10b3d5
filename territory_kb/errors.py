"""Error hierarchy for territory lookups.

Lookup failures surface as ``NotFoundError`` (or its ``InvalidTerritoryError``
subclass for codes outside the territory universe). ``LocaleError`` comes
from locale resolution and is passed through the query layer unchanged.
"""

from __future__ import annotations


class TerritoryError(Exception):
    """Base class for all territory knowledge base errors."""


class NotFoundError(TerritoryError, LookupError):
    """A code is valid but absent from the table being queried."""


class InvalidTerritoryError(NotFoundError):
    """A code does not belong to the territory universe."""

    def __init__(self, territory_code: str) -> None:
        self.territory_code = territory_code
        super().__init__(f"territory code: {territory_code} not available")


class AmbiguousError(TerritoryError):
    """Several codes share the same display name in one locale."""

    def __init__(self, name: str, locale: str, codes: tuple[str, ...]) -> None:
        self.name = name
        self.locale = locale
        self.codes = codes
        super().__init__(
            f"name '{name}' is ambiguous in locale '{locale}': "
            f"{', '.join(codes)}"
        )


class LocaleError(TerritoryError, ValueError):
    """A locale identifier could not be resolved to a known locale."""


class DatasetError(TerritoryError, ValueError):
    """The dataset handed to the knowledge base is inconsistent."""
