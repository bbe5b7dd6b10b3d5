"""Per-locale territory display names with reverse (name -> code) lookup.

Each locale owns one ``LocaleNameTable``. The inverted index is built
eagerly so translation never scans a table. Name matching is byte-exact:
no case folding, no Unicode normalization.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from territory_kb.data.codes import normalize, normalize_keys
from territory_kb.errors import AmbiguousError, LocaleError, NotFoundError

logger = logging.getLogger(__name__)


class LocaleNameTable:
    """Display names of territories in one locale."""

    def __init__(self, locale: str, names: Mapping[str, str]) -> None:
        self.locale = locale
        self._names: dict[str, str] = {}
        self._codes_by_name: dict[str, tuple[str, ...]] = {}

        for canonical, name in normalize_keys(names, f"locale {locale!r}").items():
            self._names[canonical] = name
            self._codes_by_name[name] = self._codes_by_name.get(name, ()) + (canonical,)

        if self.ambiguous_names:
            logger.warning(
                "Locale %s has %d display names shared by several codes; "
                "translation resolves them to the first code in table order",
                locale, len(self.ambiguous_names),
            )

    def available_territories(self) -> list[str]:
        """Codes with a name in this locale, in declaration order."""
        return list(self._names)

    def known_territories(self) -> dict[str, str]:
        return dict(self._names)

    def name_for(self, territory_code: str | Enum) -> str:
        """Display name of a code.

        Raises:
            NotFoundError: If the code has no name in this locale.
        """
        code = normalize(territory_code)
        try:
            return self._names[code]
        except KeyError:
            raise NotFoundError(
                f"territory code: {code} has no name in locale '{self.locale}'"
            ) from None

    def codes_for(self, name: str) -> tuple[str, ...]:
        """All codes whose display name is exactly ``name``, in table order."""
        return self._codes_by_name.get(name, ())

    def code_for(self, name: str, *, strict: bool = False) -> str:
        """Code whose display name is exactly ``name``.

        Args:
            name: Localized display name.
            strict: Raise instead of picking the first match when several
                codes share the name.

        Raises:
            NotFoundError: If no code has that name.
            AmbiguousError: If strict and the name is shared.
        """
        codes = self.codes_for(name)
        if not codes:
            raise NotFoundError(
                f"territory name '{name}' not found in locale '{self.locale}'"
            )
        if strict and len(codes) > 1:
            raise AmbiguousError(name, self.locale, codes)
        return codes[0]

    @property
    def ambiguous_names(self) -> dict[str, tuple[str, ...]]:
        return {
            name: codes for name, codes in self._codes_by_name.items()
            if len(codes) > 1
        }

    def __contains__(self, territory_code: object) -> bool:
        if not isinstance(territory_code, (str, Enum)):
            return False
        return normalize(territory_code) in self._names

    def __len__(self) -> int:
        return len(self._names)


class LocaleNameTables:
    """All locale name tables, keyed by canonical locale."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]]) -> None:
        self._tables: dict[str, LocaleNameTable] = {
            locale: LocaleNameTable(locale, names)
            for locale, names in tables.items()
        }
        logger.debug("Built name tables for %d locales", len(self._tables))

    @property
    def known_locales(self) -> list[str]:
        return list(self._tables)

    def table(self, locale: str) -> LocaleNameTable:
        """Name table of a canonical locale.

        Raises:
            LocaleError: If no table was built for the locale.
        """
        try:
            return self._tables[locale]
        except KeyError:
            raise LocaleError(
                f"no territory names for locale '{locale}'. "
                f"Known locales: {sorted(self._tables)}"
            ) from None

    def translate(
        self,
        name: str,
        from_locale: str,
        to_locale: str,
        *,
        strict: bool = False,
    ) -> str:
        """Translate a display name between two canonical locales.

        'United Kingdom', 'en', 'pt' -> 'Reino Unido'.

        Raises:
            NotFoundError: If the name is unknown in from_locale or the
                resolved code has no name in to_locale.
            AmbiguousError: If strict and the name is shared in from_locale.
        """
        code = self.table(from_locale).code_for(name, strict=strict)
        return self.table(to_locale).name_for(code)

    def __contains__(self, locale: object) -> bool:
        return locale in self._tables
