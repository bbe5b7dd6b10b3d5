"""Territory query service.

Composes the containment graph, the locale name tables and the attribute
store behind one read-only facade, and applies locale defaulting:

- locale omitted -> the current-locale accessor,
- locale given (name or LanguageTag) -> the locale resolver, whose
  LocaleError is passed through unchanged.

Fallible lookups return a ``Result``; each has an ``*_or_raise`` twin that
unwraps it and raises the original error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from functools import partial
from typing import Any, TypeVar

import structlog

from territory_kb.config.settings import Settings, get_settings
from territory_kb.data.attributes import AttributeStore
from territory_kb.data.codes import normalize
from territory_kb.data.containment import ContainmentGraph
from territory_kb.data.names import LocaleNameTables
from territory_kb.errors import InvalidTerritoryError, TerritoryError
from territory_kb.locales.current import get_current_locale
from territory_kb.locales.resolver import LocaleInput, LocaleResolver
from territory_kb.models.result import Result
from territory_kb.models.territory import AttributeRecord, TerritoryDataset

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")

TerritoryInput = str | Enum


def _attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    try:
        return Result.success(func(*args, **kwargs))
    except TerritoryError as exc:
        return Result.failure(exc)


class TerritoryService:
    """Localized territory names, containment and attributes.

    Built once from a ``TerritoryDataset``; every query afterwards is a
    read-only lookup, so one instance can serve any number of threads.
    """

    def __init__(
        self,
        dataset: TerritoryDataset,
        *,
        resolve_locale: Callable[[LocaleInput], str] | None = None,
        current_locale: Callable[[], str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Build all lookup tables.

        Args:
            dataset: Parsed territory data.
            resolve_locale: Maps a locale name or tag to a canonical locale,
                raising LocaleError on failure. Defaults to a LocaleResolver
                over the dataset's locales.
            current_locale: Returns the locale used when none is given.
            settings: Library settings; read from the environment if None.

        Raises:
            DatasetError: If containment references unknown codes and
                VALIDATE_CONTAINMENT is on.
        """
        self._settings = settings or get_settings()
        self._attributes = AttributeStore(dataset.territory_info)
        self._names = LocaleNameTables(dataset.locales)

        known_codes: set[str] | None = None
        if self._settings.VALIDATE_CONTAINMENT:
            known_codes = set(self._attributes.codes)
            for locale in self._names.known_locales:
                known_codes.update(
                    self._names.table(locale).available_territories()
                )
        else:
            logger.warning("containment_validation_disabled")
        self._graph = ContainmentGraph(dataset.containment, known_codes)

        self._resolve_locale = resolve_locale or LocaleResolver(
            self._names.known_locales,
        )
        self._current_locale = current_locale or partial(
            get_current_locale, self._settings.DEFAULT_LOCALE,
        )

        logger.info(
            "territory_service_built",
            territories=len(self._attributes),
            locales=len(self._names.known_locales),
            containment_parents=len(self._graph),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **kwargs: Any) -> TerritoryService:
        """Build from plain dicts (e.g. decoded JSON), validating the shape."""
        return cls(TerritoryDataset.model_validate(data), **kwargs)

    # -----------------------------------------------------------------
    # Validity and locales
    # -----------------------------------------------------------------

    def is_valid(self, territory_code: TerritoryInput) -> bool:
        """True if the code belongs to the territory universe.

        'GB', 'gb' and a GB enum member are all valid; 'zzz' is not.
        """
        return self._attributes.is_valid(territory_code)

    @property
    def known_locales(self) -> list[str]:
        return self._names.known_locales

    def resolve_locale(self, locale: LocaleInput | None = None) -> str:
        """Canonical locale for a name, tag, or the current locale if None.

        Raises:
            LocaleError: As raised by the locale resolver.
        """
        if locale is None:
            locale = self._current_locale()
        return self._resolve_locale(locale)

    def available_territories(self, locale: LocaleInput | None = None) -> list[str]:
        """Codes with a display name in the locale, in declaration order."""
        return self._names.table(self.resolve_locale(locale)).available_territories()

    def known_territories(self, locale: LocaleInput | None = None) -> dict[str, str]:
        """Full code -> display name table of the locale."""
        return self._names.table(self.resolve_locale(locale)).known_territories()

    # -----------------------------------------------------------------
    # Names and translation
    # -----------------------------------------------------------------

    def name_for(
        self,
        territory_code: TerritoryInput,
        locale: LocaleInput | None = None,
    ) -> Result[str]:
        """Localized display name of a territory.

        name_for('GB') -> Result(value='United Kingdom')
        name_for('GB', 'pt') -> Result(value='Reino Unido')
        """
        code = normalize(territory_code)
        if not self.is_valid(code):
            return Result.failure(InvalidTerritoryError(code))
        return _attempt(self._name_for, code, locale)

    def _name_for(self, code: str, locale: LocaleInput | None) -> str:
        return self._names.table(self.resolve_locale(locale)).name_for(code)

    def name_for_or_raise(
        self,
        territory_code: TerritoryInput,
        locale: LocaleInput | None = None,
    ) -> str:
        return self.name_for(territory_code, locale).unwrap()

    def translate(
        self,
        name: str,
        from_locale: LocaleInput,
        to_locale: LocaleInput | None = None,
        *,
        strict: bool | None = None,
    ) -> Result[str]:
        """Translate a display name from one locale to another.

        translate('United Kingdom', 'en', 'pt') -> Result(value='Reino Unido')
        translate('Reino Unido', 'pt') -> name in the current locale

        Args:
            name: Exact display name in from_locale.
            from_locale: Locale the name is written in.
            to_locale: Target locale; the current locale if None.
            strict: Fail with AmbiguousError when several codes share the
                name. Defaults to the STRICT_TRANSLATION setting.
        """
        if strict is None:
            strict = self._settings.STRICT_TRANSLATION
        return _attempt(self._translate, name, from_locale, to_locale, strict)

    def _translate(
        self,
        name: str,
        from_locale: LocaleInput,
        to_locale: LocaleInput | None,
        strict: bool,
    ) -> str:
        # Target first: an unknown target locale is reported before the source.
        target = self.resolve_locale(to_locale)
        source = self.resolve_locale(from_locale)
        return self._names.translate(name, source, target, strict=strict)

    def translate_or_raise(
        self,
        name: str,
        from_locale: LocaleInput,
        to_locale: LocaleInput | None = None,
        *,
        strict: bool | None = None,
    ) -> str:
        return self.translate(name, from_locale, to_locale, strict=strict).unwrap()

    # -----------------------------------------------------------------
    # Containment
    # -----------------------------------------------------------------

    def children(self, territory_code: TerritoryInput) -> Result[list[str]]:
        """Declared members of a region, in source order."""
        return _attempt(self._graph.children, territory_code)

    def children_or_raise(self, territory_code: TerritoryInput) -> list[str]:
        return self.children(territory_code).unwrap()

    def parents(self, territory_code: TerritoryInput) -> Result[list[str]]:
        """Regions directly containing a territory, sorted."""
        return _attempt(self._graph.parents, territory_code)

    def parents_or_raise(self, territory_code: TerritoryInput) -> list[str]:
        return self.parents(territory_code).unwrap()

    def contains(self, parent: TerritoryInput, child: TerritoryInput) -> bool:
        """Direct containment only. contains('EU', 'DK') -> True."""
        return self._graph.contains(parent, child)

    def ancestors(self, territory_code: TerritoryInput) -> list[str]:
        return self._graph.ancestors(territory_code)

    def descendants(self, territory_code: TerritoryInput) -> list[str]:
        return self._graph.descendants(territory_code)

    def is_within(self, child: TerritoryInput, ancestor: TerritoryInput) -> bool:
        """Transitive containment. is_within('GB', '150') -> True via 154."""
        return self._graph.is_within(child, ancestor)

    # -----------------------------------------------------------------
    # Attributes
    # -----------------------------------------------------------------

    def info(self, territory_code: TerritoryInput) -> Result[AttributeRecord]:
        """Attribute record of a territory.

        Fails with InvalidTerritoryError outside the universe and with
        NotFoundError for a valid code that has no record.
        """
        code = normalize(territory_code)
        if not self.is_valid(code):
            return Result.failure(InvalidTerritoryError(code))
        return _attempt(self._attributes.get, code)

    def info_or_raise(self, territory_code: TerritoryInput) -> AttributeRecord:
        return self.info(territory_code).unwrap()
