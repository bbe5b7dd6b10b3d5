"""Default locale resolution: map a locale name or tag to a known locale.

This is deliberately simple canonicalization, not full locale negotiation:

- '_' and '-' are both accepted as subtag separators,
- matching against known locales is case-insensitive,
- unknown tags fall back by dropping trailing subtags ('en-AU' -> 'en').

Applications with a real negotiation layer pass their own resolver callable
to the knowledge base instead.
"""

from __future__ import annotations

from collections.abc import Iterable

from territory_kb.errors import LocaleError
from territory_kb.models.common import TerritoryBase


class LanguageTag(TerritoryBase):
    """A parsed locale tag that already names its canonical locale.

    ``requested_locale_name`` is the identifier the caller originally asked
    for; it only appears in error messages.
    """

    cldr_locale_name: str
    requested_locale_name: str | None = None


LocaleInput = str | LanguageTag


class LocaleResolver:
    """Resolve locale identifiers against a fixed set of known locales."""

    def __init__(self, known_locales: Iterable[str]) -> None:
        self._by_key: dict[str, str] = {
            _locale_key(locale): locale for locale in known_locales
        }

    @property
    def known_locales(self) -> list[str]:
        return list(self._by_key.values())

    def __call__(self, locale: LocaleInput) -> str:
        return self.resolve(locale)

    def resolve(self, locale: LocaleInput) -> str:
        """Canonical known locale for a name or tag.

        'PT' -> 'pt', 'en_GB' -> 'en-GB' (or 'en' if en-GB is unknown).

        Raises:
            LocaleError: If neither the locale nor any fallback is known.
        """
        requested = locale.cldr_locale_name if isinstance(locale, LanguageTag) else locale
        if not isinstance(requested, str) or not requested:
            raise LocaleError(f"invalid locale identifier: {requested!r}")

        subtags = _locale_key(requested).split("-")
        while subtags:
            match = self._by_key.get("-".join(subtags))
            if match is not None:
                return match
            subtags.pop()

        raise LocaleError(
            f"locale '{requested}'{_requested_as(locale)} is not known. "
            f"Known locales: {sorted(self._by_key.values())}"
        )


def _requested_as(locale: LocaleInput) -> str:
    if isinstance(locale, LanguageTag) and locale.requested_locale_name:
        return f" (requested as '{locale.requested_locale_name}')"
    return ""


def _locale_key(locale: str) -> str:
    return locale.replace("_", "-").lower()
