"""Current-locale accessor.

The current locale is context-local (threads and asyncio tasks each see
their own override) and falls back to the ``DEFAULT_LOCALE`` setting.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from territory_kb.config.settings import get_settings

_current_locale: ContextVar[str | None] = ContextVar(
    "territory_kb_current_locale", default=None,
)


def get_current_locale(default: str | None = None) -> str:
    """Locale set for this context, else ``default``, else the setting."""
    locale = _current_locale.get()
    if locale is not None:
        return locale
    if default is not None:
        return default
    return get_settings().DEFAULT_LOCALE


def set_current_locale(locale: str | None) -> None:
    """Set (or with None, clear) the locale for the current context."""
    _current_locale.set(locale)


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """Temporarily switch the current locale.

    with use_locale("pt"):
        service.name_for_or_raise("GB")  # 'Reino Unido'
    """
    token = _current_locale.set(locale)
    try:
        yield locale
    finally:
        _current_locale.reset(token)
