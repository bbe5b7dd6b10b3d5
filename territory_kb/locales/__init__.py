"""Locale collaborators for the territory knowledge base.

- LocaleResolver: canonicalizes a locale name or LanguageTag to a known locale
- get_current_locale / set_current_locale / use_locale: context-local default
"""
