# ABOUTME: Internationalization package exports
# ABOUTME: Exports label lookup helpers for indicator text

from .translations import DEFAULT_LOCALE, language_of, normalize_locale, supported_locales, translate

__all__ = [
    "DEFAULT_LOCALE",
    "language_of",
    "normalize_locale",
    "supported_locales",
    "translate",
]
