"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel import Locale, UnknownLocaleError

from moneyparts.constants import MAX_LOCALE_CACHE_SIZE
from moneyparts.diagnostics import ErrorTemplate, UnsupportedLocaleError

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the entry point using this function,
    then uses the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _parse_locale(normalized: str) -> Locale:
    return Locale.parse(normalized)


def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        UnsupportedLocaleError: If the locale is unknown to CLDR or malformed

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    normalized = normalize_locale(locale_code)
    try:
        return _parse_locale(normalized)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        diagnostic = ErrorTemplate.unsupported_locale(locale_code, str(e))
        raise UnsupportedLocaleError(diagnostic, locale_code=locale_code) from e


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache.

    Use this method to free memory or reset state in tests.
    """
    _parse_locale.cache_clear()
