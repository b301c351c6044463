"""ISO 4217 introspection API via Babel CLDR data.

Provides the currency-code validity set the pipeline checks before
formatting, plus type-safe currency lookups. All types are immutable,
hashable, and thread-safe. Results are cached for performance.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TypeIs

from babel import Locale, UnknownLocaleError
from babel.core import get_global
from babel.numbers import get_currency_name, get_currency_precision, get_currency_symbol

from moneyparts.constants import (
    ISO_CURRENCY_CODE_LENGTH,
    ISO_NON_TERRITORY_CODES,
    MAX_LOCALE_CACHE_SIZE,
)
from moneyparts.diagnostics import ErrorTemplate, UnsupportedCurrencyError
from moneyparts.locale_utils import normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "CurrencyInfo",
    # Lookup functions
    "get_currency",
    "list_currencies",
    "list_currency_codes",
    # Type guards
    "is_valid_currency_code",
    "require_currency_code",
    # Cache management
    "clear_iso_cache",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """ISO 4217 currency data with localized presentation.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: ISO 4217 currency code (e.g., 'USD', 'EUR').
        name: Localized display name (depends on locale used for lookup).
        symbol: Locale-specific symbol (e.g., '$', 'R$', 'USD').
        decimal_digits: Standard decimal places (0, 2, 3, or 4).
    """

    code: CurrencyCode
    name: str
    symbol: str
    decimal_digits: int


# ============================================================================
# BABEL INTERFACE
# ============================================================================


def _is_code_shaped(value: str) -> bool:
    """Check the ISO 4217 shape: exactly 3 uppercase ASCII letters."""
    return (
        len(value) == ISO_CURRENCY_CODE_LENGTH
        and value.isascii()
        and value.isalpha()
        and value.isupper()
    )


@lru_cache(maxsize=1)
def _get_currency_codes() -> frozenset[CurrencyCode]:
    """All ISO 4217 codes currently in use.

    Every currency still active in some territory (legal tender and fund
    codes such as USN or CLF), plus the X-codes no territory issues.
    Withdrawn currencies (DEM, FRF, ...) are excluded.
    """
    # Data format: territory -> list of (code, start_date, end_date, tender)
    # end_date=None means still active
    territory_currencies = get_global("territory_currencies")
    active = {
        entry[0]
        for entries in territory_currencies.values()
        for entry in entries
        if entry[2] is None
    }
    active |= ISO_NON_TERRITORY_CODES
    return frozenset(code for code in active if _is_code_shaped(code))


def _get_babel_currency_name(code: str, locale_str: str) -> str | None:
    """Get localized currency name from Babel.

    Returns None if the locale cannot be resolved.
    """
    try:
        return get_currency_name(code, locale=Locale.parse(locale_str))
    except (UnknownLocaleError, ValueError, LookupError):
        # Unknown locale or missing data. Logic bugs (NameError, TypeError)
        # propagate.
        return None


def _get_babel_currency_symbol(code: str, locale_str: str) -> str:
    """Get localized currency symbol from Babel, or the code itself."""
    try:
        return get_currency_symbol(code, locale=Locale.parse(locale_str))
    except (UnknownLocaleError, ValueError, LookupError):
        return code


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_currency_impl(
    code_upper: str,
    locale_norm: str,
) -> CurrencyInfo | None:
    """Internal cached implementation for get_currency.

    Args:
        code_upper: Pre-uppercased ISO 4217 currency code.
        locale_norm: Pre-normalized locale string.

    Returns:
        CurrencyInfo if found, None if unknown code or locale.
    """
    if code_upper not in _get_currency_codes():
        return None

    name = _get_babel_currency_name(code_upper, locale_norm)
    if name is None:
        return None

    return CurrencyInfo(
        code=code_upper,
        name=name,
        symbol=_get_babel_currency_symbol(code_upper, locale_norm),
        decimal_digits=get_currency_precision(code_upper),
    )


def get_currency(
    code: str,
    locale: str = "en",
) -> CurrencyInfo | None:
    """Look up ISO 4217 currency by code.

    Args:
        code: ISO 4217 currency code (e.g., 'USD', 'EUR'). Case-insensitive.
        locale: Locale for name/symbol localization (default: 'en'). Accepts
            BCP-47 (en-US) or POSIX (en_US) formats; normalized internally.

    Returns:
        CurrencyInfo if found, None if unknown code.

    Thread-safe. Results cached per normalized (code, locale) pair.

    Example:
        >>> info = get_currency("JPY")
        >>> info.decimal_digits
        0
    """
    return _get_currency_impl(code.upper(), normalize_locale(locale))


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _list_currencies_impl(
    locale_norm: str,
) -> frozenset[CurrencyInfo]:
    """Internal cached implementation for list_currencies."""
    result: set[CurrencyInfo] = set()
    for code in _get_currency_codes():
        info = _get_currency_impl(code, locale_norm)
        if info is not None:
            result.add(info)
    return frozenset(result)


def list_currencies(
    locale: str = "en",
) -> frozenset[CurrencyInfo]:
    """List all known ISO 4217 currencies.

    Args:
        locale: Locale for name/symbol localization (default: 'en').

    Returns:
        Frozen set of all CurrencyInfo objects. Empty for unknown locales.

    Thread-safe. Result cached per normalized locale.
    """
    return _list_currencies_impl(normalize_locale(locale))


def list_currency_codes() -> frozenset[CurrencyCode]:
    """Return the ISO 4217 validity set used to check pipeline input."""
    return _get_currency_codes()


# ============================================================================
# TYPE GUARDS (PEP 742)
# ============================================================================


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is a valid ISO 4217 currency code.

    Validation is case-sensitive: ``"usd"`` is rejected, because fragments
    carry the caller's code unchanged.

    Args:
        value: Value to check.

    Returns:
        True if value is a known ISO 4217 currency code.
    """
    if not isinstance(value, str) or not _is_code_shaped(value):
        return False
    return value in _get_currency_codes()


def require_currency_code(value: object) -> CurrencyCode:
    """Return value unchanged if it is a valid ISO 4217 code.

    Args:
        value: Candidate currency code.

    Returns:
        The same code.

    Raises:
        UnsupportedCurrencyError: If value is not a recognized ISO 4217 code.
    """
    if not is_valid_currency_code(value):
        raise UnsupportedCurrencyError(
            ErrorTemplate.unsupported_currency(value), currency=value
        )
    return value


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_iso_cache() -> None:
    """Clear all ISO introspection caches.

    Call this if you need to free memory. Thread-safe.
    """
    _get_currency_codes.cache_clear()
    _get_currency_impl.cache_clear()
    _list_currencies_impl.cache_clear()
