"""ISO standards introspection backed by Babel CLDR data.

   - ISO 4217 currency codes, symbols, names, and decimal places
   - The currency-code validity set checked before formatting

Python 3.13+.
"""

from .iso import (
    CurrencyCode,
    CurrencyInfo,
    clear_iso_cache,
    get_currency,
    is_valid_currency_code,
    list_currencies,
    list_currency_codes,
    require_currency_code,
)

__all__ = [
    "CurrencyCode",
    "CurrencyInfo",
    "clear_iso_cache",
    "get_currency",
    "is_valid_currency_code",
    "list_currencies",
    "list_currency_codes",
    "require_currency_code",
]
