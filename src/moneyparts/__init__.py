"""moneyparts - Locale-aware, semantically tagged currency fragments.

Formats a monetary amount with CLDR rules (via Babel) and decomposes the
result into individually addressable parts: sign operator, currency code,
currency symbol, number body, and magnitude-tagged digit groups. Rendering
is left to the caller; every function returns plain immutable data.

Public API:
    extract_fragments - (locale, currency, raw) -> (FragmentSet, reverse)
    decompose_granular - number fragment -> tuple[GranularToken, ...]
    format_money - Full pipeline -> MoneyParts
    normalize_value - raw -> MoneyValue
    LocaleContext - Cached locale configuration with currency formatting

Exceptions:
    MoneyError - Base exception class
    InvalidValueError - Unparsable amount
    UnsupportedCurrencyError - Unknown ISO 4217 code
    UnsupportedLocaleError - Unknown locale
    UnparsableFormatError - Formatted string holds no digits (internal)

Submodules:
    moneyparts.parsing - Normalizer, fragment scanner, granular decomposer
    moneyparts.runtime - LocaleContext over babel.numbers
    moneyparts.introspection - ISO 4217 validity set and currency lookups
    moneyparts.diagnostics - Error types, codes, and message templates
"""

from .constants import DEFAULT_LOCALE
from .diagnostics import (
    FormattingError,
    InvalidValueError,
    MoneyError,
    UnparsableFormatError,
    UnsupportedCurrencyError,
    UnsupportedLocaleError,
)
from .enums import CurrencyDisplay, MagnitudeName, Sign, TokenType
from .model import FragmentSet, GranularToken, MoneyParts, MoneyValue
from .money import decompose_granular, extract_fragments, format_money
from .parsing import normalize_value
from .runtime import LocaleContext

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("moneyparts")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "CurrencyDisplay",
    "FormattingError",
    "FragmentSet",
    "GranularToken",
    "InvalidValueError",
    "LocaleContext",
    "MagnitudeName",
    "MoneyError",
    "MoneyParts",
    "MoneyValue",
    "Sign",
    "TokenType",
    "UnparsableFormatError",
    "UnsupportedCurrencyError",
    "UnsupportedLocaleError",
    "__version__",
    "decompose_granular",
    "extract_fragments",
    "format_money",
    "normalize_value",
]
