"""Shared constants for moneyparts.

This module provides centralized configuration constants used across the
parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Explicit default locale (never read from the environment)
- Cache limits: Memory bounds for caching subsystems
- Currency codes: ISO 4217 shape constraints
- Number tokens: Separator characters and magnitude labels

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Currency codes
    "ISO_CURRENCY_CODE_LENGTH",
    "ISO_NON_TERRITORY_CODES",
    # Number tokens
    "DEFAULT_SEPARATORS",
    "MAGNITUDE_NAMES",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when the caller does not pass one.
# Pipeline entry points use this when the caller passes None; the host environment
# locale (LANG, LC_ALL, locale.getlocale()) is never consulted.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances and Babel Locale objects kept
# in memory. One entry per normalized locale code.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CURRENCY CODES
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Current ISO 4217 codes that no territory issues (X-codes).
ISO_NON_TERRITORY_CODES: frozenset[str] = frozenset({
    "XAG", "XAU", "XPD", "XPT",
    "XBA", "XBB", "XBC", "XBD",
    "XDR", "XSU", "XUA",
    "XTS", "XXX",
})

# ============================================================================
# NUMBER TOKENS
# ============================================================================

# Punctuation treated as separators in every locale.
# Locale-specific decimal and group symbols (U+202F in fr_FR, U+2019 in de_CH)
# are added on top of these by the pipeline.
DEFAULT_SEPARATORS: str = ".,"

# Integer digit-group labels by grouping position, units group first.
# Position 1 is the units group ("hundred"); anything past the table is
# labeled "unknown". Assumes 3-digit grouping.
MAGNITUDE_NAMES: tuple[str, ...] = (
    "hundred",
    "thousand",
    "million",
    "billion",
    "trillion",
)
