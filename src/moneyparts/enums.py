"""Enumerations for moneyparts type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Sign(StrEnum):
    """Sign of a monetary amount.

    StrEnum provides automatic string conversion: str(Sign.NEGATIVE) == "negative"
    """

    POSITIVE = "positive"
    """Zero or greater."""

    NEGATIVE = "negative"
    """Strictly less than zero."""


class TokenType(StrEnum):
    """Kind of granular token in a number fragment.

    Values match the attribute names used by rendering layers
    (e.g. ``type="separator-decimal"``).
    """

    DECIMAL = "decimal"
    """Fractional digits: 1,234.[56]"""

    SEPARATOR_DECIMAL = "separator-decimal"
    """Separator between integer and fraction: 1,234[.]56"""

    INTEGER = "integer"
    """Integer digit group: [1],[234].56"""

    SEPARATOR_INTEGER = "separator-integer"
    """Grouping separator between integer groups: 1[,]234.56"""


class MagnitudeName(StrEnum):
    """Magnitude label of an integer digit group.

    Derived from the group's position counted from the units group, so it
    assumes 3-digit grouping.
    """

    HUNDRED = "hundred"
    THOUSAND = "thousand"
    MILLION = "million"
    BILLION = "billion"
    TRILLION = "trillion"
    UNKNOWN = "unknown"


class CurrencyDisplay(StrEnum):
    """How the currency is shown in the canonical formatted string."""

    SYMBOL = "symbol"
    """Locale symbol via the CLDR standard pattern: $1,234.56"""

    CODE = "code"
    """ISO code via the double currency sign pattern: USD1,234.56"""

    NAME = "name"
    """Localized long name: 1,234.56 US dollars"""


__all__ = [
    "CurrencyDisplay",
    "MagnitudeName",
    "Sign",
    "TokenType",
]
