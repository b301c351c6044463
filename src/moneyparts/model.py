"""Immutable data model for decomposed monetary amounts.

Every type here is a frozen, slotted dataclass: hashable, thread-safe, and
a pure function of the pipeline inputs (locale, currency, raw value).

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from moneyparts.enums import MagnitudeName, Sign, TokenType

__all__ = [
    "FragmentSet",
    "GranularToken",
    "MoneyParts",
    "MoneyValue",
    "Operator",
]

type Operator = Literal["+", "-"]
"""Sign operator fragment."""


@dataclass(frozen=True, slots=True)
class MoneyValue:
    """Sign and absolute magnitude of a raw amount.

    Attributes:
        sign: NEGATIVE iff the raw value is strictly below zero.
        magnitude: Absolute value, never negative.
    """

    sign: Sign
    magnitude: Decimal

    @property
    def is_negative(self) -> bool:
        """True when the raw value was strictly below zero."""
        return self.sign is Sign.NEGATIVE


@dataclass(frozen=True, slots=True)
class FragmentSet:
    """Semantic parts of a formatted currency string.

    Attributes:
        operator: "-" for negative amounts, "+" otherwise.
        currency: ISO 4217 code exactly as supplied by the caller.
        symbol: Everything that is not the number run or the currency code,
            with surrounding whitespace trimmed. Empty when the display
            style shows no symbol.
        number: The digit/separator run (e.g. "1,234.56", "1.234,56").
    """

    operator: Operator
    currency: str
    symbol: str
    number: str

    @property
    def negative(self) -> bool:
        """True when the operator is "-"."""
        return self.operator == "-"

    def ordered(self, reverse: bool) -> tuple[str, ...]:
        """Return the visible fragment texts in display order.

        The operator leads only for negative amounts; the empty symbol is
        omitted.

        Args:
            reverse: Layout flag from the extractor (number before symbol)

        Returns:
            Fragment texts, e.g. ("-", "R$", "100,00") or ("1.234,56", "€")
        """
        body = (self.number, self.symbol) if reverse else (self.symbol, self.number)
        parts = tuple(part for part in body if part)
        if self.negative:
            return (self.operator, *parts)
        return parts

    def as_dict(self) -> dict[str, str]:
        """Return fragments keyed by role (operator, currency, symbol, number)."""
        return {
            "operator": self.operator,
            "currency": self.currency,
            "symbol": self.symbol,
            "number": self.number,
        }


@dataclass(frozen=True, slots=True)
class GranularToken:
    """One digit group or separator of a number fragment.

    Attributes:
        text: Exact source text of the token.
        type: Token classification.
        subtype: Magnitude label; set only for INTEGER tokens.
    """

    text: str
    type: TokenType
    subtype: MagnitudeName | None = None


@dataclass(frozen=True, slots=True)
class MoneyParts:
    """Full pipeline result handed to a presentation layer.

    Attributes:
        locale: Locale code the caller requested.
        value: Normalized sign and magnitude.
        formatted: Canonical locale-formatted string of the magnitude.
        fragments: Semantic parts of ``formatted``.
        reverse: True when the number precedes the symbol.
        tokens: Granular decomposition of ``fragments.number``.
        is_fallback: True when ``fallback_locale`` was used for formatting.
    """

    locale: str
    value: MoneyValue
    formatted: str
    fragments: FragmentSet
    reverse: bool
    tokens: tuple[GranularToken, ...]
    is_fallback: bool = False

    @property
    def negative(self) -> bool:
        """True when the amount is below zero."""
        return self.value.is_negative
