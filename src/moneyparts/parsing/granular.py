"""Granular decomposition of a number fragment into tagged tokens.

Splits a number fragment such as "1,234,567.89" into digit groups and
separators and labels each one by position, counted from the right:

    reversed index 0      -> decimal             ("89")
    reversed index 1      -> separator-decimal   (".")
    even reversed index   -> integer + magnitude ("567" hundred, "234" thousand, ...)
    odd reversed index    -> separator-integer   (",")

Fraction detection:
    Position alone cannot tell "1,234" (one thousand two hundred
    thirty-four) from "1,234" (one and 234 thousandths). The fraction is
    considered present only when the fragment has a separator and, if the
    caller knows the locale's decimal symbol, the rightmost separator run
    equals it. Without a fraction the labels shift by two positions, so the
    units group is integer/hundred and no decimal tokens are produced.
    Without a decimal symbol a fragment that has separators keeps the
    positional rule.

Known limitation:
    Magnitude names assume 3-digit grouping. Locales with 2-digit secondary
    grouping (en_IN "12,34,567.89") split correctly but "12" is labeled
    million.

Python 3.13+. Zero external dependencies.
"""

import re
from functools import lru_cache

from moneyparts.constants import DEFAULT_SEPARATORS, MAGNITUDE_NAMES
from moneyparts.enums import MagnitudeName, TokenType
from moneyparts.model import GranularToken

__all__ = ["decompose_granular", "split_number"]


@lru_cache(maxsize=64)
def _separator_pattern(separators: str) -> re.Pattern[str]:
    """Compile a splitter that keeps separator runs as list items."""
    return re.compile(f"([{re.escape(separators)}]+)")


def split_number(number: str, *, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split a number fragment, interleaving digit groups and separator runs.

    Example:
        >>> split_number("1.234.567,89")
        ['1', '.', '234', '.', '567', ',', '89']
    """
    return _separator_pattern(DEFAULT_SEPARATORS + separators).split(number)


def _magnitude_for(index: int) -> MagnitudeName:
    position = index // 2
    if 1 <= position <= len(MAGNITUDE_NAMES):
        return MagnitudeName(MAGNITUDE_NAMES[position - 1])
    return MagnitudeName.UNKNOWN


def _classify(index: int, text: str) -> GranularToken:
    """Classify one element by its index in the reversed sequence."""
    if index == 0:
        return GranularToken(text=text, type=TokenType.DECIMAL)
    if index == 1:
        return GranularToken(text=text, type=TokenType.SEPARATOR_DECIMAL)
    if index % 2 == 0:
        return GranularToken(text=text, type=TokenType.INTEGER, subtype=_magnitude_for(index))
    return GranularToken(text=text, type=TokenType.SEPARATOR_INTEGER)


def _has_fraction(pieces: list[str], decimal_symbol: str | None) -> bool:
    separator_runs = pieces[1::2]
    if not separator_runs:
        return False
    if decimal_symbol is None:
        return True
    return separator_runs[-1] == decimal_symbol


def decompose_granular(
    number: str,
    *,
    decimal_symbol: str | None = None,
    separators: str = DEFAULT_SEPARATORS,
) -> tuple[GranularToken, ...]:
    """Decompose a number fragment into typed digit-group and separator tokens.

    Args:
        number: Number fragment from the extractor (e.g. "1,234,567.89")
        decimal_symbol: The locale's decimal separator, when known. Used to
            tell a grouping separator from a decimal one.
        separators: Extra locale-specific separator characters; "." and ","
            are always separators

    Returns:
        Tokens in original (left-to-right) order. Concatenating their texts
        reproduces ``number`` exactly. An empty fragment has no tokens.

    Examples:
        >>> [t.text for t in decompose_granular("1,234,567.89")]
        ['1', ',', '234', ',', '567', '.', '89']

        >>> [t.subtype for t in decompose_granular("12,345", decimal_symbol=".")][::2]
        [<MagnitudeName.THOUSAND: 'thousand'>, <MagnitudeName.HUNDRED: 'hundred'>]
    """
    if not number:
        return ()

    pieces = split_number(number, separators=separators)
    offset = 0 if _has_fraction(pieces, decimal_symbol) else 2

    tokens = [
        _classify(index + offset, text)
        for index, text in enumerate(reversed(pieces))
    ]
    tokens.reverse()
    return tuple(tokens)
