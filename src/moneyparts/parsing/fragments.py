"""Fragment extraction: formatted currency string to semantic parts.

Reverse-engineers the opaque string produced by the locale formatter into
operator, currency, symbol, and number fragments, and infers whether the
locale lays the number out before the symbol.

Scanner:
    An explicit two-state machine walks the string once:

    IN_SYMBOL --digit--> IN_NUMBER      (first digit only)
    IN_NUMBER --digit--> IN_NUMBER
    IN_NUMBER --separator run + digit--> IN_NUMBER
    IN_NUMBER --anything else--> IN_SYMBOL

    Characters seen in IN_SYMBOL accumulate in a leading buffer (before the
    number run) or a trailing buffer (after it). Only the first number run
    is the number fragment; any later digits stay in the symbol text.

Separators:
    "." and "," are punctuation separators in every locale and stay in the
    number run even when trailing, the way "(\\d+[.,]*)+" matches them.
    Locale-specific separators (U+202F in fr_FR, U+00A0 in sv_SE, U+2019 in
    de_CH) join the number run only when a digit follows, so the space
    between number and symbol is never swallowed.

Python 3.13+. Zero external dependencies.
"""

import unicodedata
from dataclasses import dataclass
from enum import StrEnum

from moneyparts.constants import DEFAULT_SEPARATORS
from moneyparts.diagnostics import ErrorTemplate, UnparsableFormatError
from moneyparts.enums import Sign
from moneyparts.model import FragmentSet

__all__ = [
    "ScanResult",
    "ScanState",
    "scan_formatted",
    "split_fragments",
    "trim_blank",
]


class ScanState(StrEnum):
    """State of the formatted-string scanner."""

    IN_SYMBOL = "in_symbol"
    IN_NUMBER = "in_number"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Raw buffers produced by scan_formatted().

    Attributes:
        leading: Text before the number run (untrimmed)
        number: The number run
        trailing: Text after the number run (untrimmed)
    """

    leading: str
    number: str
    trailing: str


def _is_blank(char: str) -> bool:
    """Whitespace or invisible format character (NBSP, NNBSP, RLM, ...)."""
    return char.isspace() or unicodedata.category(char) in ("Zs", "Cf")


def trim_blank(text: str) -> str:
    """Strip whitespace and invisible format characters from both ends.

    str.strip() misses Cf characters such as U+200F RIGHT-TO-LEFT MARK that
    CLDR places around symbols in bidi locales.

    Example:
        >>> trim_blank("\\u200f\\xa0€ ")
        '€'
    """
    start, end = 0, len(text)
    while start < end and _is_blank(text[start]):
        start += 1
    while end > start and _is_blank(text[end - 1]):
        end -= 1
    return text[start:end]


def _punctuation_prefix(run: str) -> str:
    """Longest prefix of run made of the always-on separators."""
    end = 0
    while end < len(run) and run[end] in DEFAULT_SEPARATORS:
        end += 1
    return run[:end]


def scan_formatted(formatted: str, *, separators: str = DEFAULT_SEPARATORS) -> ScanResult:
    """Split a formatted currency string into symbol and number buffers.

    Args:
        formatted: Locale-formatted currency string (e.g. "1.234,56\\xa0€")
        separators: Characters allowed between digit groups; "." and ","
            are always included

    Returns:
        ScanResult with leading, number, and trailing buffers

    Raises:
        UnparsableFormatError: If formatted contains no digits
    """
    if not any(char.isdecimal() for char in formatted):
        raise UnparsableFormatError(
            ErrorTemplate.unparsable_format(formatted), formatted=formatted
        )

    allowed = DEFAULT_SEPARATORS + separators
    leading: list[str] = []
    number: list[str] = []
    trailing: list[str] = []

    state = ScanState.IN_SYMBOL
    seen_number = False
    pos = 0
    length = len(formatted)

    while pos < length:
        char = formatted[pos]
        match state:
            case ScanState.IN_SYMBOL:
                if char.isdecimal() and not seen_number:
                    state = ScanState.IN_NUMBER
                    seen_number = True
                    continue
                (trailing if seen_number else leading).append(char)
                pos += 1

            case ScanState.IN_NUMBER:
                if char.isdecimal():
                    number.append(char)
                    pos += 1
                    continue
                if char not in allowed:
                    state = ScanState.IN_SYMBOL
                    continue

                run_end = pos
                while run_end < length and formatted[run_end] in allowed:
                    run_end += 1
                run = formatted[pos:run_end]

                if run_end < length and formatted[run_end].isdecimal():
                    number.append(run)
                    pos = run_end
                    continue

                # Trailing run: keep punctuation, hand the rest to the symbol
                kept = _punctuation_prefix(run)
                number.append(kept)
                pos += len(kept)
                state = ScanState.IN_SYMBOL

    return ScanResult(
        leading="".join(leading),
        number="".join(number),
        trailing="".join(trailing),
    )


def split_fragments(
    formatted: str,
    currency: str,
    sign: Sign,
    *,
    separators: str = DEFAULT_SEPARATORS,
) -> tuple[FragmentSet, bool]:
    """Decompose a formatted currency string into fragments and layout order.

    The literal currency code is removed from the symbol text: it is carried
    out-of-band in ``FragmentSet.currency`` because not every display style
    prints it.

    Args:
        formatted: Canonical string for the absolute magnitude
        currency: ISO 4217 code supplied by the caller (copied unchanged)
        sign: Sign of the original value
        separators: Extra locale-specific separator characters

    Returns:
        Tuple of (fragments, reverse). reverse is True when the number run
        precedes the symbol; False for symbol-first layouts and for an
        empty symbol.

    Raises:
        UnparsableFormatError: If formatted contains no digits

    Examples:
        >>> fragments, reverse = split_fragments("$1,234.56", "USD", Sign.POSITIVE)
        >>> fragments.symbol, fragments.number, reverse
        ('$', '1,234.56', False)

        >>> fragments, reverse = split_fragments("1.234,56\\xa0€", "EUR", Sign.NEGATIVE)
        >>> fragments.operator, fragments.symbol, reverse
        ('-', '€', True)
    """
    scan = scan_formatted(formatted, separators=separators)

    leading = trim_blank(scan.leading.replace(currency, ""))
    trailing = trim_blank(scan.trailing.replace(currency, ""))

    fragments = FragmentSet(
        operator="-" if sign is Sign.NEGATIVE else "+",
        currency=currency,
        symbol=leading + trailing,
        number=scan.number,
    )
    reverse = not leading and bool(trailing)
    return fragments, reverse
