"""Value normalization: raw amount to sign and magnitude.

Accepts the raw input a caller hands to the pipeline (number or numeral
string) and derives an immutable MoneyValue. Decimal arithmetic throughout;
floats are read through their shortest repr so 1234.56 stays 1234.56.

Python 3.13+.
"""

from decimal import Decimal, InvalidOperation

from moneyparts.diagnostics import ErrorTemplate, InvalidValueError
from moneyparts.enums import Sign
from moneyparts.model import MoneyValue

__all__ = ["RawValue", "normalize_value"]

type RawValue = int | float | Decimal | str
"""Raw amount accepted by the pipeline."""


def _to_decimal(raw: object) -> Decimal:
    """Convert raw input to Decimal without rounding."""
    match raw:
        case bool():
            # bool is an int subclass; True/False are not amounts
            reason = "booleans are not amounts"
        case Decimal():
            return raw
        case int():
            return Decimal(raw)
        case float():
            return Decimal(repr(raw))
        case str() if raw.strip():
            text = raw.strip()
            # Decimal() also reads "1_000" and non-ASCII digits such as "\u0661\u0662"
            if not text.isascii() or "_" in text:
                reason = "not a base-10 numeral"
            else:
                try:
                    return Decimal(text)
                except InvalidOperation as e:
                    diagnostic = ErrorTemplate.invalid_value(raw, "not a base-10 numeral")
                    raise InvalidValueError(diagnostic, value=raw) from e
        case str():
            reason = "empty string"
        case _:
            reason = f"unsupported type {type(raw).__name__}"
    raise InvalidValueError(ErrorTemplate.invalid_value(raw, reason), value=raw)


def normalize_value(raw: RawValue) -> MoneyValue:
    """Coerce a raw amount to sign and absolute magnitude.

    Args:
        raw: int, float, Decimal, or numeral string (optionally signed,
            surrounding whitespace tolerated)

    Returns:
        MoneyValue with sign NEGATIVE iff raw < 0

    Raises:
        InvalidValueError: If raw is not a finite base-10 number

    Examples:
        >>> normalize_value("-1234.56")
        MoneyValue(sign=<Sign.NEGATIVE: 'negative'>, magnitude=Decimal('1234.56'))

        >>> normalize_value(0).sign
        <Sign.POSITIVE: 'positive'>
    """
    value = _to_decimal(raw)
    if not value.is_finite():
        diagnostic = ErrorTemplate.invalid_value(raw, "NaN and Infinity are not amounts")
        raise InvalidValueError(diagnostic, value=raw)

    # Decimal("-0") compares equal to zero: positive
    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return MoneyValue(sign=sign, magnitude=value.copy_abs())
