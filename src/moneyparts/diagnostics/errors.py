"""moneyparts exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Error kinds:
    - Caller input errors (InvalidValueError, UnsupportedCurrencyError) are
      raised before any formatting happens and are never retried.
    - UnsupportedLocaleError is recoverable: callers opt into a fallback
      locale explicitly.
    - UnparsableFormatError signals an internal invariant violation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormattingError",
    "InvalidValueError",
    "MoneyError",
    "UnparsableFormatError",
    "UnsupportedCurrencyError",
    "UnsupportedLocaleError",
]


class MoneyError(Exception):
    """Base exception for all moneyparts errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidValueError(MoneyError, ValueError):
    """Raw amount cannot be parsed as a finite decimal.

    Raised for non-numeric strings, NaN, Infinity and unsupported types.

    Attributes:
        value: The rejected raw input
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class UnsupportedCurrencyError(MoneyError, ValueError):
    """Currency code is not a recognized ISO 4217 code.

    Attributes:
        currency: The rejected currency code
    """

    def __init__(self, message: str | Diagnostic, *, currency: object = None) -> None:
        super().__init__(message)
        self.currency = currency


class UnsupportedLocaleError(MoneyError, LookupError):
    """Locale cannot be resolved from CLDR data.

    The pipeline never substitutes a locale on its own; pass
    ``fallback_locale`` to opt into recovery.

    Attributes:
        locale_code: The locale code that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class UnparsableFormatError(MoneyError):
    """Formatted currency string contains no digits.

    Unreachable for finite magnitudes; indicates a logic or Babel bug.

    Attributes:
        formatted: The string that could not be decomposed
    """

    def __init__(self, message: str | Diagnostic, *, formatted: str = "") -> None:
        super().__init__(message)
        self.formatted = formatted


class FormattingError(MoneyError):
    """Raised when Babel fails to format a currency amount.

    Wraps the underlying Babel or decimal error as ``__cause__``. Not raised
    for finite non-negative magnitudes in a known currency.
    """
