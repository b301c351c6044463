"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def invalid_value(value: object, reason: str) -> Diagnostic:
        """Raw amount cannot be read as a finite decimal.

        Args:
            value: The raw input as received
            reason: Why the value was rejected

        Returns:
            Diagnostic for INVALID_VALUE
        """
        msg = f"Invalid monetary value {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            hint="Pass an int, float, Decimal, or a base-10 numeral string (e.g., '-1234.56')",
            input_value=repr(value),
        )

    @staticmethod
    def negative_magnitude(value: object) -> Diagnostic:
        """Formatter called with a signed amount instead of a magnitude.

        Args:
            value: The negative amount

        Returns:
            Diagnostic for INVALID_VALUE
        """
        msg = f"Currency magnitude must be non-negative, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            hint="Normalize the value first and format its absolute magnitude",
            input_value=repr(value),
        )

    @staticmethod
    def unsupported_currency(currency: object) -> Diagnostic:
        """Currency code is not a recognized ISO 4217 code.

        Args:
            currency: The rejected currency code

        Returns:
            Diagnostic for UNSUPPORTED_CURRENCY
        """
        msg = f"Unknown ISO 4217 currency code {currency!r}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_CURRENCY,
            message=msg,
            hint="Use a 3-letter uppercase ISO 4217 code (e.g., 'USD', 'EUR', 'JPY')",
            input_value=str(currency),
        )

    @staticmethod
    def unsupported_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale cannot be resolved from CLDR data.

        Args:
            locale_code: The unknown locale code
            reason: Underlying Babel error text

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en-US', 'de-DE', 'pt-BR') or pass fallback_locale",
            locale_code=locale_code,
        )

    @staticmethod
    def formatting_failed(currency: str, value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel failed to format a currency amount.

        Args:
            currency: ISO 4217 code being formatted
            value: Magnitude being formatted
            locale_code: Locale of the formatting context
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Currency formatting failed for '{currency} {value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            input_value=str(value),
            locale_code=locale_code,
        )

    @staticmethod
    def unparsable_format(formatted: str) -> Diagnostic:
        """Formatted currency string holds no digits.

        Args:
            formatted: The string produced by the formatter

        Returns:
            Diagnostic for UNPARSABLE_FORMAT
        """
        msg = f"Formatted currency string {formatted!r} contains no digits"
        return Diagnostic(
            code=DiagnosticCode.UNPARSABLE_FORMAT,
            message=msg,
            hint="This is an internal error; report the locale and currency that produced it",
            input_value=formatted,
        )
