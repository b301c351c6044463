"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (caller supplied an unusable value)
        2000-2999: Formatting errors (locale formatting and fragment extraction)
    """

    # Input errors (1000-1999)
    INVALID_VALUE = 1001
    UNSUPPORTED_CURRENCY = 1002
    UNSUPPORTED_LOCALE = 1003

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001
    UNPARSABLE_FORMAT = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Offending input rendered as text (empty if not applicable)
        locale_code: Locale in effect when the error occurred (empty if not applicable)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str = ""
    locale_code: str = ""
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNSUPPORTED_CURRENCY]: Unknown ISO 4217 currency code 'ABC'
              = help: Use a 3-letter uppercase ISO 4217 code (e.g., 'USD', 'EUR')

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.locale_code:
            lines.append(f"  = locale: {self.locale_code}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
