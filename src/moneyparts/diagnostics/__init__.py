"""Diagnostic system for moneyparts errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormattingError,
    InvalidValueError,
    MoneyError,
    UnparsableFormatError,
    UnsupportedCurrencyError,
    UnsupportedLocaleError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormattingError",
    "InvalidValueError",
    "MoneyError",
    "UnparsableFormatError",
    "UnsupportedCurrencyError",
    "UnsupportedLocaleError",
]
