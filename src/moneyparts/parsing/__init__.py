"""Decomposition of locale-formatted currency strings.

This package provides the inverse of currency formatting at the level of
display structure:
- Value normalization: raw amount -> sign and magnitude
- Fragment extraction: formatted string -> operator, currency, symbol, number
- Granular decomposition: number fragment -> tagged digit groups and separators

All functions are pure and thread-safe.

Public API:
    normalize_value - Returns MoneyValue, raises InvalidValueError
    split_fragments - Returns tuple[FragmentSet, bool]
    decompose_granular - Returns tuple[GranularToken, ...]

Python 3.13+.
"""

from .fragments import ScanResult, ScanState, scan_formatted, split_fragments, trim_blank
from .granular import decompose_granular, split_number
from .value import RawValue, normalize_value

__all__ = [
    "RawValue",
    "ScanResult",
    "ScanState",
    "decompose_granular",
    "normalize_value",
    "scan_formatted",
    "split_fragments",
    "split_number",
    "trim_blank",
]
