"""Hypothesis strategies for moneyparts property-based testing.

Strategies are organized by domain:

- money: amounts, raw value shapes, locale/currency pairs, number fragments

Usage:
    from tests.strategies import currency_amounts, locale_currency_pairs
    from tests.strategies.money import number_fragments

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_amounts, raw_values, number_fragments
"""

from .money import (
    FORMATTING_LOCALES,
    currency_amounts,
    locale_currency_pairs,
    number_fragments,
    raw_values,
)

__all__ = [
    "FORMATTING_LOCALES",
    "currency_amounts",
    "locale_currency_pairs",
    "number_fragments",
    "raw_values",
]
