"""Property-based tests for the money decomposition pipeline.

Runs the full pipeline over locales with distinct layouts and currencies
with 0, 2, and 3 decimal digits.

Properties:
- Operator is "-" iff the amount is below zero
- Fragments reproduce the formatted string, ignoring blanks and the code
- Granular tokens reproduce the number fragment
- reverse implies a non-empty symbol
- Identical inputs give equal results

Python 3.13+.
"""

from __future__ import annotations

import unicodedata
from decimal import Decimal

from hypothesis import event, given

from moneyparts import TokenType, format_money
from tests.strategies import currency_amounts, locale_currency_pairs


def _without_blanks(text: str) -> str:
    return "".join(
        char
        for char in text
        if not (char.isspace() or unicodedata.category(char) in ("Zs", "Cf"))
    )


class TestPipelineProperties:
    """Invariants across locales, currencies, and amounts."""

    @given(locale_currency_pairs(), currency_amounts())
    def test_sign_invariant(self, pair: tuple[str, str], amount: Decimal) -> None:
        """The operator reflects the sign; the formatted string never does."""
        locale, currency = pair
        parts = format_money(locale, currency, amount)
        assert parts.fragments.negative == (amount < 0)
        assert parts.fragments.operator == ("-" if amount < 0 else "+")
        assert parts.formatted == format_money(locale, currency, amount.copy_abs()).formatted

    @given(locale_currency_pairs(), currency_amounts())
    def test_fragments_reproduce_formatted(
        self, pair: tuple[str, str], amount: Decimal
    ) -> None:
        """Symbol and number cover the formatted string in display order."""
        locale, currency = pair
        parts = format_money(locale, currency, amount)
        body = parts.fragments.ordered(parts.reverse)
        if parts.negative:
            body = body[1:]
        expected = _without_blanks(parts.formatted.replace(currency, ""))
        assert _without_blanks("".join(body)) == expected
        event(f"layout={'reversed' if parts.reverse else 'symbol_first'}")

    @given(locale_currency_pairs(), currency_amounts())
    def test_tokens_reproduce_number(self, pair: tuple[str, str], amount: Decimal) -> None:
        """Granular tokens concatenate to the number fragment."""
        locale, currency = pair
        parts = format_money(locale, currency, amount)
        assert "".join(t.text for t in parts.tokens) == parts.fragments.number
        assert any(t.type is TokenType.INTEGER for t in parts.tokens)

    @given(locale_currency_pairs(), currency_amounts())
    def test_reverse_implies_symbol(self, pair: tuple[str, str], amount: Decimal) -> None:
        """A reversed layout always has a trailing symbol."""
        locale, currency = pair
        parts = format_money(locale, currency, amount)
        if parts.reverse:
            assert parts.fragments.symbol

    @given(locale_currency_pairs(), currency_amounts())
    def test_deterministic(self, pair: tuple[str, str], amount: Decimal) -> None:
        """Identical inputs give equal results."""
        locale, currency = pair
        assert format_money(locale, currency, amount) == format_money(
            locale, currency, amount
        )
