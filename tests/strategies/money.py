"""Hypothesis strategies for money decomposition property-based testing.

Provides strategies for generating signed amounts in every shape the
pipeline accepts, locale/currency pairs with distinct layouts, and
synthetic number fragments for the granular decomposer.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_amounts: Signed Decimal amounts by magnitude class
    - raw_values: The same amounts as int/float/Decimal/str
    - number_fragments: Grouped digit strings with known structure

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

# Locales with distinct currency layouts:
# symbol-first, number-first, whitespace grouping, apostrophe grouping
FORMATTING_LOCALES: tuple[str, ...] = (
    "en_US", "en_GB", "de_DE", "fr_FR", "pt_BR", "ja_JP",
    "lv_LV", "nl_NL", "sv_SE", "de_CH", "es_ES", "it_IT",
)

# ISO codes with 0, 2, and 3 decimal digits
_CURRENCIES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "BRL", "JPY", "CHF", "SEK", "KRW", "BHD", "KWD",
)


@composite
def currency_amounts(draw: st.DrawFn) -> Decimal:
    """Generate realistic signed currency amounts.

    Events emitted:
    - currency_amount_magnitude={zero|micro|small|medium|large|huge|astronomical}
    - currency_amount_sign={positive|negative}
    """
    category = draw(st.sampled_from([
        "zero", "micro", "small", "medium", "large", "huge", "astronomical",
    ]))

    match category:
        case "zero":
            amount = Decimal("0")
        case "micro":
            amount = draw(st.decimals(
                min_value=Decimal("0.01"), max_value=Decimal("0.99"),
                places=2,
            ))
        case "small":
            amount = draw(st.decimals(
                min_value=Decimal("1.00"), max_value=Decimal("99.99"),
                places=2,
            ))
        case "medium":
            amount = draw(st.decimals(
                min_value=Decimal("100.00"), max_value=Decimal("9999.99"),
                places=2,
            ))
        case "large":
            amount = draw(st.decimals(
                min_value=Decimal("10000.00"), max_value=Decimal("999999.99"),
                places=2,
            ))
        case "astronomical":
            # Past the 28-digit default decimal context; built from a string
            # so no context rounding applies
            cents = draw(st.integers(min_value=10**26, max_value=10**42))
            amount = Decimal(f"{cents}E-2")
        case _:  # huge
            amount = draw(st.decimals(
                min_value=Decimal("1000000.00"),
                max_value=Decimal("999999999999.99"),
                places=2,
            ))

    negative = category != "zero" and draw(st.booleans())
    event(f"currency_amount_magnitude={category}")
    event(f"currency_amount_sign={'negative' if negative else 'positive'}")
    return amount.copy_negate() if negative else amount


@composite
def raw_values(draw: st.DrawFn) -> tuple[int | float | Decimal | str, Decimal]:
    """Generate a raw pipeline input and the Decimal it denotes.

    Events emitted:
    - raw_value_shape={decimal|str|padded_str|int|float}

    Returns:
        Tuple of (raw, expected_decimal).
    """
    amount = draw(currency_amounts())
    shape = draw(st.sampled_from(["decimal", "str", "padded_str", "int", "float"]))

    match shape:
        case "decimal":
            raw: int | float | Decimal | str = amount
            expected = amount
        case "str":
            raw = str(amount)
            expected = amount
        case "padded_str":
            raw = f"  {amount}\t"
            expected = amount
        case "int":
            raw = int(amount)
            expected = Decimal(raw)
        case _:  # float
            raw = float(amount)
            expected = Decimal(repr(raw))

    event(f"raw_value_shape={shape}")
    return (raw, expected)


@composite
def locale_currency_pairs(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (locale, currency) pairs across layouts and precisions."""
    return (
        draw(st.sampled_from(FORMATTING_LOCALES)),
        draw(st.sampled_from(_CURRENCIES)),
    )


@composite
def number_fragments(draw: st.DrawFn) -> tuple[str, int, bool]:
    """Generate synthetic number fragments with a known structure.

    Integer groups are joined with a grouping separator; an optional
    fraction follows the other separator.

    Events emitted:
    - number_fragment_groups={1..7}
    - number_fragment_style={dot_decimal|comma_decimal}
    - number_fragment_fraction={yes|no}

    Returns:
        Tuple of (fragment, integer_group_count, has_fraction).
    """
    group_count = draw(st.integers(min_value=1, max_value=7))
    lead = str(draw(st.integers(min_value=1, max_value=999)))
    rest = [
        f"{draw(st.integers(min_value=0, max_value=999)):03d}"
        for _ in range(group_count - 1)
    ]
    style = draw(st.sampled_from(["dot_decimal", "comma_decimal"]))
    group_sep, decimal_sep = (",", ".") if style == "dot_decimal" else (".", ",")

    fragment = group_sep.join([lead, *rest])
    has_fraction = draw(st.booleans())
    if has_fraction:
        fraction = draw(st.text(alphabet="0123456789", min_size=1, max_size=3))
        fragment = f"{fragment}{decimal_sep}{fraction}"

    event(f"number_fragment_groups={group_count}")
    event(f"number_fragment_style={style}")
    event(f"number_fragment_fraction={'yes' if has_fraction else 'no'}")
    return (fragment, group_count, has_fraction)
