"""Money decomposition pipeline.

Entry points a presentation layer calls with (locale, currency, raw value):

    raw value -> normalize_value -> require_currency_code
              -> LocaleContext.format_currency -> split_fragments
              -> decompose_granular (format_money only)

The pipeline is synchronous and referentially transparent: identical inputs
always produce identical outputs, so callers may cache results keyed by
(locale, currency, raw value, display) without invalidation.

Validation order:
    1. Value (InvalidValueError)
    2. Currency (UnsupportedCurrencyError)
    3. Locale (UnsupportedLocaleError, unless fallback_locale is given)

Python 3.13+.
"""

import logging
from typing import Literal

from moneyparts.constants import DEFAULT_LOCALE
from moneyparts.enums import CurrencyDisplay
from moneyparts.introspection import require_currency_code
from moneyparts.model import FragmentSet, MoneyParts
from moneyparts.parsing import RawValue, decompose_granular, normalize_value, split_fragments
from moneyparts.runtime import LocaleContext

__all__ = [
    "decompose_granular",
    "extract_fragments",
    "format_money",
]

logger = logging.getLogger(__name__)

type Display = CurrencyDisplay | Literal["symbol", "code", "name"]


def _locale_context(locale: str, fallback_locale: str | None) -> LocaleContext:
    if fallback_locale is None:
        return LocaleContext.create_or_raise(locale)
    return LocaleContext.create(locale, fallback=fallback_locale)


def _render(
    locale: str | None,
    currency: str,
    raw: RawValue,
    currency_display: Display,
    fallback_locale: str | None,
    *,
    granular: bool,
) -> MoneyParts:
    value = normalize_value(raw)
    require_currency_code(currency)
    if locale is None:
        locale = DEFAULT_LOCALE
    ctx = _locale_context(locale, fallback_locale)

    formatted = ctx.format_currency(
        value.magnitude, currency=currency, currency_display=currency_display
    )
    separators = ctx.decimal_symbol + ctx.group_symbol
    fragments, reverse = split_fragments(
        formatted, currency, value.sign, separators=separators
    )
    tokens = (
        decompose_granular(
            fragments.number, decimal_symbol=ctx.decimal_symbol, separators=separators
        )
        if granular
        else ()
    )
    logger.debug(
        "Decomposed %s %s for %s: formatted=%r reverse=%s tokens=%d",
        currency,
        raw,
        locale,
        formatted,
        reverse,
        len(tokens),
    )
    return MoneyParts(
        locale=locale,
        value=value,
        formatted=formatted,
        fragments=fragments,
        reverse=reverse,
        tokens=tokens,
        is_fallback=ctx.is_fallback,
    )


def extract_fragments(
    locale: str | None,
    currency: str,
    raw: RawValue,
    *,
    currency_display: Display = CurrencyDisplay.SYMBOL,
    fallback_locale: str | None = None,
) -> tuple[FragmentSet, bool]:
    """Format an amount and split it into semantic fragments.

    Args:
        locale: BCP 47 or POSIX locale code; None selects DEFAULT_LOCALE
        currency: ISO 4217 currency code, copied unchanged into the result
        raw: int, float, Decimal, or numeral string
        currency_display: "symbol" (default), "code", or "name"
        fallback_locale: Locale to format with when ``locale`` is unknown.
            None (default) raises instead.

    Returns:
        Tuple of (fragments, reverse)

    Raises:
        InvalidValueError: If raw is not a finite number
        UnsupportedCurrencyError: If currency is not an ISO 4217 code
        UnsupportedLocaleError: If locale is unknown and no fallback is given

    Examples:
        >>> fragments, reverse = extract_fragments("en-US", "USD", 1234.56)
        >>> fragments
        FragmentSet(operator='+', currency='USD', symbol='$', number='1,234.56')
        >>> reverse
        False

        >>> fragments, reverse = extract_fragments("de-DE", "EUR", "-1234.56")
        >>> fragments.ordered(reverse)
        ('-', '1.234,56', '€')
    """
    parts = _render(
        locale, currency, raw, currency_display, fallback_locale, granular=False
    )
    return parts.fragments, parts.reverse


def format_money(
    locale: str | None,
    currency: str,
    raw: RawValue,
    *,
    currency_display: Display = CurrencyDisplay.SYMBOL,
    fallback_locale: str | None = None,
) -> MoneyParts:
    """Run the full pipeline, including granular decomposition.

    Granular tokens use the locale's own decimal and group symbols, so
    zero-decimal currencies (JPY, KRW) produce no decimal tokens and
    whitespace-grouped locales (fr_FR) split on their narrow spaces.

    Args:
        locale: BCP 47 or POSIX locale code; None selects DEFAULT_LOCALE
        currency: ISO 4217 currency code
        raw: int, float, Decimal, or numeral string
        currency_display: "symbol" (default), "code", or "name"
        fallback_locale: Locale to format with when ``locale`` is unknown

    Returns:
        MoneyParts with value, formatted string, fragments, reverse flag,
        and tokens

    Raises:
        InvalidValueError: If raw is not a finite number
        UnsupportedCurrencyError: If currency is not an ISO 4217 code
        UnsupportedLocaleError: If locale is unknown and no fallback is given

    Example:
        >>> parts = format_money("en-US", "JPY", 12345)
        >>> [(t.text, t.type.value) for t in parts.tokens]
        [('12', 'integer'), (',', 'separator-integer'), ('345', 'integer')]
    """
    return _render(
        locale, currency, raw, currency_display, fallback_locale, granular=True
    )
