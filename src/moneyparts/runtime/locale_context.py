"""Locale context for thread-safe currency formatting.

This module provides locale-aware currency formatting without global state
mutation. Uses Babel for CLDR-compliant formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatting delegates to babel.numbers.format_currency (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Locale substitution happens only when the caller names a fallback

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale
from babel import numbers as babel_numbers

from moneyparts.constants import MAX_LOCALE_CACHE_SIZE
from moneyparts.diagnostics import (
    ErrorTemplate,
    FormattingError,
    InvalidValueError,
    UnsupportedLocaleError,
)
from moneyparts.enums import CurrencyDisplay
from moneyparts.introspection import require_currency_code
from moneyparts.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# CLDR pattern placeholder: single sign = symbol, double sign = ISO code
_CURRENCY_SIGN = "\xa4"

# Extra significant digits kept above integer and fraction digits while formatting
_PRECISION_HEADROOM = 2


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for currency formatting.

    Use LocaleContext.create_or_raise() (strict) or LocaleContext.create()
    (explicit fallback) to construct instances. Direct construction via
    __init__ bypasses validation.

    Cache Management:
        Strictly created contexts are kept in an LRU cache keyed by the
        normalized locale code:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create_or_raise('en-US')
        >>> ctx.format_currency(Decimal('1234.56'), currency='USD')
        '$1,234.56'

        >>> ctx = LocaleContext.create('xx-UNKNOWN', fallback='en_US')
        >>> ctx.locale_code  # Original code preserved
        'xx-UNKNOWN'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.create_or_raise('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Strict factory used by the pipeline: the locale is never silently
        replaced.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'pt-BR', 'de-DE')

        Returns:
            LocaleContext instance with valid locale. Concurrent calls with
            the same normalized code return the same instance.

        Raises:
            UnsupportedLocaleError: If locale code is invalid or unknown
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        # Locale parsing is thread-safe; raises UnsupportedLocaleError
        babel_locale = get_babel_locale(cache_key)
        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale)

        # Double-check after parsing outside the lock
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create(cls, locale_code: str, *, fallback: str) -> "LocaleContext":
        """Create LocaleContext, substituting an explicit fallback on failure.

        For unknown or invalid locales, logs a warning and formats with the
        fallback locale. The original locale_code is preserved for debugging
        and ``is_fallback`` is set.

        Args:
            locale_code: BCP 47 locale identifier
            fallback: Locale used when locale_code cannot be resolved

        Returns:
            LocaleContext instance.

        Raises:
            UnsupportedLocaleError: If the fallback itself cannot be resolved
        """
        try:
            return cls.create_or_raise(locale_code)
        except UnsupportedLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, fallback
            )
            fallback_ctx = cls.create_or_raise(fallback)
            return cls(
                locale_code=locale_code,
                _babel_locale=fallback_ctx.babel_locale,
                is_fallback=True,
            )

    @property
    def babel_locale(self) -> Locale:
        """Get pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def decimal_symbol(self) -> str:
        """CLDR decimal separator of this locale (e.g. '.' or ',')."""
        return str(babel_numbers.get_decimal_symbol(self.babel_locale))

    @property
    def group_symbol(self) -> str:
        """CLDR grouping separator of this locale (e.g. ',' or U+202F)."""
        return str(babel_numbers.get_group_symbol(self.babel_locale))

    def format_currency(
        self,
        value: int | Decimal,
        *,
        currency: str,
        currency_display: CurrencyDisplay | Literal["symbol", "code", "name"] = CurrencyDisplay.SYMBOL,
    ) -> str:
        """Format a non-negative currency magnitude with locale-specific rules.

        Args:
            value: Monetary magnitude (int or Decimal, never negative)
            currency: ISO 4217 currency code (EUR, USD, JPY, BHD, etc.)
            currency_display: Display style for currency
                - "symbol": Use currency symbol (default)
                - "code": Use currency code (EUR, USD, JPY)
                - "name": Use currency name (euros, dollars, yen)

        Returns:
            Formatted currency string according to locale rules

        Raises:
            UnsupportedCurrencyError: If currency is not an ISO 4217 code
            InvalidValueError: If value is negative
            FormattingError: If Babel fails to format the amount

        Examples:
            >>> ctx = LocaleContext.create_or_raise('pt-BR')
            >>> ctx.format_currency(Decimal('100'), currency='BRL')
            'R$\\xa0100,00'

            >>> ctx = LocaleContext.create_or_raise('de-DE')
            >>> ctx.format_currency(Decimal('1234.56'), currency='EUR')
            '1.234,56\\xa0€'

        CLDR Compliance:
            Uses Babel's format_currency() which implements CLDR rules and
            matches Intl.NumberFormat with style: 'currency'. Applies
            currency-specific decimal places (JPY: 0, BHD: 3, most: 2).
        """
        require_currency_code(currency)
        if value < 0:
            raise InvalidValueError(ErrorTemplate.negative_magnitude(value), value=value)

        try:
            # Babel normalizes and quantizes under the active context, whose
            # default 28 digits cannot hold 10**26 with a 2-digit fraction
            with localcontext() as decimal_ctx:
                decimal_ctx.prec = max(
                    decimal_ctx.prec,
                    _required_precision(Decimal(value), currency),
                )
                return self._babel_format(value, currency, currency_display)

        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(
                currency, value, self.locale_code, str(e)
            )
            raise FormattingError(diagnostic) from e

    def _babel_format(
        self,
        value: int | Decimal,
        currency: str,
        currency_display: CurrencyDisplay | Literal["symbol", "code", "name"],
    ) -> str:
        if currency_display == CurrencyDisplay.NAME:
            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    locale=self.babel_locale,
                    currency_digits=True,
                    format_type="name",
                )
            )

        if currency_display == CurrencyDisplay.CODE:
            standard_pattern = self.babel_locale.currency_formats.get("standard")
            if standard_pattern is not None and hasattr(standard_pattern, "pattern"):
                raw_pattern = standard_pattern.pattern
                if _CURRENCY_SIGN in raw_pattern:
                    code_pattern = raw_pattern.replace(_CURRENCY_SIGN, _CURRENCY_SIGN * 2)
                    return str(
                        babel_numbers.format_currency(
                            value,
                            currency,
                            format=code_pattern,
                            locale=self.babel_locale,
                            currency_digits=True,
                        )
                    )
                logger.debug(
                    "Currency pattern for locale %s lacks placeholder",
                    self.locale_code,
                )

        return str(
            babel_numbers.format_currency(
                value,
                currency,
                locale=self.babel_locale,
                currency_digits=True,
                format_type="standard",
            )
        )


def _required_precision(value: Decimal, currency: str) -> int:
    """Significant digits that keep value exact through normalize and quantize."""
    integer_digits = max(value.adjusted() + 1, 1)
    fraction_digits = max(
        -int(value.as_tuple().exponent),
        babel_numbers.get_currency_precision(currency),
        0,
    )
    return integer_digits + fraction_digits + _PRECISION_HEADROOM
