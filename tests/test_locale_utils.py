"""Tests for locale normalization and cached Babel locale parsing."""

from __future__ import annotations

import pytest
from babel import Locale

from moneyparts.diagnostics import UnsupportedLocaleError
from moneyparts.locale_utils import clear_locale_cache, get_babel_locale, normalize_locale


class TestNormalizeLocale:
    """BCP 47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [
            ("en-US", "en_US"),
            ("pt-BR", "pt_BR"),
            ("en_US", "en_US"),
            ("en", "en"),
            ("  de-CH ", "de_CH"),
            ("zh-Hant-TW", "zh_Hant_TW"),
        ],
    )
    def test_normalize(self, locale_code: str, expected: str) -> None:
        """Hyphens become underscores; surrounding whitespace is dropped."""
        assert normalize_locale(locale_code) == expected


class TestGetBabelLocale:
    """Cached Locale.parse with typed errors."""

    def test_parses_bcp47(self) -> None:
        """BCP 47 tags resolve to Babel locales."""
        locale = get_babel_locale("pt-BR")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("pt", "BR")

    def test_cached(self) -> None:
        """Equivalent codes return the same cached object."""
        clear_locale_cache()
        assert get_babel_locale("fr-FR") is get_babel_locale("fr_FR")

    @pytest.mark.parametrize("locale_code", ["zz", "not a locale", ""])
    def test_invalid(self, locale_code: str) -> None:
        """Unknown and malformed codes raise UnsupportedLocaleError."""
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            get_babel_locale(locale_code)
        assert exc_info.value.locale_code == locale_code
        assert exc_info.value.__cause__ is not None
