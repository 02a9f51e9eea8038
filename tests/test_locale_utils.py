"""Tests for locale_utils: the Babel bridge.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from babel import Locale

from bcp47tags import LanguageTag, LanguageTagSyntaxError, LocaleUnavailableError
from bcp47tags.diagnostics import DiagnosticCode
from bcp47tags.locale_utils import clear_locale_cache, get_babel_locale, to_posix


class TestToPosix:
    """Reduction to a POSIX identifier."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", "en"),
            ("en-US", "en_US"),
            ("zh-Hant-TW", "zh_Hant_TW"),
            ("zh-cmn-Hans-CN", "zh_Hans_CN"),
            ("de-CH-1901", "de_CH"),
            ("en-US-u-co-phonebk-x-foo", "en_US"),
            ("es-419", "es_419"),
        ],
    )
    def test_reduces_tag(self, tag: str, expected: str) -> None:
        assert to_posix(tag) == expected

    def test_accepts_language_tag(self) -> None:
        assert to_posix(LanguageTag.parse("fr-CA")) == "fr_CA"

    @pytest.mark.parametrize("tag", ["x-whatever", "en-GB-oed", "i-klingon"])
    def test_no_posix_equivalent(self, tag: str) -> None:
        with pytest.raises(LocaleUnavailableError) as exc_info:
            to_posix(tag)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_UNKNOWN

    def test_malformed_string_rejected(self) -> None:
        with pytest.raises(LanguageTagSyntaxError):
            to_posix("en_US")


class TestGetBabelLocale:
    """Cached Babel Locale lookup."""

    def test_language_and_territory(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_script(self) -> None:
        locale = get_babel_locale("zh-Hant-TW")
        assert locale.script == "Hant"
        assert locale.territory == "TW"

    def test_cached(self) -> None:
        clear_locale_cache()
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE-1901")

    def test_unknown_locale(self, caplog: pytest.LogCaptureFixture) -> None:
        """Well-formed but not in CLDR."""
        with (
            caplog.at_level(logging.DEBUG, logger="bcp47tags.locale_utils"),
            pytest.raises(LocaleUnavailableError, match="qaa-Qaaa-QM"),
        ):
            get_babel_locale("qaa-Qaaa-QM")
        assert "Babel has no locale" in caplog.text

    def test_unavailable_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            get_babel_locale("x-private")


class TestClearLocaleCache:
    """Test clear_locale_cache function."""

    def test_clear_empties_cache(self) -> None:
        from bcp47tags.locale_utils import _load_locale  # noqa: PLC0415

        get_babel_locale("fr")
        assert _load_locale.cache_info().currsize > 0
        clear_locale_cache()
        assert _load_locale.cache_info().currsize == 0
