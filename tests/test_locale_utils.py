"""Tests for locale utilities.

Python 3.13+.
"""

import pytest
from babel import Locale
from babel.core import UnknownLocaleError

from lprojkit.constants import FALLBACK_LOCALE
from lprojkit.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    language_code,
    normalize_locale,
    to_language_tag,
)


class TestTagConversion:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), ("zh-Hans-CN", "zh_Hans_CN"), ("en", "en"), ("pt_BR", "pt_BR")],
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected

    def test_to_language_tag(self) -> None:
        assert to_language_tag("pt_BR") == "pt-BR"
        assert to_language_tag("en") == "en"


class TestLanguageCode:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("en", "en"),
            ("en-US", "en"),
            ("en_GB", "en"),
            ("zh-Hans", "zh"),
            ("zh_Hant_TW", "zh"),
            ("pt-BR", "pt"),
            ("EN-us", "en"),
            ("de_DE.UTF-8", "de"),
        ],
    )
    def test_extracts_language(self, identifier: str, expected: str) -> None:
        assert language_code(identifier) == expected

    def test_unknown_language_is_still_parsed(self) -> None:
        assert language_code("xx-YY") == "xx"

    @pytest.mark.parametrize("identifier", ["42", "", "-US"])
    def test_malformed_identifier(self, identifier: str) -> None:
        assert language_code(identifier) is None


class TestGetBabelLocale:
    def setup_method(self) -> None:
        clear_locale_cache()

    def test_accepts_both_forms(self) -> None:
        assert get_babel_locale("en-US") == Locale("en", "US")
        assert get_babel_locale("en_US") == Locale("en", "US")

    def test_cached(self) -> None:
        assert get_babel_locale("de") is get_babel_locale("de")
        assert get_babel_locale.cache_info().hits >= 1

    def test_clear_locale_cache(self) -> None:
        get_babel_locale("fr")
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")


class TestGetSystemLocale:
    @pytest.fixture(autouse=True)
    def _clean_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))

    def test_os_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("de_DE", "UTF-8"))
        assert get_system_locale() == "de_DE"

    def test_pseudo_locale_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("C", None))
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        assert get_system_locale() == "fr_FR"

    def test_environment_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        monkeypatch.setenv("LC_MESSAGES", "it_IT")
        monkeypatch.setenv("LC_ALL", "ja_JP.eucJP")
        assert get_system_locale() == "ja_JP"

    def test_message_locale_wins_over_os_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("en_US", "UTF-8"))
        monkeypatch.setenv("LC_MESSAGES", "de_DE.UTF-8")
        assert get_system_locale() == "de_DE"

    def test_os_locale_wins_over_lang(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("pt_BR", "UTF-8"))
        monkeypatch.setenv("LANG", "en_GB.UTF-8")
        assert get_system_locale() == "pt_BR"

    def test_unparsable_os_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def getlocale() -> tuple[str | None, str | None]:
            raise ValueError("unknown locale: xx")

        monkeypatch.setattr("locale.getlocale", getlocale)
        monkeypatch.setenv("LANG", "nl_NL")
        assert get_system_locale() == "nl_NL"

    def test_posix_environment_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LC_ALL", "POSIX")
        monkeypatch.setenv("LANG", "es_ES")
        assert get_system_locale() == "es_ES"

    def test_fallback(self) -> None:
        assert get_system_locale() == FALLBACK_LOCALE

    def test_raise_on_failure(self) -> None:
        with pytest.raises(RuntimeError, match="Could not determine system locale"):
            get_system_locale(raise_on_failure=True)
