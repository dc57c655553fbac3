"""Tests for localizemessages.locale_utils.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from localizemessages.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    language_part,
    normalize_locale,
    parent_cultures,
)


class TestNormalizeLocale:
    """Test BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_case_preserved(self) -> None:
        """Case is not changed."""
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_already_normalized(self) -> None:
        """POSIX codes are unchanged."""
        assert normalize_locale("en_GB") == "en_GB"
        assert normalize_locale("en") == "en"


class TestLanguagePart:
    """Test language-part extraction."""

    @pytest.mark.parametrize(
        ("culture", "expected"),
        [("en-GB", "en"), ("zh_Hans_CN", "zh"), ("fr", "fr"), ("", "")],
    )
    def test_language_part(self, culture: str, expected: str) -> None:
        """The language part is everything before the first separator."""
        assert language_part(culture) == expected

    @given(
        st.from_regex(r"[a-z]{2,3}", fullmatch=True),
        st.from_regex(r"([-_][A-Za-z0-9]{2,8}){0,3}", fullmatch=True),
    )
    def test_language_part_is_prefix(self, language: str, rest: str) -> None:
        """Property: the language part of language+subtags is the language."""
        event(f"subtags={rest.count('-') + rest.count('_')}")
        assert language_part(language + rest) == language


class TestGetBabelLocale:
    """Test cached Babel Locale lookup."""

    def test_bcp47_format(self) -> None:
        """BCP-47 tags are parsed."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("en", "US")

    def test_posix_format(self) -> None:
        """POSIX codes are parsed."""
        assert get_babel_locale("de_DE").territory == "DE"

    def test_caching(self) -> None:
        """Repeated lookups return the cached Locale."""
        assert get_babel_locale("fr-FR") is get_babel_locale("fr-FR")

    def test_clear_locale_cache(self) -> None:
        """Clearing the cache empties it."""
        get_babel_locale("es")
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0

    def test_invalid_locale_raises(self) -> None:
        """Unknown locales raise UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx-YY")


class TestParentCultures:
    """Test culture lookup chains."""

    @pytest.mark.parametrize(
        ("culture", "expected"),
        [
            ("zh-Hans-CN", ("zh_Hans_CN", "zh_Hans", "zh")),
            ("fr-CA", ("fr_CA", "fr")),
            ("en_GB", ("en_GB", "en")),
            ("en", ("en",)),
            ("", ()),
        ],
    )
    def test_known_cultures(self, culture: str, expected: tuple[str, ...]) -> None:
        """Babel splits known tags into language, script and territory."""
        assert parent_cultures(culture) == expected

    def test_unknown_culture_split_on_separators(self) -> None:
        """Tags Babel does not know fall back to splitting on separators."""
        assert parent_cultures("xx-custom") == ("xx_custom", "xx")


class TestGetSystemLocale:
    """Test get_system_locale with environment and OS detection.

    Results are BCP-47 tags so they can be used as the active culture.
    """

    def test_getlocale_success(self) -> None:
        """OS-level locale.getlocale() wins."""
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en-US"

    def test_getlocale_with_encoding(self) -> None:
        """Encoding suffixes are stripped."""
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de-DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_pseudo_locales_filtered(self, pseudo: str) -> None:
        """'C' and 'POSIX' from getlocale() fall through to the environment."""
        with (
            patch("locale.getlocale", return_value=(pseudo, None)),
            patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True),
        ):
            assert get_system_locale() == "fr-FR"

    @pytest.mark.parametrize("error", [ValueError("mock"), AttributeError("mock")])
    def test_getlocale_errors_fall_back(self, error: Exception) -> None:
        """getlocale() failures fall through to the environment."""
        with (
            patch("locale.getlocale", side_effect=error),
            patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True),
        ):
            assert get_system_locale() == "pt-BR"

    def test_lc_all_priority(self) -> None:
        """LC_ALL beats LC_MESSAGES and LANG."""
        env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "de-DE"

    def test_lc_messages_before_lang(self) -> None:
        """LC_MESSAGES is used when LC_ALL is not set."""
        env = {"LC_MESSAGES": "fr_FR", "LANG": "en_US"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "fr-FR"

    def test_env_pseudo_and_empty_filtered(self) -> None:
        """Empty and pseudo-locale variables are skipped."""
        env = {"LC_ALL": "", "LC_MESSAGES": "POSIX", "LANG": "ja_JP.UTF-8"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "ja-JP"

    def test_default_fallback(self) -> None:
        """With nothing detected, en-US is returned."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == "en-US"

    def test_raise_on_failure(self) -> None:
        """raise_on_failure=True raises RuntimeError when nothing is detected."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)
