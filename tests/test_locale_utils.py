"""Tests for locale_utils: LocaleTag parsing and candidate expansion.

Python 3.13+.
"""

import logging
from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import event, given

from resbundle.locale_utils import (
    ROOT_LOCALE,
    LocaleTag,
    clear_locale_cache,
    coerce_locale,
    default_candidate_locales,
    get_default_locale,
    get_system_locale,
    normalize_locale,
)
from tests.strategies import locale_identifiers, locale_tags


class TestNormalizeLocale:
    """normalize_locale converts BCP-47 separators to POSIX."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestLocaleTagParse:
    """LocaleTag.parse delegates to Babel and normalizes case."""

    def test_language_territory(self) -> None:
        assert LocaleTag.parse("ja_JP") == LocaleTag("ja", "", "JP")

    def test_bcp47_equals_posix(self) -> None:
        assert LocaleTag.parse("ja-JP") == LocaleTag.parse("ja_JP")

    def test_case_normalized(self) -> None:
        assert LocaleTag.parse("JA_jp") == LocaleTag("ja", "", "JP")

    def test_script(self) -> None:
        assert LocaleTag.parse("zh_Hans_CN") == LocaleTag("zh", "Hans", "CN")

    def test_variant(self) -> None:
        assert LocaleTag.parse("en_US_POSIX") == LocaleTag("en", "", "US", "POSIX")

    @pytest.mark.parametrize("identifier", ["", "root", "  "])
    def test_root(self, identifier: str) -> None:
        assert LocaleTag.parse(identifier) is ROOT_LOCALE

    def test_invalid_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            LocaleTag.parse("12_34")

    def test_str_round_trip(self) -> None:
        assert str(LocaleTag.parse("zh_Hans_CN")) == "zh_Hans_CN"
        assert str(ROOT_LOCALE) == ""

    def test_is_root(self) -> None:
        assert ROOT_LOCALE.is_root
        assert not LocaleTag.parse("en").is_root

    @given(identifier=locale_identifiers())
    def test_parse_str_is_identity(self, identifier: str) -> None:
        """Parsing the string form of a parsed tag yields the same tag."""
        tag = LocaleTag.parse(identifier)
        event(f"has_script={bool(tag.script)}")
        assert LocaleTag.parse(str(tag)) == tag

    def test_clear_locale_cache(self) -> None:
        LocaleTag.parse("de_DE")
        clear_locale_cache()
        assert LocaleTag.parse("de_DE") == LocaleTag("de", "", "DE")


class TestCoerceLocale:
    """coerce_locale accepts tags, strings and babel.Locale."""

    def test_tag_passthrough(self) -> None:
        tag = LocaleTag("ja")
        assert coerce_locale(tag) is tag

    def test_string(self) -> None:
        assert coerce_locale("ja-JP") == LocaleTag("ja", "", "JP")

    def test_babel_locale(self) -> None:
        assert coerce_locale(Locale.parse("zh_Hant_TW")) == LocaleTag("zh", "Hant", "TW")

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Expected LocaleTag"):
            coerce_locale(3.14)  # type: ignore[arg-type]


class TestDefaultCandidateLocales:
    """Standard expansion: most specific first, ending with ROOT."""

    def test_language_territory(self) -> None:
        result = default_candidate_locales(LocaleTag.parse("ja_JP"))
        assert [str(c) for c in result] == ["ja_JP", "ja", ""]

    def test_language_only(self) -> None:
        result = default_candidate_locales(LocaleTag.parse("zh"))
        assert result == (LocaleTag("zh"), ROOT_LOCALE)

    def test_root(self) -> None:
        assert default_candidate_locales(ROOT_LOCALE) == (ROOT_LOCALE,)

    def test_script_forms_before_unscripted(self) -> None:
        result = default_candidate_locales(LocaleTag.parse("zh_Hans_CN"))
        assert [str(c) for c in result] == ["zh_Hans_CN", "zh_Hans", "zh_CN", "zh", ""]

    def test_variant_trimmed_progressively(self) -> None:
        tag = LocaleTag("en", "", "US", "POSIX_PREEURO")
        result = default_candidate_locales(tag)
        assert result == (
            LocaleTag("en", "", "US", "POSIX_PREEURO"),
            LocaleTag("en", "", "US", "POSIX"),
            LocaleTag("en", "", "US"),
            LocaleTag("en"),
            ROOT_LOCALE,
        )

    @given(locale=locale_tags())
    def test_properties(self, locale: LocaleTag) -> None:
        """Starts with the locale, ends with ROOT, has no duplicates."""
        result = default_candidate_locales(locale)
        event(f"candidate_count={len(result)}")
        assert result[0] == locale
        assert result[-1] == ROOT_LOCALE
        assert len(set(result)) == len(result)
        assert all(c.language in ("", locale.language) for c in result)


class TestDefaultLocale:
    """get_default_locale reads the ambient system locale."""

    def test_parses_system_locale(self) -> None:
        with patch("resbundle.locale_utils.get_system_locale", return_value="de_DE"):
            assert get_default_locale() == LocaleTag("de", "", "DE")

    def test_unparseable_degrades_to_root(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch("resbundle.locale_utils.get_system_locale", return_value="!!"),
            caplog.at_level(logging.WARNING, logger="resbundle.locale_utils"),
        ):
            assert get_default_locale() is ROOT_LOCALE
        assert "Unparseable system locale" in caplog.text

    def test_system_locale_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "fr_FR"
