"""Tests for roots.routing.locale: locale prefix extraction."""

import pytest

from roots.config import LocaleConfig
from roots.routing.locale import extract_locale, locale_from_config, locale_prefix

LOCALES = ["en", "cs", "es"]


class TestExtractLocale:
    def test_unprefixed_is_default(self) -> None:
        assert extract_locale("/about", LOCALES, "en") == "en"

    def test_prefixed(self) -> None:
        assert extract_locale("/cs/about", LOCALES, "en") == "cs"

    def test_bare_prefix(self) -> None:
        assert extract_locale("/cs", LOCALES, "en") == "cs"
        assert extract_locale("/cs/", LOCALES, "en") == "cs"

    def test_root(self) -> None:
        assert extract_locale("/", LOCALES, "en") == "en"
        assert extract_locale("", LOCALES, "en") == "en"

    def test_case_sensitive(self) -> None:
        assert extract_locale("/CS/about", LOCALES, "en") == "en"

    def test_only_first_segment_counts(self) -> None:
        assert extract_locale("/blog/cs", LOCALES, "en") == "en"

    def test_segment_must_equal_locale(self) -> None:
        assert extract_locale("/csv/export", LOCALES, "en") == "en"

    def test_query_ignored(self) -> None:
        assert extract_locale("/es?x=1", LOCALES, "en") == "es"

    def test_default_prefix_recognised(self) -> None:
        assert extract_locale("/en/about", LOCALES, "en") == "en"


class TestLocaleFromConfig:
    @pytest.mark.parametrize("prefix_default_locale", [False, True])
    def test_same_answer_for_both_settings(self, prefix_default_locale: bool) -> None:
        config = LocaleConfig(
            locales=("en", "cs"),
            default_locale="en",
            prefix_default_locale=prefix_default_locale,
        )
        assert locale_from_config("/en/about", config) == "en"
        assert locale_from_config("/cs/o-nas", config) == "cs"
        assert locale_from_config("/about", config) == "en"


class TestLocalePrefix:
    def test_default_locale_unprefixed(self) -> None:
        config = LocaleConfig(locales=("en", "cs"), default_locale="en")
        assert locale_prefix("en", config) == ""
        assert locale_prefix("cs", config) == "/cs"

    def test_prefix_default_locale(self) -> None:
        config = LocaleConfig(
            locales=("en", "cs"), default_locale="en", prefix_default_locale=True
        )
        assert locale_prefix("en", config) == "/en"
        assert locale_prefix("cs", config) == "/cs"
