"""Tests for roots.config: LocaleConfig frozen dataclass."""

import pytest

from roots.config import LocaleConfig


class TestLocaleConfig:
    def test_defaults(self) -> None:
        cfg = LocaleConfig()

        assert cfg.locales == ()
        assert cfg.default_locale == ""
        assert cfg.prefix_default_locale is False

    def test_override(self) -> None:
        cfg = LocaleConfig(locales=("en", "cs"), default_locale="cs", prefix_default_locale=True)

        assert cfg.locales == ("en", "cs")
        assert cfg.default_locale == "cs"
        assert cfg.prefix_default_locale is True

    def test_frozen(self) -> None:
        cfg = LocaleConfig()

        with pytest.raises(AttributeError):
            cfg.default_locale = "en"  # type: ignore[misc]


class TestIsPrefixed:
    def test_default_locale_unprefixed(self) -> None:
        cfg = LocaleConfig(locales=("en", "cs"), default_locale="en")
        assert cfg.is_prefixed("en") is False
        assert cfg.is_prefixed("cs") is True

    def test_prefix_default_locale(self) -> None:
        cfg = LocaleConfig(locales=("en", "cs"), default_locale="en", prefix_default_locale=True)
        assert cfg.is_prefixed("en") is True
        assert cfg.is_prefixed("cs") is True
