"""Unit tests for the configuration settings."""

import pytest

from wint.configuration import CookieSettings, LangTagSettings, Settings, UrlSettings
from wint.configuration.base import parse_json_setting


@pytest.mark.unit
class TestParseJsonSetting:
    """Tests for parse_json_setting()."""

    def test_decodes_json(self):
        """JSON strings are decoded."""
        assert parse_json_setting("X", '{"en": "example.com"}', {}) == {"en": "example.com"}

    def test_strips_quotes(self):
        """One level of surrounding quotes is removed."""
        assert parse_json_setting("X", "'[\"en\", \"es\"]'", []) == ["en", "es"]

    @pytest.mark.parametrize("value", [None, "", "  ", "''"])
    def test_blank_is_default(self, value):
        """Unset or blank values give the default."""
        assert parse_json_setting("X", value, {"d": "1"}) == {"d": "1"}

    def test_decoded_values_pass_through(self):
        """Already decoded values are returned unchanged."""
        assert parse_json_setting("X", ["en"], []) == ["en"]

    def test_invalid_json(self):
        """Invalid JSON raises ValueError naming the setting."""
        with pytest.raises(ValueError, match="Invalid LANG_TAG_HOSTS JSON"):
            parse_json_setting("LANG_TAG_HOSTS", "{en: example.com}", {})


@pytest.mark.unit
class TestLangTagSettings:
    """Tests for LangTagSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults serve English only."""
        monkeypatch.delenv("LANG_TAGS", raising=False)
        settings = LangTagSettings()

        assert settings.tags == ["en"]
        assert settings.hosts == {}
        assert settings.hreflangs == {}
        assert settings.use_client_preferred_lang_tags is False

    def test_tags_comma_separated(self, monkeypatch):
        """LANG_TAGS accepts a comma separated list."""
        monkeypatch.setenv("LANG_TAGS", "arb, en-GB ,zh-Hant-HK")
        assert LangTagSettings().tags == ["arb", "en-GB", "zh-Hant-HK"]

    def test_tags_json(self, monkeypatch):
        """LANG_TAGS accepts a JSON list."""
        monkeypatch.setenv("LANG_TAGS", '["es", "en"]')
        assert LangTagSettings().tags == ["es", "en"]

    def test_hosts_and_hreflangs(self, monkeypatch):
        """Mappings are read from JSON objects."""
        monkeypatch.setenv("LANG_TAG_HOSTS", '{"en": "example.com", "es": "example.es"}')
        monkeypatch.setenv("LANG_TAG_HREFLANGS", '{"arb": "ar"}')
        settings = LangTagSettings()

        assert settings.hosts == {"en": "example.com", "es": "example.es"}
        assert settings.hreflangs == {"arb": "ar"}

    def test_client_preferences_flag(self, monkeypatch):
        """USE_CLIENT_PREFERRED_LANG_TAGS enables negotiation."""
        monkeypatch.setenv("USE_CLIENT_PREFERRED_LANG_TAGS", "true")
        assert LangTagSettings().use_client_preferred_lang_tags is True


@pytest.mark.unit
class TestUrlSettings:
    """Tests for UrlSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults use prefix mode and the "l" search param."""
        for name in ("URL_MODE", "URL_SEARCH_PARAM_KEY", "URL_PROTOCOL", "URL_DOMAIN"):
            monkeypatch.delenv(name, raising=False)
        settings = UrlSettings()

        assert settings.mode == "prefix"
        assert settings.search_param_key == "l"
        assert settings.protocol is None
        assert settings.domain is None

    @pytest.mark.parametrize(
        "value,expected",
        [(" Search-Param ", "search-param"), ("HOST", "host"), ("", "prefix"), ("bogus", "bogus")],
    )
    def test_mode_normalized(self, monkeypatch, value, expected):
        """URL_MODE is trimmed and lowercased."""
        monkeypatch.setenv("URL_MODE", value)
        assert UrlSettings().mode == expected

    def test_values(self, monkeypatch):
        """URL values are read from the environment."""
        monkeypatch.setenv("URL_SEARCH_PARAM_KEY", "lang")
        monkeypatch.setenv("URL_PROTOCOL", "http")
        monkeypatch.setenv("URL_DOMAIN", "example.com")
        settings = UrlSettings()

        assert settings.search_param_key == "lang"
        assert settings.protocol == "http"
        assert settings.domain == "example.com"


@pytest.mark.unit
class TestCookieSettings:
    """Tests for CookieSettings."""

    def test_defaults(self):
        """The cookie stage is disabled by default."""
        settings = CookieSettings()

        assert settings.enabled is False
        assert settings.key == "lang_tag"
        assert settings.same_site is None

    def test_values(self, monkeypatch):
        """Cookie attributes are read from the environment."""
        monkeypatch.setenv("LANG_TAG_COOKIE_ENABLED", "1")
        monkeypatch.setenv("LANG_TAG_COOKIE_KEY", "locale")
        monkeypatch.setenv("LANG_TAG_COOKIE_MAX_AGE", "31536000")
        monkeypatch.setenv("LANG_TAG_COOKIE_SECURE", "true")
        monkeypatch.setenv("LANG_TAG_COOKIE_SAME_SITE", "lax")
        settings = CookieSettings()

        assert settings.enabled is True
        assert settings.key == "locale"
        assert settings.max_age == 31536000
        assert settings.secure is True
        assert settings.same_site == "lax"


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings aggregator."""

    def test_sections_instantiated(self):
        """Missing sections are built from the environment."""
        settings = Settings()

        assert isinstance(settings.lang_tags, LangTagSettings)
        assert isinstance(settings.url, UrlSettings)
        assert isinstance(settings.cookie, CookieSettings)

    def test_section_override(self):
        """Sections passed to the constructor are kept."""
        url = UrlSettings(URL_MODE="subdomain", URL_DOMAIN="example.com")
        settings = Settings(url=url)
        assert settings.url.mode == "subdomain"

    def test_is_production(self, monkeypatch):
        """An empty PREFIX means production."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
