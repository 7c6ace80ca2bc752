"""Tests for wint.i18n.models module."""

import pytest

from wint.i18n import CookieOptions, HreflangLink, LangTags, UrlMode
from wint.operations import OperationStatus


@pytest.mark.unit
class TestUrlMode:
    """Tests for UrlMode enum."""

    def test_values(self):
        """UrlMode values match the configuration strings."""
        assert UrlMode.PREFIX.value == "prefix"
        assert UrlMode.SUBDOMAIN.value == "subdomain"
        assert UrlMode.HOST.value == "host"
        assert UrlMode.SEARCH_PARAM.value == "search-param"
        assert UrlMode.NONE.value == "none"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("prefix", UrlMode.PREFIX),
            ("subdomain", UrlMode.SUBDOMAIN),
            ("host", UrlMode.HOST),
            ("search-param", UrlMode.SEARCH_PARAM),
            ("none", UrlMode.NONE),
            (UrlMode.HOST, UrlMode.HOST),
        ],
    )
    def test_from_value_known(self, value, expected):
        """from_value() maps known values to their mode."""
        assert UrlMode.from_value(value) is expected

    @pytest.mark.parametrize("value", [None, "", "path", "Search_Param", 3])
    def test_from_value_unknown_is_prefix(self, value):
        """from_value() maps unknown or missing values to PREFIX."""
        assert UrlMode.from_value(value) is UrlMode.PREFIX

    def test_needs_host(self):
        """Only subdomain and host modes build hrefs without the app host."""
        assert UrlMode.PREFIX.needs_host
        assert UrlMode.SEARCH_PARAM.needs_host
        assert UrlMode.NONE.needs_host
        assert not UrlMode.SUBDOMAIN.needs_host
        assert not UrlMode.HOST.needs_host


@pytest.mark.unit
class TestLangTags:
    """Tests for LangTags value object."""

    def test_from_iterable_success(self, lang_tags):
        """from_iterable() keeps the declared order."""
        result = LangTags.from_iterable(lang_tags)

        assert result.is_success
        assert result.data.tags == tuple(lang_tags)
        assert result.data.default == "arb"

    def test_from_iterable_deduplicates(self):
        """from_iterable() drops duplicates, keeping first occurrences."""
        result = LangTags.from_iterable(["es", "en", "es", "arb", "en"])
        assert result.data.tags == ("es", "en", "arb")

    @pytest.mark.parametrize("tags", [[], None, ["en", ""], [""]])
    def test_from_iterable_invalid(self, tags):
        """from_iterable() rejects empty lists and empty tags."""
        result = LangTags.from_iterable(tags)

        assert result.status == OperationStatus.INVALID_INPUT
        assert result.error_code == "INVALID_LANG_TAGS"

    def test_find_case_insensitive(self, lang_tags):
        """find() ignores case and returns the declared spelling."""
        tags = LangTags.from_iterable(lang_tags).data

        assert tags.find("zh-hant-hk") == "zh-Hant-HK"
        assert tags.find("EN") == "en"

    def test_find_case_sensitive(self, lang_tags):
        """find(case_sensitive=True) requires an exact match."""
        tags = LangTags.from_iterable(lang_tags).data

        assert tags.find("zh-Hant-HK", case_sensitive=True) == "zh-Hant-HK"
        assert tags.find("zh-hant-hk", case_sensitive=True) is None

    @pytest.mark.parametrize("value", [None, "", "it"])
    def test_find_no_match(self, lang_tags, value):
        """find() returns None for empty or unknown values."""
        tags = LangTags.from_iterable(lang_tags).data
        assert tags.find(value) is None

    def test_container_protocol(self):
        """LangTags supports len(), iteration and membership."""
        tags = LangTags.from_iterable(["en", "es"]).data

        assert len(tags) == 2
        assert list(tags) == ["en", "es"]
        assert "es" in tags
        assert "fr" not in tags


@pytest.mark.unit
class TestCookieOptions:
    """Tests for CookieOptions dataclass."""

    def test_defaults(self):
        """CookieOptions has no attributes set by default."""
        options = CookieOptions()

        assert options.max_age is None
        assert options.expires is None
        assert options.path is None
        assert options.domain is None
        assert options.secure is False
        assert options.http_only is False
        assert options.same_site is None

    def test_frozen(self):
        """CookieOptions instances are immutable."""
        options = CookieOptions(path="/")
        with pytest.raises(AttributeError):
            options.path = "/blog"


@pytest.mark.unit
class TestHreflangLink:
    """Tests for HreflangLink dataclass."""

    def test_to_dict(self):
        """to_dict() returns the link attributes."""
        link = HreflangLink(hreflang="es", href="https://example.com/es")

        assert link.to_dict() == {
            "rel": "alternate",
            "hreflang": "es",
            "href": "https://example.com/es",
        }
