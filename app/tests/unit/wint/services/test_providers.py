"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- LangTagServiceDep and LangTagDep with FastAPI dependency injection
- Dependency override pattern for testing
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tests.factories.i18n import make_settings
from wint.configuration import Settings
from wint.services import (
    LangTagDep,
    LangTagServiceDep,
    SettingsDep,
    get_settings,
)


def make_app(settings: Settings) -> FastAPI:
    """Create an app exposing the language tag dependencies."""
    app = FastAPI()

    @app.get("/{path:path}")
    def page(path: str, lang_tag: LangTagDep, lang_tags: LangTagServiceDep) -> dict:
        href = lang_tags.get_path_href("/about", lang_tag)
        lang_tags.set_lang_tag_cookie(lang_tag)
        return {"lang_tag": lang_tag, "href": href.data}

    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_settings_instance(self):
        """get_settings() returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        """get_settings() returns the same instance (caching)."""
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        """get_settings() cache can be cleared for testing."""
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1

    def test_settings_dep(self):
        """SettingsDep injects the overridden settings."""
        app = FastAPI()

        @app.get("/config")
        def config(settings: SettingsDep) -> dict:
            return {"tags": settings.lang_tags.tags, "mode": settings.url.mode}

        app.dependency_overrides[get_settings] = lambda: make_settings(
            tags=["es", "en"], mode="subdomain"
        )
        response = TestClient(app).get("/config")

        assert response.json() == {"tags": ["es", "en"], "mode": "subdomain"}


@pytest.mark.unit
class TestLangTagDependencies:
    """Tests for the request-bound language tag dependencies."""

    def test_prefix_request(self):
        """The language tag is resolved from the request path."""
        client = TestClient(make_app(make_settings()), base_url="https://example.com")
        response = client.get("/zh-yue/blog")

        assert response.status_code == 200
        assert response.json() == {
            "lang_tag": "zh-yue",
            "href": "https://example.com/zh-yue/about",
        }
        assert response.headers["set-cookie"] == "lang_tag=zh-yue"

    def test_default_lang_tag(self):
        """Unmatched requests get the default language tag."""
        client = TestClient(make_app(make_settings()), base_url="https://example.com")
        assert client.get("/it/blog").json()["lang_tag"] == "arb"

    def test_client_preferences(self):
        """The Accept-Language header is negotiated when enabled."""
        settings = make_settings(mode="none", use_client_preferred_lang_tags=True)
        client = TestClient(make_app(settings), base_url="https://example.com")

        response = client.get(
            "/blog", headers={"Accept-Language": "en-US;q=0.8, de;q=0.7, es;q=0.5"}
        )
        assert response.json() == {"lang_tag": "en", "href": "https://example.com/about"}

    def test_cookie(self):
        """The language tag cookie is read when enabled."""
        settings = make_settings(mode="search-param", cookie_enabled=True)
        client = TestClient(make_app(settings), base_url="https://example.com")

        response = client.get("/blog", headers={"Cookie": "lang_tag=es-419"})
        assert response.json() == {
            "lang_tag": "es-419",
            "href": "https://example.com/about?l=es-419",
        }

    def test_invalid_configuration_is_server_error(self):
        """An invalid tags configuration fails the request."""
        client = TestClient(make_app(make_settings(tags=[])))

        response = client.get("/blog")
        assert response.status_code == 500
        assert "language tags" in response.json()["detail"]
