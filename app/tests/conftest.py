"""Shared fixtures for the wint test suite."""

import pytest

from tests.factories.i18n import (
    LANG_TAG_HOSTS,
    LANG_TAGS,
    make_environment,
    make_request,
)
from wint.services import get_settings


@pytest.fixture
def lang_tags():
    """App language tags; "arb" is the default."""
    return list(LANG_TAGS)


@pytest.fixture
def lang_tag_hosts():
    """Host of each language tag except "en-GB"."""
    return dict(LANG_TAG_HOSTS)


@pytest.fixture
def request_factory():
    """Build Starlette requests from an absolute URL."""
    return make_request


@pytest.fixture
def environment_factory():
    """Build StaticEnvironment instances."""
    return make_environment


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings singleton around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
