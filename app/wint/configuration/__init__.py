"""Wint configuration module - public API.

This module provides centralized configuration management for language tag
resolution using Pydantic BaseSettings with feature-based organization.

Exports:
    Settings: Main settings class
    LangTagSettings, UrlSettings, CookieSettings: Feature settings classes

Example:
    ```python
    from wint.services import get_settings

    settings = get_settings()

    tags = settings.lang_tags.tags
    cookie_key = settings.cookie.key
    ```
"""

from wint.configuration.settings import Settings
from wint.configuration.features import (
    CookieSettings,
    LangTagSettings,
    UrlSettings,
)

__all__ = ["Settings", "LangTagSettings", "UrlSettings", "CookieSettings"]
