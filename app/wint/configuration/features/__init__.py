"""Feature settings __init__ - exports all feature settings."""

from wint.configuration.features.lang_tags import LangTagSettings
from wint.configuration.features.urls import UrlSettings
from wint.configuration.features.cookies import CookieSettings

__all__ = [
    "LangTagSettings",
    "UrlSettings",
    "CookieSettings",
]
