"""Dependency injection providers and FastAPI type aliases."""

from wint.services.providers import (
    get_lang_tag_service,
    get_request_lang_tag,
    get_settings,
)
from wint.services.dependencies import (
    LangTagDep,
    LangTagServiceDep,
    SettingsDep,
)

__all__ = [
    "get_settings",
    "get_lang_tag_service",
    "get_request_lang_tag",
    "SettingsDep",
    "LangTagServiceDep",
    "LangTagDep",
]
