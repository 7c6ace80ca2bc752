"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the language tag dependencies.
"""

from typing import Annotated

from fastapi import Depends

from wint.configuration import Settings
from wint.i18n import LangTagService
from wint.services.providers import (
    get_lang_tag_service,
    get_request_lang_tag,
    get_settings,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Language tag service bound to the current request/response
LangTagServiceDep = Annotated[LangTagService, Depends(get_lang_tag_service)]

# Language tag resolved for the current request
LangTagDep = Annotated[str, Depends(get_request_lang_tag)]

__all__ = [
    "SettingsDep",
    "LangTagServiceDep",
    "LangTagDep",
]
