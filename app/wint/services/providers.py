"""
Factory functions for dependency injection.

Provides the application-scoped settings singleton and per-request
language tag providers.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Request, Response

from wint.configuration import Settings
from wint.i18n import LangTagService, create_lang_tag_service
from wint.logging import get_module_logger

logger = get_module_logger()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from wint.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_lang_tag_service(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings),
) -> LangTagService:
    """
    Get a language tag service bound to the current request and response.

    Not cached: every request gets its own service, so no request state is
    shared between calls. Settings come through ``get_settings``, so
    ``app.dependency_overrides[get_settings]`` applies here too.

    Returns:
        LangTagService: Service configured from the application settings.
    """
    return create_lang_tag_service(settings, request=request, response=response)


def get_request_lang_tag(
    service: LangTagService = Depends(get_lang_tag_service),
) -> str:
    """
    Get the language tag of the current request.

    Raises:
        HTTPException: 500 when the configured language tags are invalid.
    """
    result = service.get_lang_tag()
    if not result.is_success:
        logger.error(
            "lang_tag_resolution_failed",
            status=result.status.value,
            message=result.message,
        )
        raise HTTPException(status_code=500, detail=result.message)
    return result.data
