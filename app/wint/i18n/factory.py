"""Factory functions for creating language tag components.

Provides convenience functions for building a LangTagService from the
application settings.
"""

from typing import Optional

from starlette.requests import HTTPConnection
from starlette.responses import Response

from wint.configuration import Settings
from wint.i18n.environment import EnvironmentProvider
from wint.i18n.models import LangTags
from wint.i18n.service import LangTagService
from wint.logging import get_module_logger

logger = get_module_logger()


def create_lang_tag_service(
    settings: Optional[Settings] = None,
    request: Optional[HTTPConnection] = None,
    response: Optional[Response] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> LangTagService:
    """Create a LangTagService configured from settings.

    Args:
        settings: Application settings (default: loaded from the environment).
        request: Server request to bind, if any.
        response: Server response to bind, if any.
        environment: Ambient client state to bind, if any.

    Returns:
        LangTagService: Configured service instance

    Usage:
        # From the environment configuration
        service = create_lang_tag_service()

        # Bound to a request
        service = create_lang_tag_service(settings, request=request, response=response)
    """
    settings = settings or Settings()

    if not LangTags.from_iterable(settings.lang_tags.tags).is_success:
        logger.warning("invalid_lang_tags_configured", lang_tags=settings.lang_tags.tags)

    return LangTagService.from_settings(
        settings, request=request, response=response, environment=environment
    )
