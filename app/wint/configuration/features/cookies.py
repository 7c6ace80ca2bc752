"""Language tag cookie feature settings."""

from typing import Optional

from pydantic import Field

from wint.configuration.base import FeatureSettings


class CookieSettings(FeatureSettings):
    """Language tag cookie configuration.

    Environment Variables:
        LANG_TAG_COOKIE_ENABLED: Resolve the language tag from the cookie
        LANG_TAG_COOKIE_KEY: Cookie name (default: lang_tag)
        LANG_TAG_COOKIE_MAX_AGE: Max-Age attribute, in seconds
        LANG_TAG_COOKIE_PATH: Path attribute
        LANG_TAG_COOKIE_DOMAIN: Domain attribute
        LANG_TAG_COOKIE_SECURE: Secure flag
        LANG_TAG_COOKIE_HTTP_ONLY: HttpOnly flag
        LANG_TAG_COOKIE_SAME_SITE: SameSite attribute (lax, strict, none)

    Example:
        ```python
        from wint.services import get_settings

        settings = get_settings()

        if settings.cookie.enabled:
            key = settings.cookie.key
        ```
    """

    enabled: bool = Field(default=False, alias="LANG_TAG_COOKIE_ENABLED")
    key: str = Field(default="lang_tag", alias="LANG_TAG_COOKIE_KEY")
    max_age: Optional[int] = Field(default=None, alias="LANG_TAG_COOKIE_MAX_AGE")
    path: Optional[str] = Field(default=None, alias="LANG_TAG_COOKIE_PATH")
    domain: Optional[str] = Field(default=None, alias="LANG_TAG_COOKIE_DOMAIN")
    secure: bool = Field(default=False, alias="LANG_TAG_COOKIE_SECURE")
    http_only: bool = Field(default=False, alias="LANG_TAG_COOKIE_HTTP_ONLY")
    same_site: Optional[str] = Field(default=None, alias="LANG_TAG_COOKIE_SAME_SITE")
