"""URL structure feature settings."""

from typing import Any, Optional

from pydantic import Field, field_validator

from wint.configuration.base import FeatureSettings


class UrlSettings(FeatureSettings):
    """Structure of the app URLs with regard to language tags.

    Environment Variables:
        URL_MODE: prefix, subdomain, host, search-param or none (default: prefix)
        URL_SEARCH_PARAM_KEY: Query key used in 'search-param' mode (default: l)
        URL_PROTOCOL: Protocol used when building hrefs (default: https)
        URL_DOMAIN: Domain used when building hrefs in 'subdomain' mode

    Unknown URL_MODE values are kept as given; resolution treats them as
    'prefix'.

    Example:
        ```python
        from wint.services import get_settings

        settings = get_settings()

        if settings.url.mode == "search-param":
            key = settings.url.search_param_key
        ```
    """

    mode: str = Field(default="prefix", alias="URL_MODE")
    search_param_key: str = Field(default="l", alias="URL_SEARCH_PARAM_KEY")
    protocol: Optional[str] = Field(default=None, alias="URL_PROTOCOL")
    domain: Optional[str] = Field(default=None, alias="URL_DOMAIN")

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v: Any) -> Any:
        """Normalize URL_MODE casing and whitespace."""
        if isinstance(v, str):
            return v.strip().lower() or "prefix"
        return v
