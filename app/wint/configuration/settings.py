"""Wint configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from wint.configuration.features import (
    CookieSettings,
    LangTagSettings,
    UrlSettings,
)


class Settings(BaseSettings):
    """Wint configuration settings - main aggregator.

    Aggregates the language tag settings into a single configuration object:

    - **lang_tags**: Served language tags, per-tag hosts and hreflangs
    - **url**: URL structure mode and href building defaults
    - **cookie**: Language tag cookie usage and attributes

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from wint.services import get_settings

        settings = get_settings()

        tags = settings.lang_tags.tags
        mode = settings.url.mode
        if settings.cookie.enabled:
            ...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    lang_tags: LangTagSettings
    url: UrlSettings
    cookie: CookieSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "lang_tags": LangTagSettings,
            "url": UrlSettings,
            "cookie": CookieSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
