"""Language tags feature settings."""

from typing import Annotated, Any, Dict, List

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import NoDecode

from wint.configuration.base import FeatureSettings, parse_json_setting


class LangTagSettings(FeatureSettings):
    """Language tags served by the app.

    Environment Variables:
        LANG_TAGS: JSON list, or comma separated list, of language tags.
            The first one is the default app language tag.
        LANG_TAG_HOSTS: JSON object mapping tags to hosts ('host' URL mode)
        LANG_TAG_HREFLANGS: JSON object mapping tags to hreflang values,
            for tags that are not valid hreflang attributes
        USE_CLIENT_PREFERRED_LANG_TAGS: Negotiate with the client preferences

    Example:
        ```python
        from wint.services import get_settings

        settings = get_settings()

        default_tag = settings.lang_tags.tags[0]
        es_host = settings.lang_tags.hosts.get("es")
        ```
    """

    tags: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="LANG_TAGS",
        description="Language tags served by the app; the first is the default",
    )
    hosts: Dict[str, str] = Field(
        default_factory=dict,
        alias="LANG_TAG_HOSTS",
        description="Host of each language tag, used in 'host' URL mode",
    )
    hreflangs: Dict[str, str] = Field(
        default_factory=dict,
        alias="LANG_TAG_HREFLANGS",
        description="hreflang attribute to use in place of a language tag",
    )
    use_client_preferred_lang_tags: bool = Field(
        default=False,
        alias="USE_CLIENT_PREFERRED_LANG_TAGS",
        description="Fall back to the client Accept-Language preferences",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, v: Any) -> Any:
        """Parse LANG_TAGS from a JSON list or a comma separated string."""
        if isinstance(v, str) and not v.strip().startswith(("[", "'[", '"[')):
            return [t.strip() for t in v.split(",") if t.strip()]
        return parse_json_setting("LANG_TAGS", v, ["en"])

    @field_validator("hosts", "hreflangs", mode="before")
    @classmethod
    def _parse_mappings(cls, v: Any, info: ValidationInfo) -> Any:
        """Parse LANG_TAG_HOSTS and LANG_TAG_HREFLANGS from JSON."""
        alias = cls.model_fields[info.field_name].alias
        return parse_json_setting(alias, v, {})
