"""Shared base classes and utilities for settings modules."""

import json
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Base class for feature settings.

    All feature settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def parse_json_setting(name: str, v: Any, default: Any) -> Any:
    """Parse a JSON-encoded setting coming from the environment.

    Accepts already-decoded values, and strips one level of surrounding
    quotes as written in some .env files.

    Args:
        name: Environment variable name, used in the error message.
        v: Raw value.
        default: Value returned when the setting is unset or blank.

    Raises:
        ValueError: If the string is not valid JSON.
    """
    if v is None:
        return default
    if not isinstance(v, str):
        return v
    s = v.strip()
    if (s.startswith("'") and s.endswith("'")) or (
        s.startswith('"') and s.endswith('"')
    ):
        s = s[1:-1]
    if not s:
        return default
    try:
        return json.loads(s)
    except (json.JSONDecodeError, ValueError) as e:
        raise ValueError(f"Invalid {name} JSON: {e} (value: {s[:80]}...)") from e
