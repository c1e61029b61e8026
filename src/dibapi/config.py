"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (DIBAPI__API__TOKEN=...)
  3. dibapi.yaml            (searched in cwd, then the platform config dir)
  4. Hardcoded defaults

The config file is optional. Token and blog id default to empty strings;
the client rejects empty credentials only when a request is attempted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_BASE_URL = "https://api.dropinblog.com/v2"
DEFAULT_CACHE_TTL_MS = 5 * 60 * 1000

_CONFIG_FILENAME = "dibapi.yaml"
_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("dibapi")


def _find_config_file() -> str | None:
    """Return the path of the first dibapi.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(_DEFAULT_CONFIG_DIR) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ApiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    token: str = ""
    blog_id: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 5.0


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ttl_ms: int = Field(default=DEFAULT_CACHE_TTL_MS, ge=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: DIBAPI__CACHE__TTL_MS=60000
        env_prefix="DIBAPI__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    api: ApiSettings = ApiSettings()
    cache: CacheSettings = CacheSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Constructor, then environment, then dibapi.yaml.

        No ``.env`` loading: an embedded client must not pick up the host
        application's dotenv file, which may hold unrelated credentials.
        """
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))
