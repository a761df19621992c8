"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (CLASSBYTES__LOGGING__LEVEL=DEBUG)
  3. classbytes.yaml        (searched in cwd, then ~/.config/classbytes/)
  4. Hardcoded defaults

The config file is optional. The classpath is a JSON list when given through
the environment: CLASSBYTES__CLASSPATH='["lib/a.jar", "build/classes"]'.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


def _find_config_file() -> str | None:
    """Return the path of the first classbytes.yaml found, or None."""
    candidates = [
        Path("classbytes.yaml"),
        Path.home() / ".config" / "classbytes" / "classbytes.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: CLASSBYTES__LOGGING__FORMAT=text
        env_prefix="CLASSBYTES__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    # Archives and directories, in lookup order
    classpath: list[str] = []
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
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
