"""Configuration settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from rasterkit.config.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PUBLIC_DIR,
    USER_CONFIG_FILE,
)
from rasterkit.exceptions import ConfigurationError


class OutputSpec(BaseModel):
    """One requested rendition of a conversion's input.

    Every field is optional so the same model describes per-output entries,
    per-conversion defaults and the global defaults.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    format: str | None = None
    # Non-integer dimensions are kept so that output fails on its own at render time
    width: int | str | None = None
    height: int | str | None = None
    path: str | None = None
    id: str | None = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, value: Any) -> Any:
        if value is None or (isinstance(value, int) and not isinstance(value, bool)):
            return value
        if isinstance(value, str) and value.strip().lstrip("+-").isdigit():
            return int(value)
        return str(value)

    @field_validator("format", "path", "id", mode="before")
    @classmethod
    def _scalar_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def set_fields(self) -> dict[str, Any]:
        """Return only the fields that carry a value."""
        return self.model_dump(exclude_none=True)


# Applied beneath every other layer
GLOBAL_OUTPUT_DEFAULTS = OutputSpec(format=DEFAULT_OUTPUT_FORMAT)


class Conversion(BaseModel):
    """One input SVG and the outputs rendered from it."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    input: str
    output: list[OutputSpec] = Field(default_factory=list)
    output_defaults: OutputSpec = Field(
        default_factory=OutputSpec,
        validation_alias=AliasChoices("output_defaults", "outputDefaults"),
    )


class RsvgPluginConfig(BaseModel):
    """Plugin-scoped settings (``plugins.rsvg``)."""

    model_config = ConfigDict(extra="ignore")

    conversions: list[Conversion] = Field(default_factory=list)

    @field_validator("conversions", mode="before")
    @classmethod
    def _empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class PluginsConfig(BaseModel):
    """The host's ``plugins`` section. Other plugins' sections are ignored."""

    model_config = ConfigDict(extra="ignore")

    rsvg: RsvgPluginConfig = Field(default_factory=RsvgPluginConfig)

    @field_validator("rsvg", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        return {} if value is None else value


class PathsConfig(BaseModel):
    """The host's ``paths`` section."""

    model_config = ConfigDict(extra="ignore")

    public: str = DEFAULT_PUBLIC_DIR


class HostConfig(BaseModel):
    """Merged host configuration handed to the plugin."""

    model_config = ConfigDict(extra="ignore")

    paths: PathsConfig = Field(default_factory=PathsConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @field_validator("paths", "plugins", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        return {} if value is None else value


class RasterkitSettings(BaseSettings):
    """Main configuration class for rasterkit."""

    model_config = SettingsConfigDict(
        env_prefix="RASTERKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings sources to include YAML file."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            # Later files win: ./rasterkit.yaml over the user config
            YamlConfigSettingsSource(settings_cls, yaml_file=[USER_CONFIG_FILE, DEFAULT_CONFIG_FILE]),
            file_secret_settings,
        )

    # Host sections
    paths: PathsConfig = Field(default_factory=PathsConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: str | None = None
    json_logs: bool = False

    def host_config(self) -> HostConfig:
        """Get the host configuration view handed to the plugin."""
        return HostConfig(paths=self.paths, plugins=self.plugins)


@lru_cache
def get_settings() -> RasterkitSettings:
    """Get cached settings instance."""
    return RasterkitSettings()


def reload_settings() -> RasterkitSettings:
    """Force reload settings (clear cache)."""
    get_settings.cache_clear()
    return get_settings()


def load_settings(config_file: Path | None = None) -> RasterkitSettings:
    """Load settings, optionally from an explicit YAML file.

    Values from ``config_file`` override environment variables and the
    discovered YAML files.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    if config_file is None:
        return get_settings()

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(config_file.read_text(encoding="utf-8")) or {}
    except (OSError, YAMLError) as e:
        raise ConfigurationError(f"Cannot read config file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a mapping")

    try:
        return RasterkitSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {config_file}: {e}") from e
