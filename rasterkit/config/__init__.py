"""Configuration module for rasterkit."""

from rasterkit.config.settings import (
    GLOBAL_OUTPUT_DEFAULTS,
    Conversion,
    HostConfig,
    OutputSpec,
    RasterkitSettings,
    RsvgPluginConfig,
    get_settings,
    load_settings,
    reload_settings,
)

__all__ = [
    "GLOBAL_OUTPUT_DEFAULTS",
    "Conversion",
    "HostConfig",
    "OutputSpec",
    "RasterkitSettings",
    "RsvgPluginConfig",
    "get_settings",
    "load_settings",
    "reload_settings",
]
