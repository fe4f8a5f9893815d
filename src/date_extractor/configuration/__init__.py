"""Configuration loading for date_extractor."""

from date_extractor.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    ExtractionSettings,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ExtractionSettings",
    "Settings",
    "bootstrap_settings",
    "load_settings",
    "save_settings",
]
