"""Configuration management for SuperAI."""

from superai.core.config.loader import ConfigLoader
from superai.core.config.settings import (
    DEFAULT_BUNDLE_ROOT,
    DEFAULT_STATE_FILE,
    GitSettings,
    InstallerSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "DEFAULT_BUNDLE_ROOT",
    "DEFAULT_STATE_FILE",
    "GitSettings",
    "InstallerSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
