"""
Configuration module for compound_key_map.

Uses pydantic-settings for environment variable loading.
"""

from compound_key_map.config.settings import (
    Settings,
    configure_logging,
    get_settings,
    reset_settings,
)
from compound_key_map.config.sources import ConfigFileError

__all__ = [
    "ConfigFileError",
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
