"""Configuration and settings management."""

from flyer_studio.config.constants import FEATURE_MARKERS, Limits
from flyer_studio.config.logging import get_logger, setup_logging
from flyer_studio.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
    "FEATURE_MARKERS",
    "Limits",
]
