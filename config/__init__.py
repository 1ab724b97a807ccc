"""Configuration helpers for Plant Tracker.

Updates: v0.2.0 - 2026-10-12 - Expose theme defaults alongside storage constants.
Updates: v0.1.0 - 2026-10-05 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_DATA_DIR,
    DEFAULT_STORAGE_KEY,
    DEFAULT_THEME_MODE,
    PlantTrackerSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_THEME_MODE",
    "PlantTrackerSettings",
    "SettingsError",
    "load_settings",
]
