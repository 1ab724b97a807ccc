"""Printable summaries for Plant Tracker configuration.

Updates:
  v0.1.0 - 2026-10-08 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from config import PlantTrackerSettings

from .utils import describe_path


def print_settings_summary(settings: PlantTrackerSettings) -> None:
    """Emit a readable summary of storage configuration and path health checks."""
    lines = [
        "Plant Tracker configuration",
        "---------------------------",
        f"Data directory: {describe_path(settings.data_dir, is_dir=True)}",
        f"Preferences file: {describe_path(settings.resolved_preferences_path, is_dir=False)}",
        f"Images directory: {describe_path(settings.resolved_images_dir, is_dir=True)}",
        f"Storage key: {settings.storage_key}",
        f"Strict load: {'enabled' if settings.strict_load else 'disabled'}",
        f"Theme: {settings.theme_mode}",
    ]
    print("\n".join(lines))
