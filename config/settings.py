"""Settings management utilities for Plant Tracker configuration.

Sources are consulted in this order, first match wins:

1. keyword overrides passed to :func:`load_settings`;
2. the JSON file named by ``PLANT_TRACKER_CONFIG_JSON`` or ``config/config.json``;
3. ``PLANT_TRACKER_*`` environment variables, then entries from ``.env``;
4. file secrets.

Updates:
  v0.2.1 - 2026-10-15 - Load .env values without mutating os.environ.
  v0.2.0 - 2026-10-12 - Add strict load toggle and theme selection.
  v0.1.0 - 2026-10-05 - Initial data directory and storage key settings.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

ENV_PREFIX = "PLANT_TRACKER_"
CONFIG_JSON_ENV = f"{ENV_PREFIX}CONFIG_JSON"
ENV_FILE_ENV = f"{ENV_PREFIX}ENV_FILE"
DEFAULT_CONFIG_JSON = Path("config") / "config.json"
DEFAULT_ENV_FILE = Path(".env")

DEFAULT_DATA_DIR = Path("data")
DEFAULT_PREFERENCES_FILE = "plant_preferences.json"
DEFAULT_IMAGES_DIR_NAME = "images"
DEFAULT_STORAGE_KEY = "plants"
DEFAULT_THEME_MODE = "light"

_THEMES = frozenset({"light", "dark"})

# Extra environment spellings accepted per field, after PLANT_TRACKER_<FIELD>.
_ENV_ALIASES: dict[str, tuple[str, ...]] = {
    "preferences_path": ("PREFS_PATH",),
}

_SETTING_FIELDS = (
    "data_dir",
    "preferences_path",
    "images_dir",
    "storage_key",
    "strict_load",
    "theme_mode",
)

logger = logging.getLogger("plant_tracker.settings")


class SettingsError(Exception):
    """Raised when Plant Tracker configuration cannot be loaded or validated."""


def _dotenv_entries() -> dict[str, str]:
    """Return ``.env`` entries as a mapping; ``os.environ`` is left untouched.

    ``PLANT_TRACKER_ENV_FILE`` selects a different file; setting it to an empty
    string disables ``.env`` loading entirely.
    """
    override = os.environ.get(ENV_FILE_ENV)
    if override is None:
        env_file = DEFAULT_ENV_FILE
    elif override.strip():
        env_file = Path(override.strip()).expanduser()
    else:
        return {}
    if not env_file.is_file():
        return {}
    return {key: value for key, value in dotenv_values(env_file).items() if value is not None}


def _environment_source(_: BaseSettings | None = None) -> dict[str, Any]:
    """Collect ``PLANT_TRACKER_*`` values from the process environment and ``.env``."""
    dotenv = _dotenv_entries()
    found: dict[str, Any] = {}
    for field in _SETTING_FIELDS:
        names = (field.upper(), *_ENV_ALIASES.get(field, ()))
        for name in names:
            key = f"{ENV_PREFIX}{name}"
            raw = os.environ.get(key, dotenv.get(key))
            if raw is not None and raw.strip():
                found[field] = raw.strip()
                break
    return found


def _json_config_source(_: BaseSettings | None = None) -> dict[str, Any]:
    """Load the JSON config file; a missing explicit path is an error, a missing default is not."""
    explicit = os.environ.get(CONFIG_JSON_ENV)
    path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_JSON
    if not path.exists():
        if explicit:
            raise SettingsError(f"Configuration file not found: {path}")
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
        raise SettingsError(f"Unable to read configuration file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
    if not isinstance(payload, dict):
        raise SettingsError(f"Configuration file {path} must contain a JSON object")

    entries = {str(key): value for key, value in cast("dict[object, Any]", payload).items()}
    ignored = sorted(set(entries) - set(_SETTING_FIELDS))
    if ignored:
        logger.warning("Ignoring unknown key(s) %s in configuration file %s", ", ".join(ignored), path)
    return {key: value for key, value in entries.items() if key in _SETTING_FIELDS}


def _as_path(value: Any) -> Path:
    return Path(str(value)).expanduser().resolve()


class PlantTrackerSettings(BaseSettings):
    """Application configuration sourced from keyword overrides, JSON, or the environment."""

    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory holding the preferences file and staged images.",
    )
    preferences_path: Path | None = Field(
        default=None,
        description="Preferences JSON file; defaults to <data_dir>/plant_preferences.json.",
    )
    images_dir: Path | None = Field(
        default=None,
        description="Private directory for staged plant photos; defaults to <data_dir>/images.",
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        description="Preferences key under which the plant list blob is stored.",
    )
    strict_load: bool = Field(
        default=False,
        description="Fail start-up when the stored plant list is corrupt instead of starting empty.",
    )
    theme_mode: Literal["light", "dark"] = Field(
        default=DEFAULT_THEME_MODE,
        description="Preferred UI theme (light or dark); unknown values fall back to light.",
    )

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, case_sensitive=False)

    @field_validator("data_dir", mode="before")
    @classmethod
    def _require_data_dir(cls, value: Any) -> Path:
        if value is None or not str(value).strip():
            raise ValueError("a data directory path is required")
        return _as_path(value)

    @field_validator("preferences_path", "images_dir", mode="before")
    @classmethod
    def _optional_path(cls, value: Any) -> Path | None:
        if value is None or not str(value).strip():
            return None
        return _as_path(value)

    @field_validator("storage_key", mode="before")
    @classmethod
    def _require_storage_key(cls, value: Any) -> str:
        key = DEFAULT_STORAGE_KEY if value is None else str(value).strip()
        if not key:
            raise ValueError("storage_key must not be empty")
        return key

    @field_validator("theme_mode", mode="before")
    @classmethod
    def _known_theme(cls, value: Any) -> str:
        theme = str(value or "").strip().lower()
        return theme if theme in _THEMES else DEFAULT_THEME_MODE

    @model_validator(mode="after")
    def _fill_derived_paths(self) -> PlantTrackerSettings:
        if self.preferences_path is None:
            self.preferences_path = self.data_dir / DEFAULT_PREFERENCES_FILE
        if self.images_dir is None:
            self.images_dir = self.data_dir / DEFAULT_IMAGES_DIR_NAME
        return self

    @property
    def resolved_preferences_path(self) -> Path:
        return self.preferences_path or self.data_dir / DEFAULT_PREFERENCES_FILE

    @property
    def resolved_images_dir(self) -> Path:
        return self.images_dir or self.data_dir / DEFAULT_IMAGES_DIR_NAME

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            cast("PydanticBaseSettingsSource", _json_config_source),
            cast("PydanticBaseSettingsSource", _environment_source),
            file_secret_settings,
        )


def load_settings(**overrides: Any) -> PlantTrackerSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return PlantTrackerSettings(**overrides)
    except ValidationError as exc:
        raise SettingsError("Invalid Plant Tracker configuration") from exc


__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_IMAGES_DIR_NAME",
    "DEFAULT_PREFERENCES_FILE",
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_THEME_MODE",
    "PlantTrackerSettings",
    "SettingsError",
    "load_settings",
]
