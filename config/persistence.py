"""Write user choices back to ``config/config.json`` without Qt dependencies.

Updates:
  v0.1.1 - 2026-10-15 - Drop keys that match their defaults instead of writing them.
  v0.1.0 - 2026-10-12 - Persist theme selection and storage preferences.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from config.settings import DEFAULT_STORAGE_KEY, DEFAULT_THEME_MODE

DEFAULT_CONFIG_PATH = Path("config") / "config.json"

logger = logging.getLogger("plant_tracker.settings.persistence")


def _theme_or_none(value: object | None) -> str | None:
    choice = str(value or "").strip().lower()
    return choice if choice in {"light", "dark"} and choice != DEFAULT_THEME_MODE else None


def _flag_or_none(value: object | None) -> bool | None:
    return True if value else None


def _storage_key_or_none(value: object | None) -> str | None:
    key = str(value or "").strip()
    return key if key and key != DEFAULT_STORAGE_KEY else None


def _path_or_none(value: object | None) -> str | None:
    text = str(value).strip() if value is not None else ""
    return text or None


# Each persisted key maps to a normaliser returning None when the key should be dropped.
_NORMALISERS: dict[str, Callable[[object | None], Any]] = {
    "data_dir": _path_or_none,
    "preferences_path": _path_or_none,
    "images_dir": _path_or_none,
    "storage_key": _storage_key_or_none,
    "strict_load": _flag_or_none,
    "theme_mode": _theme_or_none,
}


def _read_existing(config_path: Path) -> dict[str, Any]:
    if not config_path.is_file():
        return {}
    try:
        parsed = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("Replacing unreadable configuration file %s", config_path)
        return {}
    if not isinstance(parsed, Mapping):
        return {}
    return {str(key): value for key, value in parsed.items()}


def persist_settings_to_config(updates: Mapping[str, object | None], config_path: Path | None = None) -> None:
    """Merge *updates* into the JSON config file.

    Values equal to their defaults are removed so the file only records explicit
    choices. Keys that are not Plant Tracker settings are ignored.
    """
    target = config_path or DEFAULT_CONFIG_PATH
    config_data = _read_existing(target)
    for key, raw_value in updates.items():
        normalise = _NORMALISERS.get(key)
        if normalise is None:
            continue
        value = normalise(raw_value)
        if value is None:
            config_data.pop(key, None)
        else:
            config_data[key] = value

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(config_data, indent=2, ensure_ascii=False), encoding="utf-8")


__all__ = ["DEFAULT_CONFIG_PATH", "persist_settings_to_config"]
