"""Tests for configuration loading and validation logic.

Updates:
  v0.1.2 - 2026-10-15 - Cover .env loading through PLANT_TRACKER_ENV_FILE.
  v0.1.1 - 2026-10-12 - Cover theme normalisation and strict load parsing.
  v0.1.0 - 2026-10-05 - Cover JSON/env precedence and validation errors.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest
from pytest import LogCaptureFixture, MonkeyPatch

from config import DEFAULT_DATA_DIR, PlantTrackerSettings, SettingsError, load_settings


def _write_config(directory: Path, payload: object) -> Path:
    config_path = directory / "config" / "config.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(payload), encoding="utf-8")
    return config_path


def test_defaults_derive_paths_from_data_dir(isolated_cwd: Path) -> None:
    """Derive preferences and image locations when only defaults apply."""
    settings = load_settings()

    assert isinstance(settings, PlantTrackerSettings)
    assert settings.data_dir == (isolated_cwd / DEFAULT_DATA_DIR).resolve()
    assert settings.resolved_preferences_path == settings.data_dir / "plant_preferences.json"
    assert settings.resolved_images_dir == settings.data_dir / "images"
    assert settings.storage_key == "plants"
    assert settings.strict_load is False
    assert settings.theme_mode == "light"


def test_env_values_are_applied(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    """Environment variables with the PLANT_TRACKER_ prefix populate settings."""
    data_dir = isolated_cwd / "store"
    monkeypatch.setenv("PLANT_TRACKER_DATA_DIR", str(data_dir))
    monkeypatch.setenv("PLANT_TRACKER_STORAGE_KEY", "  garden  ")
    monkeypatch.setenv("PLANT_TRACKER_STRICT_LOAD", "true")

    settings = load_settings()

    assert settings.data_dir == data_dir.resolve()
    assert settings.resolved_images_dir == data_dir.resolve() / "images"
    assert settings.storage_key == "garden"
    assert settings.strict_load is True


def test_json_overrides_env_and_kwargs_override_json(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    """Keyword overrides beat JSON, which beats the environment."""
    _write_config(isolated_cwd, {"theme_mode": "dark", "storage_key": "from_json"})
    monkeypatch.setenv("PLANT_TRACKER_THEME_MODE", "light")
    monkeypatch.setenv("PLANT_TRACKER_STORAGE_KEY", "from_env")

    settings = load_settings()
    assert settings.theme_mode == "dark"
    assert settings.storage_key == "from_json"

    overridden = load_settings(storage_key="from_kwargs")
    assert overridden.storage_key == "from_kwargs"


def test_explicit_config_path_is_used(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    prefs = isolated_cwd / "custom" / "prefs.json"
    config_path = isolated_cwd / "elsewhere.json"
    config_path.write_text(json.dumps({"preferences_path": str(prefs)}), encoding="utf-8")
    monkeypatch.setenv("PLANT_TRACKER_CONFIG_JSON", str(config_path))

    settings = load_settings()

    assert settings.resolved_preferences_path == prefs.resolve()


def test_missing_explicit_config_raises(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("PLANT_TRACKER_CONFIG_JSON", str(isolated_cwd / "absent.json"))
    with pytest.raises(SettingsError):
        load_settings()


@pytest.mark.parametrize("contents", ["{not json", "[1, 2, 3]"])
def test_invalid_config_file_raises(isolated_cwd: Path, contents: str) -> None:
    config_path = isolated_cwd / "config" / "config.json"
    config_path.parent.mkdir(parents=True)
    config_path.write_text(contents, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings()


def test_unknown_json_keys_are_ignored_with_warning(isolated_cwd: Path, caplog: LogCaptureFixture) -> None:
    _write_config(isolated_cwd, {"theme_mode": "dark", "database_path": "/tmp/x.db"})

    with caplog.at_level(logging.WARNING, logger="plant_tracker.settings"):
        settings = load_settings()

    assert settings.theme_mode == "dark"
    assert "database_path" in caplog.text


def test_invalid_values_raise_settings_error(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("PLANT_TRACKER_STRICT_LOAD", "sometimes")
    with pytest.raises(SettingsError) as excinfo:
        load_settings()
    assert excinfo.value.__cause__ is not None


def test_blank_storage_key_rejected(isolated_cwd: Path) -> None:
    with pytest.raises(SettingsError):
        load_settings(storage_key="   ")


def test_unknown_theme_falls_back_to_default(isolated_cwd: Path) -> None:
    assert load_settings(theme_mode="Solarized").theme_mode == "light"
    assert load_settings(theme_mode=" DARK ").theme_mode == "dark"


def test_dotenv_file_is_read_without_mutating_environ(isolated_cwd: Path, monkeypatch: MonkeyPatch) -> None:
    env_file = isolated_cwd / "local.env"
    env_file.write_text("PLANT_TRACKER_THEME_MODE=dark\n", encoding="utf-8")
    monkeypatch.setenv("PLANT_TRACKER_ENV_FILE", str(env_file))

    settings = load_settings()

    assert settings.theme_mode == "dark"
    assert "PLANT_TRACKER_THEME_MODE" not in os.environ
