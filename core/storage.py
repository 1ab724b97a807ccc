"""Key-value storage backends used to persist the plant list blob.

Updates:
  v0.2.1 - 2026-10-19 - Raise on unreadable preference files instead of overwriting them.
  v0.2.0 - 2026-10-11 - Write preference files atomically via a temp file.
  v0.1.0 - 2026-10-06 - Introduce JSON preferences and in-memory backends.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, cast

from .exceptions import StorageBackendError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("plant_tracker.storage")

PREFERENCES_FILE_NAME = "plant_preferences.json"


class KeyValueStorage(Protocol):
    """Minimal string key-value contract consumed by the plant store."""

    def get(self, key: str) -> str | None:
        """Return the stored string for *key* or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...


class InMemoryStorage:
    """Dictionary-backed storage used for tests and ephemeral sessions."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonPreferencesStorage:
    """Flat preferences file holding a JSON object of string values.

    A missing file reads as empty. A file that exists but cannot be parsed as a
    JSON object raises ``StorageBackendError`` for both reads and writes, so a
    write never replaces a document it could not read. Writes re-read the file,
    update one key, and replace the file atomically.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            parsed = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Unreadable preferences file %s: %s", self._path, exc)
            raise StorageBackendError(f"Unable to read preferences file {self._path}") from exc
        if not isinstance(parsed, dict):
            logger.warning("Preferences file %s does not contain a JSON object", self._path)
            raise StorageBackendError(f"Preferences file {self._path} must contain a JSON object")
        mapping = cast("Mapping[object, Any]", parsed)
        return {str(key): item for key, item in mapping.items()}

    def _write(self, data: dict[str, Any]) -> None:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=str(self._path.parent),
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(temp_name, self._path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageBackendError(f"Failed to write preferences file {self._path}") from exc


__all__ = [
    "InMemoryStorage",
    "JsonPreferencesStorage",
    "KeyValueStorage",
    "PREFERENCES_FILE_NAME",
]
