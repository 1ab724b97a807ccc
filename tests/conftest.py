"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.1.1 - 2026-10-15 - Isolate settings sources from the developer's working tree.
  v0.1.0 - 2026-10-05 - Force Qt offscreen platform for headless test runs.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from core import InMemoryStorage, PlantStore, PlantTracker

FIXED_NOW = 1_700_000_000_000


def pytest_configure(config: Any) -> None:
    """Ensure Qt uses the offscreen platform during tests to avoid GUI aborts."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run from an empty directory with no PLANT_TRACKER_* environment leaking in."""
    for key in list(os.environ):
        if key.startswith("PLANT_TRACKER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PLANT_TRACKER_ENV_FILE", "")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def tracker(memory_storage: InMemoryStorage) -> PlantTracker:
    """Tracker over in-memory storage with a frozen clock."""
    return PlantTracker(PlantStore(memory_storage), clock=lambda: FIXED_NOW)
