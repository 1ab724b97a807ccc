"""Factories for constructing PlantTracker instances from validated settings.

Updates:
  v0.1.1 - 2026-10-14 - Wire image staging into the tracker.
  v0.1.0 - 2026-10-07 - Build store and tracker from settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .image_staging import ImageStager
from .plant_store import PlantStore
from .plant_tracker import PlantTracker
from .storage import JsonPreferencesStorage, KeyValueStorage

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import PlantTrackerSettings

factory_logger = logging.getLogger("plant_tracker.factory")


def build_plant_tracker(
    settings: PlantTrackerSettings,
    *,
    storage: KeyValueStorage | None = None,
) -> PlantTracker:
    """Return a PlantTracker backed by the preferences file configured in *settings*."""
    preferences_path = settings.resolved_preferences_path
    backend = storage if storage is not None else JsonPreferencesStorage(preferences_path)
    store = PlantStore(backend, key=settings.storage_key, strict_load=settings.strict_load)
    stager = ImageStager(settings.resolved_images_dir)
    factory_logger.debug(
        "Plant store ready: %d plant(s) from %s key=%r",
        len(store.plants),
        preferences_path,
        settings.storage_key,
    )
    return PlantTracker(store, image_stager=stager)


__all__ = ["build_plant_tracker"]
