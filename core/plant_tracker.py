"""Service facade sitting between the UI layers and the plant store.

The facade speaks in whole days since watering while the store keeps absolute
timestamps. Unknown identifiers raise :class:`PlantNotFoundError` here even
though the store treats them as no-ops.

Updates:
  v0.3.1 - 2026-10-19 - Reject non-text plant names with PlantValidationError.
  v0.3.0 - 2026-10-14 - Stage replacement images and clean up on delete.
  v0.2.0 - 2026-10-11 - Add case-insensitive name search.
  v0.1.0 - 2026-10-07 - Initial add/update/water/delete workflows.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from models.plant_model import PlantRecord, PlantType
from models.plant_view import PlantView

from .exceptions import PlantNotFoundError, PlantValidationError
from .time_projection import describe_days_since, now_millis, to_days_since_watered, to_timestamp

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from .image_staging import ImageStager
    from .observable import Subscription
    from .plant_store import PlantSnapshot, PlantStore

logger = logging.getLogger("plant_tracker.tracker")

__all__ = ["PlantTracker"]


def _require_days(days_since_watered: int) -> int:
    if isinstance(days_since_watered, bool) or not isinstance(days_since_watered, int):
        raise PlantValidationError("Days since watered must be a whole number")
    if days_since_watered < 0:
        raise PlantValidationError("Days since watered cannot be negative")
    return days_since_watered


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise PlantValidationError("Plant name must not be blank")
    return name.strip()


class PlantTracker:
    """Expose plant workflows in watering-age terms."""

    def __init__(
        self,
        store: PlantStore,
        *,
        image_stager: ImageStager | None = None,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self._store = store
        self._image_stager = image_stager
        self._clock = clock

    @property
    def store(self) -> PlantStore:
        return self._store

    @property
    def image_stager(self) -> ImageStager | None:
        return self._image_stager

    def project(self, records: Iterable[PlantRecord], now: int | None = None) -> list[PlantView]:
        """Return *records* paired with their day counts relative to *now*."""
        reference = self._clock() if now is None else now
        views: list[PlantView] = []
        for record in records:
            days = to_days_since_watered(record.last_watered, reference)
            views.append(PlantView(record=record, days_since_watered=days, label=describe_days_since(days)))
        return views

    def subscribe(self, callback: Callable[[list[PlantView]], None]) -> Subscription[PlantSnapshot]:
        """Forward store snapshots to *callback* as projected views."""
        return self._store.subscribe(lambda snapshot: callback(self.project(snapshot)))

    def list_plants(self) -> list[PlantView]:
        """Return every plant, longest since watered first."""
        return self.project(self._store.plants)

    def search_plants(self, query: str) -> list[PlantView]:
        """Return plants whose name contains *query*, ignoring case."""
        needle = query.strip().casefold()
        views = self.list_plants()
        if not needle:
            return views
        return [view for view in views if needle in view.name.casefold()]

    def get_plant(self, plant_id: int) -> PlantView:
        """Return a single plant view by identifier."""
        return self.project([self._require_record(plant_id)])[0]

    def add_plant(
        self,
        name: str,
        days_since_watered: int = 0,
        image_ref: str | None = None,
        plant_type: PlantType = PlantType.NONE,
    ) -> PlantRecord:
        """Create a plant last watered *days_since_watered* days ago."""
        days = _require_days(days_since_watered)
        record = self._store.add(_clean_name(name), to_timestamp(days, self._clock()), image_ref, plant_type)
        logger.info("Added plant %s (%s)", record.id, record.name)
        return record

    def update_plant(
        self,
        plant_id: int,
        name: str,
        days_since_watered: int,
        image_ref: str | None = None,
        plant_type: PlantType | None = None,
    ) -> PlantRecord:
        """Rename a plant and reset its watering age."""
        days = _require_days(days_since_watered)
        cleaned = _clean_name(name)
        self._require_record(plant_id)
        self._store.update(
            plant_id,
            cleaned,
            to_timestamp(days, self._clock()),
            image_ref,
            plant_type,
        )
        return self._require_record(plant_id)

    def water_plant(self, plant_id: int) -> PlantRecord:
        """Mark a plant as watered now."""
        record = self._require_record(plant_id)
        self._store.update(plant_id, record.name, self._clock(), record.image_ref)
        logger.info("Watered plant %s (%s)", record.id, record.name)
        return self._require_record(plant_id)

    def update_plant_image(self, plant_id: int, image_ref: str) -> PlantRecord:
        """Attach an already staged image reference, keeping name and timestamp."""
        record = self._require_record(plant_id)
        self._store.update(plant_id, record.name, record.last_watered, image_ref)
        return self._require_record(plant_id)

    def replace_plant_image(self, plant_id: int, source: Path | str) -> PlantRecord:
        """Stage *source*, attach it, then remove the previously staged image."""
        stager = self._require_stager()
        record = self._require_record(plant_id)
        new_ref = stager.stage(source)
        try:
            updated = self.update_plant_image(plant_id, new_ref)
        except Exception:
            stager.unstage(new_ref)
            raise
        if record.image_ref and record.image_ref != new_ref:
            stager.unstage(record.image_ref)
        return updated

    def delete_plant(self, plant_id: int, *, remove_image: bool = True) -> None:
        """Delete a plant and, by default, its staged image."""
        record = self._require_record(plant_id)
        self._store.delete(plant_id)
        if remove_image and record.image_ref and self._image_stager is not None:
            self._image_stager.unstage(record.image_ref)
        logger.info("Deleted plant %s (%s)", record.id, record.name)

    def _require_record(self, plant_id: int) -> PlantRecord:
        record = self._store.get_by_id(plant_id)
        if record is None:
            raise PlantNotFoundError(f"Plant {plant_id} not found")
        return record

    def _require_stager(self) -> ImageStager:
        if self._image_stager is None:
            raise PlantValidationError("Image staging is not configured")
        return self._image_stager
