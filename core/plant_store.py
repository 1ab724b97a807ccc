"""Authoritative plant list persisted as a single JSON blob.

The store keeps records sorted ascending by ``last_watered`` (longest since
watered first) after every mutation. Each mutation serialises the full list and
writes it under one key; the in-memory list and the observable value only
change once that write succeeds.

Updates:
  v0.3.1 - 2026-10-19 - Notify subscribers after releasing the store lock.
  v0.3.0 - 2026-10-13 - Add strict load mode and surface backend write failures.
  v0.2.0 - 2026-10-10 - Publish snapshots through ObservableValue subscriptions.
  v0.1.0 - 2026-10-06 - Initial CRUD store over key-value preferences.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from models.plant_model import PlantRecord, PlantType

from .exceptions import PlantLoadError, PlantStorageError, PlantValidationError, StorageBackendError
from .observable import ObservableValue, Subscription

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .storage import KeyValueStorage

logger = logging.getLogger("plant_tracker.store")

DEFAULT_STORAGE_KEY = "plants"

PlantSnapshot = tuple[PlantRecord, ...]


def sort_by_last_watered(records: Iterable[PlantRecord]) -> PlantSnapshot:
    """Return *records* ordered oldest-watered first (stable for equal timestamps)."""
    return tuple(sorted(records, key=lambda record: record.last_watered))


def serialise_plants(records: Iterable[PlantRecord]) -> str:
    """Return the JSON blob for *records*."""
    return json.dumps([record.to_record() for record in records], ensure_ascii=False)


def deserialise_plants(blob: str) -> list[PlantRecord]:
    """Parse a stored blob; any malformed entry fails the whole load with ``ValueError``."""
    try:
        parsed = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise ValueError("Plant list is not valid JSON") from exc
    if parsed is None:
        return []
    if not isinstance(parsed, list):
        raise ValueError("Plant list must be a JSON array")
    records: list[PlantRecord] = []
    seen_ids: set[int] = set()
    for position, entry in enumerate(parsed):
        if not isinstance(entry, dict):
            raise ValueError(f"Plant entry {position} is not an object")
        try:
            record = PlantRecord.from_record(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Plant entry {position} is malformed: {exc}") from exc
        if record.id in seen_ids:
            raise ValueError(f"Plant id {record.id} appears more than once")
        seen_ids.add(record.id)
        records.append(record)
    return records


def _require_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise PlantValidationError("Plant name must not be blank")
    return name


class PlantStore:
    """Own the sorted plant list, its persistence, and its change channel."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        strict_load: bool = False,
    ) -> None:
        self._storage = storage
        self._key = key
        self._lock = threading.RLock()
        self._plants = ObservableValue[PlantSnapshot](self._load(strict=strict_load))

    @property
    def key(self) -> str:
        return self._key

    @property
    def plants(self) -> PlantSnapshot:
        """Return the current sorted snapshot."""
        return self._plants.value

    def subscribe(self, callback: Callable[[PlantSnapshot], None]) -> Subscription[PlantSnapshot]:
        """Register *callback* for snapshots published after each successful mutation."""
        return self._plants.subscribe(callback)

    def get_by_id(self, plant_id: int) -> PlantRecord | None:
        """Return the record with *plant_id* or None."""
        for record in self.plants:
            if record.id == plant_id:
                return record
        return None

    def add(
        self,
        name: str,
        last_watered: int,
        image_ref: str | None = None,
        plant_type: PlantType = PlantType.NONE,
    ) -> PlantRecord:
        """Create a plant with the next identifier and persist the list."""
        _require_name(name)
        with self._lock:
            current = self.plants
            next_id = max((record.id for record in current), default=0) + 1
            record = PlantRecord(
                id=next_id,
                name=name,
                last_watered=int(last_watered),
                image_ref=image_ref,
                type=plant_type,
            )
            self._commit((*current, record))
        self._plants.notify()
        logger.debug("Added plant id=%s name=%r", record.id, record.name)
        return record

    def update(
        self,
        plant_id: int,
        name: str,
        last_watered: int,
        image_ref: str | None = None,
        plant_type: PlantType | None = None,
    ) -> None:
        """Replace name and timestamp; image and type change only when provided.

        An unknown *plant_id* leaves the list untouched.
        """
        _require_name(name)
        with self._lock:
            current = self.plants
            existing = next((record for record in current if record.id == plant_id), None)
            if existing is None:
                logger.debug("Update skipped; plant id=%s not found", plant_id)
                return
            updated = replace(
                existing,
                name=name,
                last_watered=int(last_watered),
                image_ref=image_ref if image_ref is not None else existing.image_ref,
                type=plant_type if plant_type is not None else existing.type,
            )
            self._commit(updated if record.id == plant_id else record for record in current)
        self._plants.notify()

    def delete(self, plant_id: int) -> None:
        """Remove the plant with *plant_id*; unknown identifiers are ignored."""
        with self._lock:
            current = self.plants
            remaining = [record for record in current if record.id != plant_id]
            if len(remaining) == len(current):
                logger.debug("Delete skipped; plant id=%s not found", plant_id)
                return
            self._commit(remaining)
        self._plants.notify()

    def _commit(self, records: Iterable[PlantRecord]) -> None:
        """Sort, persist, then record the snapshot; a failed write leaves state unchanged.

        Runs under the store lock. Callers notify subscribers after releasing it.
        """
        ordered = sort_by_last_watered(records)
        try:
            self._storage.set(self._key, serialise_plants(ordered))
        except StorageBackendError as exc:
            logger.error("Failed to persist %d plant(s) under key %r", len(ordered), self._key)
            raise PlantStorageError("Unable to save the plant list") from exc
        self._plants.assign(ordered)

    def _load(self, *, strict: bool) -> PlantSnapshot:
        try:
            blob = self._storage.get(self._key)
        except StorageBackendError as exc:
            if strict:
                raise PlantLoadError("Unable to read the stored plant list") from exc
            logger.warning("Unable to read stored plants; starting empty: %s", exc)
            return ()
        if blob is None:
            return ()
        try:
            records = deserialise_plants(blob)
        except ValueError as exc:
            if strict:
                raise PlantLoadError(f"Stored plant list is corrupt: {exc}") from exc
            logger.warning("Discarding unreadable plant list under key %r: %s", self._key, exc)
            return ()
        return sort_by_last_watered(records)


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "PlantSnapshot",
    "PlantStore",
    "deserialise_plants",
    "serialise_plants",
    "sort_by_last_watered",
]
