"""PlantStore ordering, identity, persistence, and notification tests.

Updates:
  v0.2.1 - 2026-10-19 - Cover concurrent adds, cross-thread subscribers, and truncated files.
  v0.2.0 - 2026-10-13 - Cover strict load mode and failed writes.
  v0.1.0 - 2026-10-06 - Cover CRUD ordering and reload round trip.
"""

from __future__ import annotations

import json
import logging
import random
import threading
from pathlib import Path

import pytest

from core import (
    InMemoryStorage,
    JsonPreferencesStorage,
    PlantLoadError,
    PlantRecord,
    PlantStorageError,
    PlantStore,
    PlantType,
    PlantValidationError,
    StorageBackendError,
)
from core.plant_store import deserialise_plants, serialise_plants


class _FailingStorage(InMemoryStorage):
    """In-memory backend whose writes can be switched off."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageBackendError("disk full")
        super().set(key, value)


class _UnreadableStorage(InMemoryStorage):
    def get(self, key: str) -> str | None:
        raise StorageBackendError("permission denied")


def _summary(store: PlantStore) -> list[tuple[int, str, int]]:
    return [(record.id, record.name, record.last_watered) for record in store.plants]


def test_crud_sequence_keeps_watering_order() -> None:
    store = PlantStore(InMemoryStorage())

    store.add("Fern", 0)
    assert _summary(store) == [(1, "Fern", 0)]

    store.add("Cactus", 5)
    assert _summary(store) == [(1, "Fern", 0), (2, "Cactus", 5)]

    store.update(1, "Fern", 10)
    assert _summary(store) == [(2, "Cactus", 5), (1, "Fern", 10)]

    store.delete(2)
    assert _summary(store) == [(1, "Fern", 10)]


def test_reload_from_same_key_restores_plants(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    store = PlantStore(JsonPreferencesStorage(path))
    store.add("Fern", 0)
    store.add("Cactus", 5, "file:///cactus.png", PlantType.OUTDOOR)
    store.update(1, "Fern", 10)

    reloaded = PlantStore(JsonPreferencesStorage(path))

    assert reloaded.plants == store.plants
    blob = json.loads(json.loads(path.read_text(encoding="utf-8"))["plants"])
    assert blob[0] == {
        "id": 2,
        "name": "Cactus",
        "lastWatered": 5,
        "imageUri": "file:///cactus.png",
        "type": "OUTDOOR",
    }


def test_random_operations_keep_sorted_unique_ids() -> None:
    rng = random.Random(1234)
    store = PlantStore(InMemoryStorage())
    for step in range(200):
        action = rng.choice(("add", "add", "update", "delete"))
        ids = [record.id for record in store.plants]
        previous_max = max(ids, default=0)
        if action == "add" or not ids:
            record = store.add(f"Plant {step}", rng.randint(0, 1_000))
            assert record.id == previous_max + 1
        elif action == "update":
            store.update(rng.choice(ids), f"Renamed {step}", rng.randint(0, 1_000))
        else:
            store.delete(rng.choice(ids))

        timestamps = [record.last_watered for record in store.plants]
        assert timestamps == sorted(timestamps)
        current_ids = [record.id for record in store.plants]
        assert len(current_ids) == len(set(current_ids))


def test_equal_timestamps_keep_insertion_order() -> None:
    store = PlantStore(InMemoryStorage())
    store.add("First", 7)
    store.add("Second", 7)
    assert [record.name for record in store.plants] == ["First", "Second"]


def test_update_preserves_image_when_not_provided() -> None:
    store = PlantStore(InMemoryStorage())
    store.add("Fern", 0, "file:///fern.png", PlantType.INDOOR)

    store.update(1, "Fern", 3)
    record = store.get_by_id(1)
    assert record is not None
    assert record.image_ref == "file:///fern.png"
    assert record.type is PlantType.INDOOR

    store.update(1, "Fern", 3, "file:///fern-new.png", PlantType.OUTDOOR)
    record = store.get_by_id(1)
    assert record is not None
    assert record.image_ref == "file:///fern-new.png"
    assert record.type is PlantType.OUTDOOR


def test_missing_id_is_silent_noop() -> None:
    storage = InMemoryStorage()
    store = PlantStore(storage)
    store.add("Fern", 0)
    before = store.plants
    blob_before = storage.get("plants")
    published: list[object] = []
    store.subscribe(published.append)

    store.update(99, "Ghost", 1)
    store.delete(99)

    assert store.plants == before
    assert storage.get("plants") == blob_before
    assert published == []


def test_blank_names_are_rejected() -> None:
    store = PlantStore(InMemoryStorage())
    with pytest.raises(PlantValidationError):
        store.add("   ", 0)
    store.add("Fern", 0)
    with pytest.raises(PlantValidationError):
        store.update(1, "", 0)
    assert _summary(store) == [(1, "Fern", 0)]


def test_subscribers_notified_after_each_mutation() -> None:
    store = PlantStore(InMemoryStorage())
    snapshots: list[tuple[PlantRecord, ...]] = []
    subscription = store.subscribe(snapshots.append)

    store.add("Fern", 0)
    store.add("Cactus", 5)
    store.delete(1)
    subscription.close()
    store.delete(2)

    assert [len(snapshot) for snapshot in snapshots] == [1, 2, 1]
    assert snapshots[-1][0].name == "Cactus"


def test_failed_write_leaves_state_unchanged() -> None:
    storage = _FailingStorage()
    store = PlantStore(storage)
    store.add("Fern", 0)
    published: list[object] = []
    store.subscribe(published.append)
    storage.fail_writes = True

    with pytest.raises(PlantStorageError):
        store.add("Cactus", 5)
    with pytest.raises(PlantStorageError):
        store.update(1, "Renamed", 9)
    with pytest.raises(PlantStorageError):
        store.delete(1)

    assert _summary(store) == [(1, "Fern", 0)]
    assert published == []


def test_corrupt_blob_resets_to_empty(caplog: pytest.LogCaptureFixture) -> None:
    storage = InMemoryStorage({"plants": "{broken"})
    with caplog.at_level(logging.WARNING, logger="plant_tracker.store"):
        store = PlantStore(storage)
    assert store.plants == ()
    assert "Discarding unreadable plant list" in caplog.text

    store.add("Fern", 0)
    assert _summary(PlantStore(storage)) == [(1, "Fern", 0)]


def test_corrupt_blob_raises_in_strict_mode() -> None:
    storage = InMemoryStorage({"plants": json.dumps([{"id": 1, "name": "Fern"}])})
    with pytest.raises(PlantLoadError):
        PlantStore(storage, strict_load=True)


def test_unreadable_backend_handling() -> None:
    assert PlantStore(_UnreadableStorage()).plants == ()
    with pytest.raises(PlantLoadError):
        PlantStore(_UnreadableStorage(), strict_load=True)


def test_truncated_preferences_file_is_never_overwritten(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    intact = serialise_plants([PlantRecord(id=1, name="Fern", last_watered=0)])
    truncated = json.dumps({"plants": intact})[:-8]
    path.write_text(truncated, encoding="utf-8")

    with pytest.raises(PlantLoadError):
        PlantStore(JsonPreferencesStorage(path), strict_load=True)

    lenient = PlantStore(JsonPreferencesStorage(path))
    assert lenient.plants == ()
    with pytest.raises(PlantStorageError):
        lenient.add("Cactus", 5)
    assert lenient.plants == ()
    assert path.read_text(encoding="utf-8") == truncated


def test_concurrent_adds_assign_unique_contiguous_ids() -> None:
    storage = InMemoryStorage()
    store = PlantStore(storage)
    workers = 8
    per_worker = 25
    barrier = threading.Barrier(workers)

    def _add_many(worker: int) -> None:
        barrier.wait()
        for index in range(per_worker):
            store.add(f"plant-{worker}-{index}", (worker * 31 + index * 7) % 50)

    threads = [threading.Thread(target=_add_many, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    ids = sorted(record.id for record in store.plants)
    assert ids == list(range(1, workers * per_worker + 1))
    stamps = [record.last_watered for record in store.plants]
    assert stamps == sorted(stamps)
    assert PlantStore(storage).plants == store.plants


def test_subscriber_can_mutate_store_from_another_thread() -> None:
    store = PlantStore(InMemoryStorage())
    finished = threading.Event()
    handed_off: list[threading.Thread] = []

    def _hand_off(snapshot: tuple[PlantRecord, ...]) -> None:
        if handed_off:
            return
        worker = threading.Thread(target=lambda: (store.add("Other", 1), finished.set()))
        handed_off.append(worker)
        worker.start()
        worker.join(timeout=2)

    store.subscribe(_hand_off)
    store.add("Fern", 0)

    assert finished.is_set()
    assert [record.name for record in store.plants] == ["Fern", "Other"]


def test_load_sorts_unsorted_blob_and_uses_custom_key() -> None:
    records = [
        PlantRecord(id=1, name="Late", last_watered=50),
        PlantRecord(id=2, name="Early", last_watered=10),
    ]
    storage = InMemoryStorage({"garden": serialise_plants(records)})
    store = PlantStore(storage, key="garden")
    assert store.key == "garden"
    assert [record.name for record in store.plants] == ["Early", "Late"]
    assert store.add("New", 99).id == 3


@pytest.mark.parametrize(
    "blob",
    [
        "{}",
        "[1, 2]",
        '[{"id": 1, "name": "A", "lastWatered": 1}, {"id": 1, "name": "B", "lastWatered": 2}]',
    ],
)
def test_deserialise_rejects_bad_shapes(blob: str) -> None:
    with pytest.raises(ValueError):
        deserialise_plants(blob)


def test_deserialise_null_is_empty() -> None:
    assert deserialise_plants("null") == []
