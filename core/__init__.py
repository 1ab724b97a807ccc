"""Core service layer for Plant Tracker.

Updates:
  v0.3.0 - 2026-10-14 - Export image staging and facade helpers.
  v0.2.0 - 2026-10-10 - Export observable subscriptions.
  v0.1.0 - 2026-10-06 - Surface PlantStore and storage backends.
"""

from models.plant_model import PlantRecord, PlantType
from models.plant_view import PlantView

from .exceptions import (
    ImageStagingError,
    PlantLoadError,
    PlantNotFoundError,
    PlantStorageError,
    PlantTrackerError,
    PlantValidationError,
    StorageBackendError,
)
from .factory import build_plant_tracker
from .image_staging import ImageStager
from .observable import ObservableValue, Subscription
from .plant_store import DEFAULT_STORAGE_KEY, PlantStore
from .plant_tracker import PlantTracker
from .storage import InMemoryStorage, JsonPreferencesStorage, KeyValueStorage
from .time_projection import (
    MILLIS_PER_DAY,
    describe_days_since,
    now_millis,
    to_days_since_watered,
    to_timestamp,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "ImageStager",
    "ImageStagingError",
    "InMemoryStorage",
    "JsonPreferencesStorage",
    "KeyValueStorage",
    "MILLIS_PER_DAY",
    "ObservableValue",
    "PlantLoadError",
    "PlantNotFoundError",
    "PlantRecord",
    "PlantStorageError",
    "PlantStore",
    "PlantTracker",
    "PlantTrackerError",
    "PlantType",
    "PlantValidationError",
    "PlantView",
    "StorageBackendError",
    "Subscription",
    "build_plant_tracker",
    "describe_days_since",
    "now_millis",
    "to_days_since_watered",
    "to_timestamp",
]
