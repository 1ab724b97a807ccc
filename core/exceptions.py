"""Common exception classes for the core package.

All exceptions ultimately inherit from :class:`PlantTrackerError`, allowing
callers to catch a single base class for any tracker failure while still
distinguishing individual error categories when needed.

Updates:
  v0.3.0 - 2026-10-14 - Add image staging errors.
  v0.2.0 - 2026-10-10 - Add strict-load and storage write error types.
  v0.1.0 - 2026-10-05 - Created module.
"""

from __future__ import annotations


class PlantTrackerError(Exception):
    """Base exception for Plant Tracker failures."""


class PlantNotFoundError(PlantTrackerError):
    """Raised when a plant cannot be located in the store."""


class PlantValidationError(PlantTrackerError):
    """Raised when a mutation carries invalid input such as a blank name."""


class PlantStorageError(PlantTrackerError):
    """Raised when writing the plant list to the storage backend fails."""


class PlantLoadError(PlantStorageError):
    """Raised when a persisted plant list exists but cannot be parsed (strict mode)."""


class ImageStagingError(PlantTrackerError):
    """Raised when copying a picked image into private storage fails."""


class StorageBackendError(Exception):
    """Raised by key-value storage backends when a read or write fails."""


__all__ = [
    "ImageStagingError",
    "PlantLoadError",
    "PlantNotFoundError",
    "PlantStorageError",
    "PlantTrackerError",
    "PlantValidationError",
    "StorageBackendError",
]
