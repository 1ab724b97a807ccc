"""Copy picked images into app-private storage and clean them up again.

References handed to the store are ``file://`` URIs. Only files that resolve
inside the configured images directory are ever deleted.

Updates:
  v0.1.1 - 2026-10-14 - Confine deletion to regular files inside the images directory.
  v0.1.0 - 2026-10-08 - Initial image staging helpers.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path
from urllib.parse import unquote, urlparse

from .exceptions import ImageStagingError

logger = logging.getLogger("plant_tracker.images")


class ImageStager:
    """Stage user images under *images_dir* and hand back stable references."""

    def __init__(self, images_dir: Path | str) -> None:
        self._images_dir = Path(images_dir)

    @property
    def images_dir(self) -> Path:
        return self._images_dir

    def stage(self, source: Path | str) -> str:
        """Copy *source* into private storage and return its ``file://`` reference."""
        source_path = Path(source).expanduser()
        if not source_path.is_file():
            raise ImageStagingError(f"Image file not found: {source_path}")
        destination = self._images_dir / f"plant_{uuid.uuid4().hex}{source_path.suffix.lower()}"
        try:
            self._images_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source_path, destination)
        except OSError as exc:
            destination.unlink(missing_ok=True)
            raise ImageStagingError(f"Error copying image {source_path}") from exc
        logger.info("Staged image %s as %s", source_path, destination.name)
        return destination.resolve().as_uri()

    def resolve(self, reference: str | None) -> Path | None:
        """Return the private file behind *reference*, or None when it is not ours."""
        if not reference:
            return None
        parsed = urlparse(reference)
        if parsed.scheme != "file" or not parsed.path:
            return None
        candidate = Path(unquote(parsed.path)).resolve()
        root = self._images_dir.resolve()
        if not candidate.is_relative_to(root):
            return None
        return candidate

    def unstage(self, reference: str | None) -> bool:
        """Delete the staged file behind *reference*; returns True when a file was removed."""
        path = self.resolve(reference)
        if path is None or not path.is_file():
            return False
        try:
            path.unlink()
        except OSError as exc:
            logger.warning("Unable to delete staged image %s: %s", path, exc)
            return False
        logger.info("Removed staged image %s", path.name)
        return True


__all__ = ["ImageStager"]
