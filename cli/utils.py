"""Shared CLI utility functions for Plant Tracker commands.

Updates:
  v0.1.1 - 2026-10-15 - Report file/directory mismatches in path health checks.
  v0.1.0 - 2026-10-08 - Stdout logging mirror, path descriptions, and plant rows.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from models.plant_model import PlantType

if TYPE_CHECKING:
    from logging import Logger

    from models.plant_view import PlantView


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Echo *message* to stdout and record it on *logger*."""
    print(message)
    logger.log(level, message)


def describe_path(path: Path | None, *, is_dir: bool) -> str:
    """Return *path* annotated with whether it exists and has the expected kind."""
    if path is None:
        return "not set"
    target = path.expanduser()
    if not target.exists():
        return f"{target} (missing - created on demand)"
    if target.is_dir() != is_dir:
        expected = "directory" if is_dir else "file"
        return f"{target} (exists but is not a {expected})"
    return f"{target} (exists)"


def format_plant_row(view: PlantView) -> str:
    """Return a one-line listing entry for *view*."""
    kind = "" if view.type is PlantType.NONE else f" ({view.type.value.lower()})"
    photo = " [photo]" if view.image_ref else ""
    return f"{view.id:>4}  {view.name}{kind} - {view.label}{photo}"
