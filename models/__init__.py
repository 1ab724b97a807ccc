"""Data models for Plant Tracker.

Updates: v0.2.0 - 2026-10-09 - Export PlantView projection.
Updates: v0.1.0 - 2026-10-05 - Export PlantRecord dataclass and PlantType enum.
"""

from .plant_model import PlantRecord, PlantType
from .plant_view import PlantView

__all__ = [
    "PlantRecord",
    "PlantType",
    "PlantView",
]
