"""Display-ready projection of a stored plant record.

Updates: v0.1.0 - 2026-10-09 - Add PlantView for list and CLI rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from .plant_model import PlantRecord, PlantType


@dataclass(slots=True, frozen=True)
class PlantView:
    """Plant record paired with its whole-day watering age."""

    record: PlantRecord
    days_since_watered: int
    label: str

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def image_ref(self) -> str | None:
        return self.record.image_ref

    @property
    def type(self) -> PlantType:
        return self.record.type


__all__ = ["PlantView"]
