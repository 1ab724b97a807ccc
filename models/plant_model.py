"""Plant record data model definitions.

Updates:
  v0.2.0 - 2026-10-12 - Keep legacy camelCase keys when serialising records.
  v0.1.0 - 2026-10-05 - Introduce PlantRecord dataclass and PlantType enum.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class PlantType(str, Enum):
    """Optional classification for a plant."""

    NONE = "NONE"
    OUTDOOR = "OUTDOOR"
    INDOOR = "INDOOR"

    @classmethod
    def parse(cls, value: object | None) -> PlantType:
        """Return the enum member for *value*, defaulting to ``NONE`` when absent."""
        if value is None or value == "":
            return cls.NONE
        if isinstance(value, PlantType):
            return value
        text = str(value).strip().upper()
        try:
            return cls(text)
        except ValueError as exc:
            raise ValueError(f"Unknown plant type '{value}'") from exc


@dataclass(slots=True, frozen=True)
class PlantRecord:
    """Single tracked plant with its last watering timestamp (epoch milliseconds)."""

    id: int
    name: str
    last_watered: int
    image_ref: str | None = None
    type: PlantType = PlantType.NONE

    def to_record(self) -> dict[str, Any]:
        """Return the JSON mapping stored in the preferences blob."""
        return {
            "id": self.id,
            "name": self.name,
            "lastWatered": self.last_watered,
            "imageUri": self.image_ref,
            "type": self.type.value,
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> PlantRecord:
        """Hydrate a PlantRecord from a stored mapping.

        Raises ``ValueError`` or ``TypeError`` when required fields are missing or
        carry the wrong type; callers treat that as a failed load.
        """
        raw_id = data["id"]
        raw_last_watered = data["lastWatered"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise TypeError(f"Plant id must be an integer, got {raw_id!r}")
        if isinstance(raw_last_watered, bool) or not isinstance(raw_last_watered, (int, float)):
            raise TypeError(f"lastWatered must be numeric, got {raw_last_watered!r}")
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError(f"Plant name must be a string, got {name!r}")
        image_ref = data.get("imageUri")
        if image_ref is not None and not isinstance(image_ref, str):
            raise TypeError(f"imageUri must be a string, got {image_ref!r}")
        return cls(
            id=raw_id,
            name=name,
            last_watered=int(raw_last_watered),
            image_ref=image_ref,
            type=PlantType.parse(data.get("type")),
        )


__all__ = ["PlantRecord", "PlantType"]
