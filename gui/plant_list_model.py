"""Qt list model that exposes plant views for the main list.

Updates:
  v0.1.1 - 2026-10-15 - Filter rows by name without touching the store.
  v0.1.0 - 2026-10-09 - Introduce PlantListModel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QAbstractListModel, QModelIndex, QPersistentModelIndex, Qt

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from collections.abc import Iterable, Sequence

    from models.plant_view import PlantView

PLANT_ID_ROLE = int(Qt.ItemDataRole.UserRole) + 1


class PlantListModel(QAbstractListModel):
    """List model providing plant names and watering labels."""

    def __init__(self, plants: Sequence[PlantView] | None = None, parent=None) -> None:
        super().__init__(parent)
        self._all: list[PlantView] = list(plants or [])
        self._filter = ""
        self._visible: list[PlantView] = list(self._all)

    def rowCount(
        self,
        parent: QModelIndex | QPersistentModelIndex = QModelIndex(),
    ) -> int:  # noqa: N802 - Qt API
        if parent.isValid():
            return 0
        return len(self._visible)

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> object | None:  # noqa: N802
        """Return the label, tooltip, or identifier for the requested index."""
        if not index.isValid() or index.row() >= len(self._visible):
            return None
        plant = self._visible[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return f"{plant.name}\n{plant.label}"
        if role == Qt.ItemDataRole.ToolTipRole:
            kind = plant.type.value.title() if plant.type.value != "NONE" else "Unclassified"
            return f"{plant.name} ({kind}) - watered {plant.label.lower()}"
        if role == PLANT_ID_ROLE:
            return plant.id
        return None

    def plant_at(self, row: int) -> PlantView | None:
        """Return the visible plant at the given row."""
        if 0 <= row < len(self._visible):
            return self._visible[row]
        return None

    def set_plants(self, plants: Iterable[PlantView]) -> None:
        """Replace the backing plant list and notify listeners."""
        self.beginResetModel()
        self._all = list(plants)
        self._visible = self._apply_filter(self._all)
        self.endResetModel()

    def set_filter(self, text: str) -> None:
        """Show only plants whose name contains *text*, ignoring case."""
        self.beginResetModel()
        self._filter = text.strip().casefold()
        self._visible = self._apply_filter(self._all)
        self.endResetModel()

    def plants(self) -> Sequence[PlantView]:
        return tuple(self._visible)

    def _apply_filter(self, plants: list[PlantView]) -> list[PlantView]:
        if not self._filter:
            return list(plants)
        return [plant for plant in plants if self._filter in plant.name.casefold()]


__all__ = ["PLANT_ID_ROLE", "PlantListModel"]
