"""Main window listing plants by watering urgency.

Updates:
  v0.2.0 - 2026-10-15 - Add theme toggle persisted to config.json.
  v0.1.1 - 2026-10-14 - Open the detail dialog for photo and delete workflows.
  v0.1.0 - 2026-10-09 - Initial list with search, add, and water actions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QModelIndex
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListView,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from config.persistence import persist_settings_to_config
from core import PlantTrackerError

from .appearance import apply_theme
from .plant_dialogs import AddPlantDialog, PlantDetailDialog
from .plant_list_model import PlantListModel

if TYPE_CHECKING:
    from PySide6.QtGui import QCloseEvent

    from config import PlantTrackerSettings
    from core import PlantTracker
    from models.plant_view import PlantView

logger = logging.getLogger("plant_tracker.gui.main_window")


class MainWindow(QMainWindow):
    """Top-level window exposing the plant list and its actions."""

    def __init__(
        self,
        tracker: PlantTracker,
        settings: PlantTrackerSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._tracker = tracker
        self._settings = settings
        self._theme = apply_theme(settings.theme_mode if settings is not None else None)
        self._model = PlantListModel(tracker.list_plants(), self)
        self.setWindowTitle("My Plants")
        self.resize(480, 640)
        self._build_ui()
        self._subscription = tracker.subscribe(self._model.set_plants)

    @property
    def model(self) -> PlantListModel:
        return self._model

    def _build_ui(self) -> None:
        container = QWidget(self)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(12, 12, 12, 12)

        self._search_input = QLineEdit(container)
        self._search_input.setPlaceholderText("Search Plants")
        self._search_input.setClearButtonEnabled(True)
        self._search_input.textChanged.connect(self._model.set_filter)  # type: ignore[arg-type]
        layout.addWidget(self._search_input)

        self._list = QListView(container)
        self._list.setModel(self._model)
        self._list.setAlternatingRowColors(True)
        self._list.setSpacing(4)
        self._list.doubleClicked.connect(self._on_item_activated)  # type: ignore[arg-type]
        layout.addWidget(self._list, 1)

        controls = QHBoxLayout()
        self._add_button = QPushButton("Add Plant", container)
        self._add_button.clicked.connect(self._on_add_clicked)  # type: ignore[arg-type]
        self._water_button = QPushButton("Water", container)
        self._water_button.clicked.connect(self._on_water_clicked)  # type: ignore[arg-type]
        self._edit_button = QPushButton("Details", container)
        self._edit_button.clicked.connect(self._on_edit_clicked)  # type: ignore[arg-type]
        self._theme_button = QPushButton(self._theme_button_text(), container)
        self._theme_button.clicked.connect(self._on_theme_toggled)  # type: ignore[arg-type]
        controls.addWidget(self._add_button)
        controls.addWidget(self._water_button)
        controls.addWidget(self._edit_button)
        controls.addStretch(1)
        controls.addWidget(self._theme_button)
        layout.addLayout(controls)

        footer = QLabel("Keep your plants hydrated!", container)
        layout.addWidget(footer)
        self.setCentralWidget(container)

    def _selected_plant(self) -> PlantView | None:
        index = self._list.currentIndex()
        if not index.isValid():
            return None
        return self._model.plant_at(index.row())

    def _on_add_clicked(self) -> None:
        dialog = AddPlantDialog(self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        result = dialog.result_plant
        if result is None:
            return
        try:
            self._tracker.add_plant(result.name, result.days_since_watered, None, result.plant_type)
        except PlantTrackerError as exc:
            QMessageBox.critical(self, "Unable to add plant", str(exc))
            return
        self._show_status(f"Added {result.name}.")

    def water_selected(self) -> None:
        plant = self._selected_plant()
        if plant is None:
            QMessageBox.information(self, "Water plant", "Select a plant first.")
            return
        try:
            self._tracker.water_plant(plant.id)
        except PlantTrackerError as exc:
            QMessageBox.critical(self, "Unable to water plant", str(exc))
            return
        self._show_status(f"Watered {plant.name}.")

    def _on_water_clicked(self) -> None:
        self.water_selected()

    def _on_item_activated(self, index: QModelIndex) -> None:
        plant = self._model.plant_at(index.row())
        if plant is not None:
            self._open_details(plant)

    def _on_edit_clicked(self) -> None:
        plant = self._selected_plant()
        if plant is None:
            QMessageBox.information(self, "Plant details", "Select a plant first.")
            return
        self._open_details(plant)

    def _open_details(self, plant: PlantView) -> None:
        stager = self._tracker.image_stager
        dialog = PlantDetailDialog(plant, stager, self)
        outcome = dialog.exec()
        if outcome == PlantDetailDialog.DELETE_REQUESTED:
            try:
                self._tracker.delete_plant(plant.id)
            except PlantTrackerError as exc:
                QMessageBox.critical(self, "Unable to delete plant", str(exc))
                return
            self._show_status("Plant deleted.")
            return
        if outcome != QDialog.DialogCode.Accepted or dialog.result_plant is None:
            return
        result = dialog.result_plant
        try:
            self._tracker.update_plant(
                plant.id,
                result.name,
                result.days_since_watered,
                result.image_ref,
                result.plant_type,
            )
        except PlantTrackerError as exc:
            if result.image_ref is not None and stager is not None:
                stager.unstage(result.image_ref)
            QMessageBox.critical(self, "Unable to save plant", str(exc))
            return
        if result.image_ref is not None and plant.image_ref and stager is not None:
            stager.unstage(plant.image_ref)
        self._show_status(f"Saved {result.name}.")

    def _theme_button_text(self) -> str:
        return "Light theme" if self._theme == "dark" else "Dark theme"

    def _on_theme_toggled(self) -> None:
        self._theme = apply_theme("light" if self._theme == "dark" else "dark")
        self._theme_button.setText(self._theme_button_text())
        try:
            persist_settings_to_config({"theme_mode": self._theme})
        except OSError as exc:
            logger.warning("Unable to persist theme preference: %s", exc)

    def _show_status(self, message: str, timeout_ms: int = 3000) -> None:
        self.statusBar().showMessage(message, timeout_ms)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt API
        self._subscription.close()
        super().closeEvent(event)


__all__ = ["MainWindow"]
