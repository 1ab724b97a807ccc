"""Dialogs for adding and editing plants.

Updates:
  v0.2.0 - 2026-10-14 - Stage picked photos and discard them when the dialog is cancelled.
  v0.1.0 - 2026-10-09 - Add plant and plant detail dialogs.
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from core import ImageStager, ImageStagingError, PlantType, PlantView

_MAX_DAYS = 3650
_IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp)"


@dataclass(slots=True, frozen=True)
class PlantFormResult:
    """Values captured by the plant dialogs."""

    name: str
    days_since_watered: int
    plant_type: PlantType
    image_ref: str | None = None


def _build_type_combo(parent: QWidget, current: PlantType) -> QComboBox:
    combo = QComboBox(parent)
    for member in PlantType:
        label = "Unclassified" if member is PlantType.NONE else member.value.title()
        combo.addItem(label, member.value)
    combo.setCurrentIndex(max(combo.findData(current.value), 0))
    return combo


class AddPlantDialog(QDialog):
    """Modal dialog for creating a plant."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._result: PlantFormResult | None = None
        self.setWindowTitle("Add a New Plant")
        self.resize(360, 180)
        self._build_ui()

    @property
    def result_plant(self) -> PlantFormResult | None:
        return self._result

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()
        self._name_input = QLineEdit(self)
        self._name_input.setPlaceholderText("Plant Name")
        self._days_input = QSpinBox(self)
        self._days_input.setRange(0, _MAX_DAYS)
        self._type_input = _build_type_combo(self, PlantType.NONE)
        form.addRow("Name", self._name_input)
        form.addRow("Days since last watered", self._days_input)
        form.addRow("Type", self._type_input)
        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel, self)
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Add")
        buttons.accepted.connect(self._on_accept)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]
        layout.addWidget(buttons)

    def _on_accept(self) -> None:
        name = self._name_input.text().strip()
        if not name:
            QMessageBox.warning(self, "Missing name", "Enter a plant name before saving.")
            return
        self._result = PlantFormResult(
            name=name,
            days_since_watered=self._days_input.value(),
            plant_type=PlantType.parse(self._type_input.currentData()),
        )
        self.accept()


class PlantDetailDialog(QDialog):
    """Edit a plant's name, watering age, type, and photo."""

    DELETE_REQUESTED = 2

    def __init__(
        self,
        plant: PlantView,
        image_stager: ImageStager | None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._plant = plant
        self._stager = image_stager
        self._pending_image_ref: str | None = None
        self._result: PlantFormResult | None = None
        self.setWindowTitle(plant.name)
        self.resize(420, 480)
        self._build_ui()
        self._show_image(plant.image_ref)

    @property
    def result_plant(self) -> PlantFormResult | None:
        return self._result

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        self._image_label = QLabel(self)
        self._image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._image_label.setMinimumHeight(220)
        layout.addWidget(self._image_label)

        self._pick_button = QPushButton("Change Photo" if self._plant.image_ref else "Add Photo", self)
        self._pick_button.setEnabled(self._stager is not None)
        self._pick_button.clicked.connect(self._on_pick_image)  # type: ignore[arg-type]
        layout.addWidget(self._pick_button)

        form = QFormLayout()
        self._name_input = QLineEdit(self._plant.name, self)
        self._days_input = QSpinBox(self)
        self._days_input.setRange(0, _MAX_DAYS)
        self._days_input.setValue(max(self._plant.days_since_watered, 0))
        self._type_input = _build_type_combo(self, self._plant.type)
        form.addRow("Name", self._name_input)
        form.addRow("Days since last watered", self._days_input)
        form.addRow("Type", self._type_input)
        layout.addLayout(form)

        actions = QHBoxLayout()
        self._delete_button = QPushButton("Delete", self)
        self._delete_button.clicked.connect(self._on_delete)  # type: ignore[arg-type]
        actions.addWidget(self._delete_button)
        actions.addStretch(1)
        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel, self)
        buttons.accepted.connect(self._on_accept)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]
        actions.addWidget(buttons)
        layout.addLayout(actions)

    def _show_image(self, reference: str | None) -> None:
        path = self._stager.resolve(reference) if self._stager is not None else None
        pixmap = QPixmap(str(path)) if path is not None else QPixmap()
        if pixmap.isNull():
            self._image_label.setPixmap(QPixmap())
            self._image_label.setText("No photo")
            return
        self._image_label.setPixmap(
            pixmap.scaled(
                320,
                220,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )

    def _on_pick_image(self) -> None:
        if self._stager is None:
            return
        path, _ = QFileDialog.getOpenFileName(self, "Choose a photo", "", _IMAGE_FILTER)
        if not path:
            return
        try:
            staged = self._stager.stage(path)
        except ImageStagingError as exc:
            QMessageBox.warning(self, "Error copying image", str(exc))
            return
        self._discard_pending_image()
        self._pending_image_ref = staged
        self._pick_button.setText("Change Photo")
        self._show_image(staged)

    def _discard_pending_image(self) -> None:
        if self._pending_image_ref is not None and self._stager is not None:
            self._stager.unstage(self._pending_image_ref)
        self._pending_image_ref = None

    def _on_accept(self) -> None:
        name = self._name_input.text().strip()
        if not name:
            QMessageBox.warning(self, "Missing name", "Enter a plant name before saving.")
            return
        self._result = PlantFormResult(
            name=name,
            days_since_watered=self._days_input.value(),
            plant_type=PlantType.parse(self._type_input.currentData()),
            image_ref=self._pending_image_ref,
        )
        self.accept()

    def _on_delete(self) -> None:
        confirmation = QMessageBox.question(
            self,
            "Delete plant",
            f"Delete {self._plant.name}?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if confirmation != QMessageBox.StandardButton.Yes:
            return
        self._discard_pending_image()
        self.done(self.DELETE_REQUESTED)

    def reject(self) -> None:  # noqa: D401 - Qt override
        self._discard_pending_image()
        super().reject()


__all__ = ["AddPlantDialog", "PlantDetailDialog", "PlantFormResult"]
