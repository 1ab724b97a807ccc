"""Theme helpers for Plant Tracker windows.

Updates:
  v0.1.0 - 2026-10-10 - Green light/dark palettes applied application-wide.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QGuiApplication, QPalette

from config import DEFAULT_THEME_MODE

DARK_GREEN = "#335e5d"
LIGHT_GREEN_GREY = "#b6d0b2"
SOFT_BLUE_GREY = "#b0c3d3"
LIGHT_OFF_WHITE = "#f4f4f1"


def normalise_theme(mode: str | None) -> str:
    """Return ``light`` or ``dark`` for *mode*, falling back to the default."""
    theme = str(mode or DEFAULT_THEME_MODE).strip().lower()
    if theme not in {"light", "dark"}:
        return DEFAULT_THEME_MODE
    return theme


def build_palette(mode: str) -> QPalette:
    """Return the palette for the requested theme."""
    palette = QPalette()
    if normalise_theme(mode) == "dark":
        palette.setColor(QPalette.ColorRole.Window, QColor(DARK_GREEN))
        palette.setColor(QPalette.ColorRole.WindowText, QColor(LIGHT_OFF_WHITE))
        palette.setColor(QPalette.ColorRole.Base, QColor(38, 70, 69))
        palette.setColor(QPalette.ColorRole.AlternateBase, QColor(44, 82, 81))
        palette.setColor(QPalette.ColorRole.Text, QColor(LIGHT_OFF_WHITE))
        palette.setColor(QPalette.ColorRole.Button, QColor(SOFT_BLUE_GREY))
        palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.black)
        palette.setColor(QPalette.ColorRole.Highlight, QColor(LIGHT_GREEN_GREY))
        palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.black)
        palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(180, 196, 190))
    else:
        palette.setColor(QPalette.ColorRole.Window, QColor(LIGHT_GREEN_GREY))
        palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.black)
        palette.setColor(QPalette.ColorRole.Base, Qt.GlobalColor.white)
        palette.setColor(QPalette.ColorRole.AlternateBase, QColor(LIGHT_OFF_WHITE))
        palette.setColor(QPalette.ColorRole.Text, Qt.GlobalColor.black)
        palette.setColor(QPalette.ColorRole.Button, QColor(LIGHT_OFF_WHITE))
        palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.black)
        palette.setColor(QPalette.ColorRole.Highlight, QColor(DARK_GREEN))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor(LIGHT_OFF_WHITE))
    return palette


def apply_theme(mode: str | None) -> str:
    """Apply *mode* to the running application and return the active theme."""
    theme = normalise_theme(mode)
    app = QGuiApplication.instance()
    if app is None:
        return theme
    QGuiApplication.setPalette(build_palette(theme))
    return theme


__all__ = ["apply_theme", "build_palette", "normalise_theme"]
