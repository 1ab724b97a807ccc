"""Qt application helpers for the Plant Tracker GUI.

Updates:
  v0.1.1 - 2026-10-10 - Detect display server before forcing offscreen backend.
  v0.1.0 - 2026-10-09 - Provide QApplication factory and launch routine.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, cast

from PySide6.QtWidgets import QApplication, QStyleFactory

from .main_window import MainWindow

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from config import PlantTrackerSettings
    from core import PlantTracker

APPLICATION_NAME = "Plant Tracker"
_HEADLESS_PLATFORM = "offscreen"
_DISPLAY_VARIABLES = ("DISPLAY", "WAYLAND_DISPLAY", "MIR_SOCKET")

logger = logging.getLogger("plant_tracker.gui.application")


def _should_force_offscreen(env: Mapping[str, str]) -> bool:
    """Return True on Linux-like hosts with no display server and no explicit Qt platform."""
    if env.get("QT_QPA_PLATFORM"):
        return False
    if sys.platform == "darwin" or sys.platform.startswith(("win", "cygwin")):
        return False
    return all(not env.get(name) for name in _DISPLAY_VARIABLES)


def create_qapplication(argv: Sequence[str] | None = None) -> QApplication:
    """Return the running QApplication, creating a Fusion-styled one if needed."""
    running = QApplication.instance()
    if running is not None:
        return cast(QApplication, running)

    if _should_force_offscreen(os.environ):
        logger.info("No display server detected; using the %s Qt platform", _HEADLESS_PLATFORM)
        os.environ["QT_QPA_PLATFORM"] = _HEADLESS_PLATFORM

    app = QApplication(list(argv) if argv else [])
    app.setApplicationName(APPLICATION_NAME)
    style = QStyleFactory.create("Fusion")
    if style is not None:
        app.setStyle(style)
    return app


def launch_plant_tracker(tracker: PlantTracker, settings: PlantTrackerSettings | None = None) -> int:
    """Show the main window for *tracker* and run the Qt event loop until it closes."""
    app = create_qapplication(sys.argv[:1])
    window = MainWindow(tracker, settings=settings)
    window.show()
    exit_code = app.exec()
    logger.debug("GUI event loop finished with exit code %s", exit_code)
    return exit_code


__all__ = ["create_qapplication", "launch_plant_tracker"]
