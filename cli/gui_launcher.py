"""Fallback behaviour when no plant sub-command is given.

Updates:
  v0.1.1 - 2026-10-14 - Map GUI dependency failures to exit code 4.
  v0.1.0 - 2026-10-08 - Launch the PySide6 window unless --no-gui is passed.
"""

from __future__ import annotations

import argparse
import importlib
import logging
from typing import TYPE_CHECKING

from .utils import print_and_log

if TYPE_CHECKING:
    from config import PlantTrackerSettings
    from core import PlantTracker

GUI_FAILURE_EXIT_CODE = 4


def run_default_mode(
    tracker: PlantTracker,
    settings: PlantTrackerSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    """Report where plants are stored, then open the GUI unless disabled."""
    print_and_log(
        logger,
        logging.INFO,
        f"Plant Tracker ready. Preferences at {settings.resolved_preferences_path}",
    )
    if args.gui is False:
        return 0

    try:
        gui = importlib.import_module("gui")
    except ModuleNotFoundError as exc:
        logger.error("Cannot open the GUI without %s; rerun with --no-gui or install PySide6.", exc.name)
        return GUI_FAILURE_EXIT_CODE

    dependency_error = getattr(gui, "GuiDependencyError", RuntimeError)
    try:
        return int(gui.launch_plant_tracker(tracker, settings))
    except dependency_error as exc:
        logger.error("Unable to start GUI: %s", exc)
        return GUI_FAILURE_EXIT_CODE
