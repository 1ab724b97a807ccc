"""Application entry point for Plant Tracker.

Updates:
  v0.2.0 - 2026-10-14 - Dispatch plant sub-commands before falling back to the GUI.
  v0.1.0 - 2026-10-08 - Wire settings, logging, and the tracker factory.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from cli.commands import COMMAND_SPECS
from cli.gui_launcher import run_default_mode
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings
from core import PlantTrackerError, build_plant_tracker

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from config import PlantTrackerSettings
    from core import PlantTracker


def _initialise_tracker(
    settings: PlantTrackerSettings,
    logger: logging.Logger,
) -> PlantTracker | None:
    try:
        return build_plant_tracker(settings)
    except PlantTrackerError as exc:
        logger.error("Failed to initialise plant store: %s", exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, services, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("plant_tracker.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        cause = exc.__cause__
        logger.error("Failed to load settings: %s%s", exc, f" ({cause})" if cause else "")
        return 2

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    tracker = _initialise_tracker(settings, logger)
    if tracker is None:
        return 3

    spec = COMMAND_SPECS.get(getattr(args, "command", None))
    if spec is not None:
        return spec.handler(tracker, args, logger)
    return run_default_mode(tracker, settings, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
