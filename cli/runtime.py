"""Runtime boot helpers for the Plant Tracker CLI.

Updates:
  v0.1.1 - 2026-10-15 - Fall back to basic logging when the INI file is invalid.
  v0.1.0 - 2026-10-08 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config") / "logging.conf"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(logging_conf_path: Path | None) -> None:
    """Apply an INI logging config if one is found, else log INFO to stderr."""
    conf = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if not conf.is_file():
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        return
    try:
        logging.config.fileConfig(conf, disable_existing_loggers=False)
    except (OSError, ValueError, KeyError) as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logging.getLogger("plant_tracker.runtime").warning("Ignoring invalid logging config %s: %s", conf, exc)
