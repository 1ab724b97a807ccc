"""Argument parser for the Plant Tracker CLI.

Updates:
  v0.2.0 - 2026-10-14 - Add attach-image command and plant type option.
  v0.1.0 - 2026-10-08 - Initial launcher flags and plant sub-commands.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

PLANT_TYPE_CHOICES = ("none", "indoor", "outdoor")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("days cannot be negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser."""
    parser = argparse.ArgumentParser(description="Plant Tracker launcher")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )
    parser.add_argument(
        "--gui",
        dest="gui",
        action="store_true",
        default=None,
        help="Launch the PySide6 interface after services are initialised (default behaviour).",
    )
    parser.add_argument(
        "--no-gui",
        dest="gui",
        action="store_false",
        help="Skip launching the GUI and exit once services are initialised.",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser(
        "list",
        help="List plants, longest since watered first.",
    )
    list_parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Only show plants whose name contains this text (case-insensitive).",
    )

    add_parser = subparsers.add_parser("add", help="Add a new plant.")
    add_parser.add_argument("name", type=str, help="Plant name.")
    add_parser.add_argument(
        "--days",
        type=_non_negative_int,
        default=0,
        help="Days since the plant was last watered (default: 0).",
    )
    add_parser.add_argument(
        "--image",
        type=Path,
        default=None,
        help="Image file to copy into private storage and attach.",
    )
    add_parser.add_argument(
        "--type",
        dest="plant_type",
        choices=PLANT_TYPE_CHOICES,
        default="none",
        help="Plant classification (default: none).",
    )

    water_parser = subparsers.add_parser("water", help="Mark a plant as watered now.")
    water_parser.add_argument("plant_id", type=int, help="Plant identifier.")

    update_parser = subparsers.add_parser(
        "update",
        help="Rename a plant and set its days since watering.",
    )
    update_parser.add_argument("plant_id", type=int, help="Plant identifier.")
    update_parser.add_argument("name", type=str, help="New plant name.")
    update_parser.add_argument(
        "--days",
        type=_non_negative_int,
        required=True,
        help="Days since the plant was last watered.",
    )

    attach_parser = subparsers.add_parser(
        "attach-image",
        help="Replace a plant photo with a copy of the given image file.",
    )
    attach_parser.add_argument("plant_id", type=int, help="Plant identifier.")
    attach_parser.add_argument("path", type=Path, help="Image file to attach.")

    delete_parser = subparsers.add_parser("delete", help="Delete a plant.")
    delete_parser.add_argument("plant_id", type=int, help="Plant identifier.")
    delete_parser.add_argument(
        "--keep-image",
        action="store_true",
        help="Leave the staged photo on disk.",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Plant Tracker launcher."""
    return build_parser().parse_args(argv)
