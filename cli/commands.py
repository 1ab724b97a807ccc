"""CLI command handlers for Plant Tracker.

Updates:
  v0.2.0 - 2026-10-14 - Add attach-image command and stage images passed to add.
  v0.1.0 - 2026-10-08 - Initial list/add/water/update/delete handlers.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core import PlantNotFoundError, PlantTrackerError, PlantType

from .utils import format_plant_row, print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core import PlantTracker

CommandHandler = Callable[["PlantTracker", argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def run_list(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    query = str(getattr(args, "search", "") or "")
    views = tracker.search_plants(query)
    if not views:
        print("No plants match." if query.strip() else "No plants yet.")
        return 0
    print("\nPlants\n------")
    for view in views:
        print(format_plant_row(view))
    return 0


def run_add(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    image_ref: str | None = None
    image_path = getattr(args, "image", None)
    stager = tracker.image_stager
    try:
        if image_path is not None:
            if stager is None:
                logger.error("Image staging is not configured.")
                return 1
            image_ref = stager.stage(image_path)
        record = tracker.add_plant(
            args.name,
            args.days,
            image_ref,
            PlantType.parse(getattr(args, "plant_type", None)),
        )
    except PlantTrackerError as exc:
        if image_ref is not None and stager is not None:
            stager.unstage(image_ref)
        logger.error("Unable to add plant: %s", exc)
        return 1
    print_and_log(logger, logging.INFO, f"Added plant {record.id}: {record.name}")
    return 0


def run_water(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    try:
        record = tracker.water_plant(args.plant_id)
    except PlantTrackerError as exc:
        logger.error("Unable to water plant: %s", exc)
        return 1
    print_and_log(logger, logging.INFO, f"Watered {record.name}.")
    return 0


def run_update(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    try:
        record = tracker.update_plant(args.plant_id, args.name, args.days)
    except PlantTrackerError as exc:
        logger.error("Unable to update plant: %s", exc)
        return 1
    print_and_log(logger, logging.INFO, f"Updated plant {record.id}: {record.name}")
    return 0


def run_attach_image(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    try:
        record = tracker.replace_plant_image(args.plant_id, args.path)
    except PlantTrackerError as exc:
        logger.error("Unable to attach image: %s", exc)
        return 1
    print_and_log(logger, logging.INFO, f"Attached photo to {record.name}.")
    return 0


def run_delete(tracker: PlantTracker, args: argparse.Namespace, logger: logging.Logger) -> int:
    try:
        tracker.delete_plant(args.plant_id, remove_image=not getattr(args, "keep_image", False))
    except PlantNotFoundError as exc:
        logger.error("Unable to delete plant: %s", exc)
        return 1
    except PlantTrackerError as exc:
        logger.error("Failed to save after deleting plant %s: %s", args.plant_id, exc)
        return 1
    print_and_log(logger, logging.INFO, "Plant deleted.")
    return 0


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    "list": CommandSpec(run_list),
    "add": CommandSpec(run_add),
    "water": CommandSpec(run_water),
    "update": CommandSpec(run_update),
    "attach-image": CommandSpec(run_attach_image),
    "delete": CommandSpec(run_delete),
}


__all__ = ["CommandSpec", "COMMAND_SPECS"]
