"""PySide6 front end for Plant Tracker.

Importing this package never fails because Qt is missing: without PySide6 the
public launchers raise :class:`GuiDependencyError`, which the CLI turns into a
dedicated exit code.

Updates:
  v0.1.2 - 2026-10-19 - Build the missing-Qt launchers from one helper.
  v0.1.1 - 2026-10-10 - Fall back to raising launchers when Qt is unavailable.
  v0.1.0 - 2026-10-09 - Export the window launcher.
"""

from __future__ import annotations

from typing import Any, NoReturn


class GuiDependencyError(RuntimeError):
    """The plant window cannot open because the Qt bindings are unavailable."""


QT_INSTALL_HINT = (
    "The plant window needs PySide6. Run `pip install -e .` in the project "
    "directory, or use --no-gui for command-line mode."
)


def _unavailable(feature: str) -> Any:
    def _raise(*_: object, **__: object) -> NoReturn:
        raise GuiDependencyError(f"{feature} unavailable. {QT_INSTALL_HINT}")

    _raise.__name__ = feature
    return _raise


try:
    from .application import create_qapplication, launch_plant_tracker
except ModuleNotFoundError as exc:  # pragma: no cover - depends on the installed extras
    if not (exc.name or "").startswith("PySide6"):
        raise
    create_qapplication = _unavailable("create_qapplication")
    launch_plant_tracker = _unavailable("launch_plant_tracker")


__all__ = ["GuiDependencyError", "QT_INSTALL_HINT", "create_qapplication", "launch_plant_tracker"]
