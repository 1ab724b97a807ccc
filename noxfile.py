"""noxfile.py - Nox sessions for Plant Tracker.

Updates:
  v0.1.1 - 2026-10-15 - Include the cli package in lint and test locations.
  v0.1.0 - 2026-10-05 - Ruff/Pyright/Pytest quality gate sessions.

Sessions reuse the tools installed in `.venv` (`pip install -e .[dev]`) instead of
building isolated environments: `format`, `lint`, `typecheck`, `test`, and `all`.
"""

from __future__ import annotations

import sys
from pathlib import Path

import nox

nox.options.sessions = ["lint", "typecheck", "test"]

SOURCES: tuple[str, ...] = ("main.py", "cli", "config", "core", "gui", "models", "tests")
PYTEST_ARGS: tuple[str, ...] = (
    "-n",
    "auto",
    "--cov=core",
    "--cov=models",
    "--cov=config",
    "--cov-report=term-missing",
    "--cov-fail-under=80",
)

_VENV_BIN = Path(".venv") / ("Scripts" if sys.platform == "win32" else "bin")


def _run_tool(session: nox.Session, tool: str, *args: str) -> None:
    """Run *tool* from the project `.venv`, failing with setup guidance when absent."""
    executable = _VENV_BIN / (f"{tool}.exe" if sys.platform == "win32" else tool)
    if not executable.exists():
        session.error(f"{executable} not found; create `.venv` and run `pip install -e .[dev]` first.")
    session.run(str(executable), *args, external=True)


@nox.session(venv_backend="none")
def format(session: nox.Session) -> None:
    """Apply ruff formatting and safe fixes."""
    _run_tool(session, "ruff", "check", "--fix", *SOURCES)
    _run_tool(session, "ruff", "format", *SOURCES)


@nox.session(venv_backend="none")
def lint(session: nox.Session) -> None:
    """Check lint and formatting without modifying files."""
    _run_tool(session, "ruff", "check", *SOURCES)
    _run_tool(session, "ruff", "format", "--check", *SOURCES)


@nox.session(venv_backend="none")
def typecheck(session: nox.Session) -> None:
    _run_tool(session, "pyright")


@nox.session(venv_backend="none")
def test(session: nox.Session) -> None:
    """Run the pytest suite with coverage; extra arguments are passed through."""
    _run_tool(session, "pytest", *PYTEST_ARGS, *(session.posargs or ["tests"]))


@nox.session(venv_backend="none")
def all(session: nox.Session) -> None:
    """Format, then run every quality gate."""
    format(session)
    lint(session)
    typecheck(session)
    test(session)
