"""Tests for GUI application helpers.

Updates: v0.1.0 - 2026-10-10 - Ensure offscreen fallback only triggers when headless.
"""

from __future__ import annotations

import sys

import pytest

pytest.importorskip("PySide6")
from gui import application  # noqa: E402
from gui.appearance import build_palette, normalise_theme  # noqa: E402


def test_offscreen_forced_only_without_display(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "linux")
    assert application._should_force_offscreen({}) is True
    assert application._should_force_offscreen({"DISPLAY": ":0"}) is False
    assert application._should_force_offscreen({"WAYLAND_DISPLAY": "wayland-0"}) is False
    assert application._should_force_offscreen({"QT_QPA_PLATFORM": "xcb"}) is False


def test_offscreen_never_forced_on_desktop_platforms(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "darwin")
    assert application._should_force_offscreen({}) is False


def test_create_qapplication_reuses_instance() -> None:
    first = application.create_qapplication()
    assert application.create_qapplication() is first


def test_theme_normalisation_and_palettes() -> None:
    assert normalise_theme(None) == "light"
    assert normalise_theme(" Dark ") == "dark"
    assert normalise_theme("neon") == "light"
    assert build_palette("dark") != build_palette("light")
