"""Conversions between stored watering timestamps and whole-day ages.

Both conversions take ``now`` explicitly so results are deterministic; only
:func:`now_millis` reads the wall clock.

Updates:
  v0.1.1 - 2026-10-09 - Add display label helper shared by GUI and CLI.
  v0.1.0 - 2026-10-05 - Extract day/timestamp conversions.
"""

from __future__ import annotations

import time

MILLIS_PER_DAY = 24 * 60 * 60 * 1000


def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def to_days_since_watered(timestamp_millis: int, now: int) -> int:
    """Return whole days elapsed between *timestamp_millis* and *now* (floored)."""
    return (now - timestamp_millis) // MILLIS_PER_DAY


def to_timestamp(days_since_watered: int, now: int) -> int:
    """Return the epoch-millisecond timestamp lying *days_since_watered* days before *now*."""
    return now - days_since_watered * MILLIS_PER_DAY


def describe_days_since(days: int) -> str:
    """Return the list label for a watering age."""
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


__all__ = [
    "MILLIS_PER_DAY",
    "describe_days_since",
    "now_millis",
    "to_days_since_watered",
    "to_timestamp",
]
