"""Current-value holder with publish/subscribe change notification.

Updates:
  v0.1.2 - 2026-10-19 - Split assign/notify so owners can publish after releasing their lock.
  v0.1.1 - 2026-10-10 - Deliver callbacks outside the lock with a snapshot of subscribers.
  v0.1.0 - 2026-10-06 - Introduce observable value with disposable subscriptions.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("plant_tracker.observable")

T = TypeVar("T")


class Subscription(Generic[T]):
    """Disposable handle that removes its callback when closed."""

    def __init__(self, source: ObservableValue[T], callback: Callable[[T], None]) -> None:
        self._source = source
        self._callback = callback
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Detach the stored callback if it is still active."""
        if self._closed:
            return
        self._closed = True
        self._source.unsubscribe(self._callback)

    def __enter__(self) -> Subscription[T]:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class ObservableValue(Generic[T]):
    """Thread-safe holder whose value is readable synchronously and pushed on change."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []
        self._lock = threading.RLock()

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Subscription[T]:
        """Register *callback* to receive every future value."""
        with self._lock:
            self._subscribers.append(callback)
        return Subscription(self, callback)

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        """Remove a previously subscribed callback if present."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def assign(self, value: T) -> None:
        """Replace the current value without notifying subscribers."""
        with self._lock:
            self._value = value

    def set(self, value: T) -> None:
        """Replace the current value and notify subscribers."""
        self.assign(value)
        self.notify()

    def notify(self) -> None:
        """Deliver the current value to a snapshot of the subscribers.

        Callers holding their own lock should release it first so a callback
        may hand work to another thread that writes back.
        """
        with self._lock:
            value = self._value
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(value)
            except Exception:  # pragma: no cover - one bad listener must not block the rest
                logger.exception("Observable subscriber raised an exception")


__all__ = ["ObservableValue", "Subscription"]
