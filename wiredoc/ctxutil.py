"""Cancellation that fires a fixed delay after another event is set."""

from __future__ import annotations

import threading
from typing import Protocol

_POLL_INTERVAL = 0.01


class _Event(Protocol):
    def is_set(self) -> bool: ...

    def wait(self, timeout: float | None = None) -> bool: ...


class DelayedCancel:
    """A cancellation flag set by cancel() or a background timer."""

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Cancel now; calling it again has no effect."""
        self._cancelled.set()

    def is_cancelled(self) -> bool:
        """Return True once cancelled."""
        return self._cancelled.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or timeout passes; return whether cancelled."""
        return self._cancelled.wait(timeout)

    def __enter__(self) -> "DelayedCancel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


def with_delay(done: _Event, delay: float) -> DelayedCancel:
    """Return a DelayedCancel that is cancelled delay seconds after done is set.

    It can also be cancelled directly at any time, which stops the timer.
    """
    result = DelayedCancel()

    def _watch() -> None:
        while not done.wait(_POLL_INTERVAL):
            if result.is_cancelled():
                return
        if result.wait(max(delay, 0)):
            return
        result.cancel()

    threading.Thread(target=_watch, daemon=True).start()
    return result