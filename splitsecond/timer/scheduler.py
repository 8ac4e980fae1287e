"""Host scheduling primitive and clock used by the timer engine.

The engine never holds a handle to a scheduled callback.  It posts
"run this on the next frame" and re-checks its own state when the
callback fires.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

from PyQt6.QtCore import QTimer


FRAME_INTERVAL_MS = 16  # ~60 Hz, one display refresh


class Scheduler(Protocol):
    def __call__(self, callback: Callable[[], None]) -> None: ...


class FrameScheduler:
    """Post a callback onto the Qt event loop after one frame interval."""

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        self._interval_ms = max(0, int(interval_ms))

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def __call__(self, callback: Callable[[], None]) -> None:
        QTimer.singleShot(self._interval_ms, callback)


def monotonic_ms() -> int:
    """Milliseconds from a clock that wall-clock changes cannot move."""
    return time.monotonic_ns() // 1_000_000
