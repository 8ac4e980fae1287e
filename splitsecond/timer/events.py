"""Synchronous observer registry for timer notifications.

Each event name maps to an ordered set of callbacks.  Emission happens
in-process on the calling thread, in subscription order.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class TimerEvent(Enum):
    STATE_CHANGED = "state_changed"   # payload: RunState
    START = "start"
    STOP = "stop"
    PAUSE = "pause"
    RESUME = "resume"
    RESET = "reset"                   # payload: baseline ms
    TICK = "tick"                     # payload: elapsed ms
    DONE = "done"                     # payload: bool
    OVERFLOW = "overflow"             # payload: bool


Callback = Callable[..., Any]


class EventEmitter:
    """Name → ordered callbacks.

    Events may be given as ``TimerEvent`` members or their string
    values (``"tick"``); anything else raises ``ValueError``.
    """

    def __init__(self) -> None:
        self._handlers: dict[TimerEvent, list[Callback]] = {}

    def on(self, event: TimerEvent | str, callback: Callback) -> None:
        handlers = self._handlers.setdefault(TimerEvent(event), [])
        if callback not in handlers:
            handlers.append(callback)

    def off(self, event: TimerEvent | str, callback: Callback | None = None) -> None:
        """Unsubscribe *callback*, or every callback when it is omitted."""
        key = TimerEvent(event)
        if callback is None:
            self._handlers.pop(key, None)
            return
        handlers = self._handlers.get(key)
        if handlers and callback in handlers:
            handlers.remove(callback)

    def emit(self, event: TimerEvent | str, *args: Any) -> None:
        # iterate a copy: handlers may unsubscribe while being called
        for callback in list(self._handlers.get(TimerEvent(event), ())):
            callback(*args)

    def listener_count(self, event: TimerEvent | str) -> int:
        return len(self._handlers.get(TimerEvent(event), ()))

    def clear(self) -> None:
        self._handlers.clear()
