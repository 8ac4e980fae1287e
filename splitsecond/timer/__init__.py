"""Timer package."""

from .engine import TimerEngine, TimerMode, RunState
from .events import EventEmitter, TimerEvent
from .format import TimeUnit, DEFAULT_UNITS, get_time_parts, format_clock
from .scheduler import FrameScheduler, FRAME_INTERVAL_MS, monotonic_ms

__all__ = [
    "TimerEngine",
    "TimerMode",
    "RunState",
    "EventEmitter",
    "TimerEvent",
    "TimeUnit",
    "DEFAULT_UNITS",
    "get_time_parts",
    "format_clock",
    "FrameScheduler",
    "FRAME_INTERVAL_MS",
    "monotonic_ms",
]
