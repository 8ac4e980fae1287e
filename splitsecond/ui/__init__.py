"""UI package."""

from .timer_widget import TimerWidget, TimerView
from .styles import build_stylesheet, state_color, STATE_COLORS

__all__ = [
    "TimerWidget",
    "TimerView",
    "build_stylesheet",
    "state_color",
    "STATE_COLORS",
]
