"""Application settings with JSON persistence.

Settings are stored at:
    ~/.splitsecond/settings.json

Usage::

    settings = load_settings()
    settings.length_ms = 90_000
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import TimerMode
from .timer.scheduler import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


APP_SUPPORT_DIR = Path.home() / ".splitsecond"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    mode: str = "countdown"                # countdown | stopwatch
    length_ms: int = 5 * 60 * 1000
    allow_overflow: bool = False
    autostart: bool = False
    frame_interval_ms: int = FRAME_INTERVAL_MS

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 240
    always_on_top: bool = False


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return _validated(Settings(**filtered))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
        return Settings()


def _validated(settings: Settings) -> Settings:
    """Raise ValueError / TypeError on values the window cannot use."""
    settings.mode = TimerMode(settings.mode).value
    for name in ("length_ms", "frame_interval_ms", "window_width", "window_height"):
        value = getattr(settings, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {value!r}")
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
