"""Timer display widget: wraps a ``TimerEngine`` for Qt.

Mirrors the engine's ``state``, elapsed time, ``is_done`` and
``is_overflowed`` into plain attributes and re-emits every engine event
as a Qt signal.  Renders ``HH:MM:SS:mmm`` labels unless a custom
``renderer`` is supplied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame

from ..errors import InvalidStateError
from ..timer.engine import TimerEngine, TimerMode, RunState
from ..timer.events import TimerEvent
from ..timer.format import get_time_parts
from ..timer.scheduler import Scheduler


@dataclass(frozen=True)
class TimerView:
    """Everything a renderer needs for one frame."""

    time: dict[str, str]
    state: RunState
    time_elapsed: int
    is_overflowed: bool
    is_done: bool


Renderer = Callable[[TimerView], None]

# (label object name, time part key) in display order
_DIGIT_SLOTS: tuple[tuple[str, str], ...] = (
    ("timerHours", "h"),
    ("timerMinutes", "m"),
    ("timerSeconds", "s"),
    ("timerMilliseconds", "ms"),
)


class TimerWidget(QWidget):
    """A single countdown or stopwatch with its own engine."""

    state_changed = pyqtSignal(object)
    started = pyqtSignal()
    stopped = pyqtSignal()
    paused = pyqtSignal()
    resumed = pyqtSignal()
    was_reset = pyqtSignal(object)       # baseline ms
    ticked = pyqtSignal(object)          # elapsed ms
    done_changed = pyqtSignal(bool)
    overflow_changed = pyqtSignal(bool)

    def __init__(
        self,
        mode: TimerMode | str = TimerMode.COUNTDOWN,
        length: int = 0,
        *,
        autostart: bool = False,
        allow_overflow: bool = False,
        renderer: Renderer | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], int] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._renderer = renderer
        self._digits: dict[str, QLabel] = {}
        self._frame: QFrame | None = None

        self._engine = TimerEngine(
            mode, length,
            allow_overflow=allow_overflow,
            scheduler=scheduler,
            clock=clock,
        )
        self.state: RunState = self._engine.state
        self.time_elapsed: int = self._engine.baseline
        self.is_overflowed: bool = False
        self.is_done: bool = False

        if self._renderer is None:
            self._build_ui()
        self._connect_engine()
        self._refresh()

        if autostart:
            self._engine.start()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self._frame = QFrame(self)
        self._frame.setObjectName("timer")
        root.addWidget(self._frame)

        row = QHBoxLayout(self._frame)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.setSpacing(2)

        for i, (name, key) in enumerate(_DIGIT_SLOTS):
            if i:
                delim = QLabel(":", self._frame)
                delim.setObjectName("timerDelimiter")
                row.addWidget(delim)
            label = QLabel(self._frame)
            label.setObjectName(name)
            row.addWidget(label)
            self._digits[key] = label

    # ── engine wiring ─────────────────────────────────────────────────────

    def _connect_engine(self) -> None:
        on = self._engine.on
        on(TimerEvent.STATE_CHANGED, self._on_state_changed)
        on(TimerEvent.TICK, self._on_tick)
        on(TimerEvent.RESET, self._on_reset)
        on(TimerEvent.DONE, self._on_done)
        on(TimerEvent.OVERFLOW, self._on_overflow)
        on(TimerEvent.START, self.started.emit)
        on(TimerEvent.STOP, self.stopped.emit)
        on(TimerEvent.PAUSE, self.paused.emit)
        on(TimerEvent.RESUME, self.resumed.emit)

    def _on_state_changed(self, state: RunState) -> None:
        self.state = state
        self._refresh()
        self.state_changed.emit(state)

    def _on_tick(self, elapsed: int) -> None:
        self.time_elapsed = elapsed
        self.is_overflowed = self._engine.is_overflowed
        self._refresh()
        self.ticked.emit(elapsed)

    def _on_reset(self, baseline: int) -> None:
        self.time_elapsed = baseline
        self.is_overflowed = self._engine.is_overflowed
        self.is_done = self._engine.is_done
        self._refresh()
        self.was_reset.emit(baseline)

    def _on_done(self, flag: bool) -> None:
        self.is_done = flag
        self._refresh()
        self.done_changed.emit(flag)

    def _on_overflow(self, flag: bool) -> None:
        self.is_overflowed = flag
        self._refresh()
        self.overflow_changed.emit(flag)

    # ── public read access ────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def time(self) -> dict[str, str]:
        return get_time_parts(abs(self.time_elapsed))

    def view(self) -> TimerView:
        return TimerView(
            time=self.time,
            state=self.state,
            time_elapsed=self.time_elapsed,
            is_overflowed=self.is_overflowed,
            is_done=self.is_done,
        )

    # ── controls ──────────────────────────────────────────────────────────

    def start(self) -> None:
        self._engine.start()

    def stop(self) -> None:
        self._engine.stop()

    def pause(self) -> None:
        self._engine.pause()

    def resume(self) -> None:
        self._engine.resume()

    def reset(self) -> None:
        self._engine.reset()

    def toggle(self) -> None:
        """Start, pause or resume depending on the mirrored state."""
        if self.state == RunState.PAUSED:
            self._engine.resume()
        elif self.state == RunState.RUNNING:
            self._engine.pause()
        elif self.state == RunState.STOPPED:
            self._engine.start()
        else:
            raise InvalidStateError(
                f"unable to toggle: unknown timer state: {self.state!r}"
            )

    # ── property updates ──────────────────────────────────────────────────

    def set_mode(self, mode: TimerMode | str) -> None:
        """Takes effect on the next start() / reset()."""
        self._engine.mode = TimerMode(mode)

    def set_allow_overflow(self, allow: bool) -> None:
        self._engine.allow_overflow = bool(allow)

    def set_length(self, length: int) -> None:
        self._engine.set_length(length)
        self.state = self._engine.state
        self.time_elapsed = self._engine.baseline
        self.is_overflowed = self._engine.is_overflowed
        self.is_done = self._engine.is_done
        self._refresh()

    # ── teardown ──────────────────────────────────────────────────────────

    def dispose(self) -> None:
        """Stop the engine and detach from it.  Safe to call twice."""
        if self._engine.is_destroyed:
            return
        self._engine.stop()
        self._engine.destroy()

    def closeEvent(self, event) -> None:
        self.dispose()
        super().closeEvent(event)

    # ── rendering ─────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        view = self.view()
        if self._renderer is not None:
            self._renderer(view)
            return

        for key, label in self._digits.items():
            label.setText(view.time[key])

        # dynamic properties drive the QSS in styles.build_stylesheet
        frame = self._frame
        if frame is None:
            return
        changed = False
        for name, value in (("done", view.is_done), ("overflowed", view.is_overflowed)):
            if frame.property(name) != value:
                frame.setProperty(name, value)
                changed = True
        if changed:
            frame.style().unpolish(frame)
            frame.style().polish(frame)
