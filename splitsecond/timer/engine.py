"""Countdown / stopwatch state machine for SplitSecond.

States
------
STOPPED   Not running.  Elapsed time reads as 0.
RUNNING   Counting; recomputed once per frame.
PAUSED    Frozen at the instant ``pause()`` was called.

Transitions
-----------
Any      → RUNNING   (start; restarts a running timer)
RUNNING  → PAUSED    (pause)
PAUSED   → RUNNING   (resume)
Any      → STOPPED   (stop / reset / set_length)
RUNNING  → STOPPED   (target reached with ``allow_overflow`` off)

Time is never accumulated.  ``start()`` fixes the absolute instant the
run ends (``ending_at``) and every read derives elapsed time from it and
the clock, so a late or throttled frame callback cannot drift the
reading.  ``resume()`` shifts ``ending_at`` by the time spent paused.

Event order for each control call: ``state_changed``, then any
``done`` / ``overflow`` edge, then the action event.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Mapping

from .events import EventEmitter, TimerEvent
from .scheduler import FrameScheduler, Scheduler, monotonic_ms

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    COUNTDOWN = "countdown"
    STOPWATCH = "stopwatch"


class RunState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Single countdown or stopwatch timer driven by a frame scheduler.

    Events (subscribe with ``engine.on(name, callback)``)
    ------
    state_changed(state: RunState)
    start() / stop() / pause() / resume()
    reset(baseline_ms: int)
        ``length`` for a countdown, ``0`` for a stopwatch.
    tick(elapsed_ms: int)
        Every recomputation while running.
    done(flag: bool) / overflow(flag: bool)
        Edge notifications, fired only when the flag changes.
    """

    def __init__(
        self,
        mode: TimerMode | str = TimerMode.COUNTDOWN,
        length: int = 0,
        *,
        allow_overflow: bool = True,
        scheduler: Scheduler | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        # ── configuration ─────────────────────────────────────────────
        self.mode: TimerMode = TimerMode(mode)
        self.allow_overflow: bool = bool(allow_overflow)
        self._length: int = length

        # ── host hooks ────────────────────────────────────────────────
        self._schedule: Scheduler = scheduler or FrameScheduler()
        self._clock: Callable[[], int] = clock or monotonic_ms

        # ── run state ─────────────────────────────────────────────────
        self._state: RunState = RunState.STOPPED
        self._is_done: bool = False
        self._is_overflowed: bool = False
        self._paused_at: int = 0
        self._ending_at: int = 0
        self._run: int = 0                  # bumped by every start()

        # ── frame loop ────────────────────────────────────────────────
        self._frame_pending: bool = False
        self._destroyed: bool = False

        self.events = EventEmitter()

    @classmethod
    def from_options(
        cls,
        mode: TimerMode | str,
        length: int,
        options: Mapping[str, Any] | None = None,
        **hooks: Any,
    ) -> "TimerEngine":
        """Build from an options mapping.  Values are copied, not aliased."""
        options = dict(options or {})
        return cls(
            mode,
            length,
            allow_overflow=options.get("allow_overflow", True),
            **hooks,
        )

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def length(self) -> int:
        """Countdown start / stopwatch target, in ms.  See ``set_length``."""
        return self._length

    @property
    def is_done(self) -> bool:
        return self._is_done

    @property
    def is_overflowed(self) -> bool:
        return self._is_overflowed

    @property
    def is_running(self) -> bool:
        return self._state == RunState.RUNNING

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def time(self) -> int:
        """Elapsed milliseconds for the current run (0 when stopped).

        Counts down from ``length`` in countdown mode and up from 0 in
        stopwatch mode.  Past the target the value keeps moving: negative
        for a countdown, above ``length`` for a stopwatch.
        """
        if self._state == RunState.STOPPED:
            return 0
        reference = (
            self._paused_at if self._state == RunState.PAUSED else self._clock()
        )
        time_left = self._ending_at - reference
        if self.mode == TimerMode.COUNTDOWN:
            return time_left
        return self._length - time_left

    @property
    def baseline(self) -> int:
        """What to display right after a reset."""
        return self._length if self.mode == TimerMode.COUNTDOWN else 0

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current run."""
        if self._length <= 0 or self._state == RunState.STOPPED:
            return 0.0
        time_left = self._ending_at - (
            self._paused_at if self._state == RunState.PAUSED else self._clock()
        )
        elapsed = self._length - time_left
        return max(0.0, min(1.0, elapsed / self._length))

    # ── subscriptions ─────────────────────────────────────────────────

    def on(self, event: TimerEvent | str, callback: Callable[..., Any]) -> None:
        self.events.on(event, callback)

    def off(
        self, event: TimerEvent | str, callback: Callable[..., Any] | None = None
    ) -> None:
        self.events.off(event, callback)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a fresh run.  Restarts the timer if it is already going."""
        if self._destroyed:
            return
        self._run += 1
        now = self._clock()
        self._paused_at = 0
        self._ending_at = now + self._length
        self._transition(RunState.RUNNING, done=False, overflowed=False)
        logger.debug("start: %s, %d ms", self.mode.value, self._length)
        self.events.emit(TimerEvent.START)
        self._tick()

    def pause(self) -> None:
        """Freeze the reading.  No-op unless running."""
        if self._destroyed or self._state != RunState.RUNNING:
            return
        self._paused_at = self._clock()
        self._transition(RunState.PAUSED)
        logger.debug("pause at %d ms", self.time)
        self.events.emit(TimerEvent.PAUSE)

    def resume(self) -> None:
        """Continue a paused run from exactly where it froze."""
        if self._destroyed or self._state != RunState.PAUSED:
            return
        self._ending_at += self._clock() - self._paused_at
        self._paused_at = 0
        self._transition(RunState.RUNNING)
        logger.debug("resume at %d ms", self.time)
        self.events.emit(TimerEvent.RESUME)
        self._tick()

    def stop(self, mark_done: bool = False) -> None:
        """Stop from any state.  Re-emits its events even when stopped."""
        if self._destroyed:
            return
        self._paused_at = 0
        self._ending_at = 0
        self._transition(
            RunState.STOPPED, done=bool(mark_done), overflowed=False,
        )
        logger.debug("stop (done=%s)", self._is_done)
        self.events.emit(TimerEvent.STOP)

    def reset(self) -> None:
        """Stop and clear the run, announcing the baseline reading."""
        if self._destroyed:
            return
        self._paused_at = 0
        self._ending_at = 0
        self._transition(RunState.STOPPED, done=False, overflowed=False)
        self.events.emit(TimerEvent.RESET, self.baseline)

    def set_length(self, length: int) -> None:
        """Change the target.  Stops an active run; call ``start()`` after.

        A paused run is stopped as well so no stale ``ending_at`` from the
        old length survives.  ``reset`` is not emitted.
        """
        if self._destroyed:
            return
        if self._state != RunState.STOPPED:
            self.stop()
        self._paused_at = 0
        self._ending_at = 0
        self._set_flags(done=False, overflowed=False)
        self._length = length

    def destroy(self) -> None:
        """Drop every subscriber; any queued frame becomes a no-op."""
        self._destroyed = True
        self.events.clear()
        logger.debug("destroyed")

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: frame loop
    # ══════════════════════════════════════════════════════════════════

    def _arm(self) -> None:
        # one queued frame at most, otherwise resume() would fork the chain
        if self._frame_pending:
            return
        self._frame_pending = True
        self._schedule(self._on_frame)

    def _on_frame(self) -> None:
        self._frame_pending = False
        if self._destroyed:
            return
        self._tick()

    def _tick(self) -> None:
        if self._state != RunState.RUNNING:
            return
        run = self._run

        if self._clock() < self._ending_at:
            self.events.emit(TimerEvent.TICK, self.time)
            if self._is_current(run):
                self._arm()
            return

        if self.allow_overflow:
            # handlers below may end or restart the run
            self._set_flags(done=True)
            if not self._is_current(run):
                return
            self.events.emit(TimerEvent.TICK, self.time)
            if not self._is_current(run):
                return
            self._set_flags(overflowed=True)
            if self._is_current(run):
                self._arm()
            return

        boundary = 0 if self.mode == TimerMode.COUNTDOWN else self._length
        self.events.emit(TimerEvent.TICK, boundary)
        if not self._is_current(run):
            return
        logger.debug("target reached, stopping")
        self.stop(mark_done=True)

    def _is_current(self, run: int) -> bool:
        return self._run == run and self._state == RunState.RUNNING

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: state & flags
    # ══════════════════════════════════════════════════════════════════

    def _transition(
        self,
        new_state: RunState,
        *,
        done: bool | None = None,
        overflowed: bool | None = None,
    ) -> None:
        """Set state and flags, then emit state_changed and any edges."""
        self._state = new_state
        edges = self._apply_flags(done, overflowed)
        self.events.emit(TimerEvent.STATE_CHANGED, new_state)
        self._emit_edges(edges)

    def _set_flags(
        self, *, done: bool | None = None, overflowed: bool | None = None,
    ) -> None:
        self._emit_edges(self._apply_flags(done, overflowed))

    def _apply_flags(
        self, done: bool | None, overflowed: bool | None,
    ) -> list[tuple[TimerEvent, bool]]:
        edges: list[tuple[TimerEvent, bool]] = []
        if done is not None and done != self._is_done:
            self._is_done = done
            edges.append((TimerEvent.DONE, done))
        if overflowed is not None and overflowed != self._is_overflowed:
            self._is_overflowed = overflowed
            edges.append((TimerEvent.OVERFLOW, overflowed))
        return edges

    def _emit_edges(self, edges: list[tuple[TimerEvent, bool]]) -> None:
        for event, flag in edges:
            self.events.emit(event, flag)
