"""Shared test helpers for SplitSecond."""

from __future__ import annotations

from typing import Callable

from splitsecond.timer.engine import TimerEngine
from splitsecond.timer.events import TimerEvent


class SignalCollector:
    """Utility to capture pyqtSignal emissions or engine callbacks into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class EventLog:
    """Record every engine event, in order, as ``(name, *payload)`` tuples."""

    def __init__(self, engine: TimerEngine):
        self.items: list[tuple] = []
        for event in TimerEvent:
            engine.on(event, self._recorder(event))

    def _recorder(self, event: TimerEvent):
        def record(*args):
            self.items.append((event.value, *args))
        return record

    def names(self) -> list[str]:
        return [item[0] for item in self.items]

    def of(self, name: str) -> list[tuple]:
        return [item for item in self.items if item[0] == name]

    def clear(self):
        self.items.clear()


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class ManualScheduler:
    """Frame scheduler that queues callbacks until ``run_pending()``."""

    def __init__(self):
        self.pending: list[Callable[[], None]] = []

    def __call__(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def run_pending(self) -> int:
        """Fire the frames queued so far; returns how many ran."""
        batch, self.pending = self.pending, []
        for callback in batch:
            callback()
        return len(batch)


def advance_frame(clock: FakeClock, scheduler: ManualScheduler, ms: int) -> None:
    """Move the clock forward and deliver the next frame."""
    clock.advance(ms)
    scheduler.run_pending()
