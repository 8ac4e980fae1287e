"""Shared pytest fixtures for SplitSecond tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from splitsecond.timer.engine import TimerEngine, TimerMode

from helpers import FakeClock, ManualScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def make_engine(clock, scheduler):
    """Factory for engines wired to the fake clock and manual scheduler."""

    def factory(mode=TimerMode.COUNTDOWN, length=1000, **kwargs):
        return TimerEngine(mode, length, scheduler=scheduler, clock=clock, **kwargs)

    return factory


@pytest.fixture
def countdown(make_engine):
    """Fresh 10 s countdown, overflow OFF."""
    return make_engine(TimerMode.COUNTDOWN, 10_000, allow_overflow=False)


@pytest.fixture
def stopwatch(make_engine):
    """Fresh 10 s stopwatch, overflow ON."""
    return make_engine(TimerMode.STOPWATCH, 10_000, allow_overflow=True)


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("splitsecond.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("splitsecond.settings.SETTINGS_PATH", tmp_path / "settings.json")
    return tmp_path / "settings.json"
