"""Main application window for SplitSecond."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QComboBox, QSpinBox, QCheckBox,
)

from .settings import Settings, load_settings, save_settings
from .timer.engine import TimerMode, RunState
from .timer.format import format_clock
from .timer.scheduler import FrameScheduler
from .ui.styles import build_stylesheet, state_color
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


_MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.COUNTDOWN: "Countdown",
    TimerMode.STOPWATCH: "Stopwatch",
}

_TOGGLE_LABELS: dict[RunState, str] = {
    RunState.STOPPED: "Start",
    RunState.RUNNING: "Pause",
    RunState.PAUSED:  "Resume",
}


class SplitSecondApp(QMainWindow):
    """Main application window: one timer plus its controls."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("SplitSecond")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet())

        self._build_ui()
        self._connect_signals()
        self._on_state_changed(self._timer_widget.state)

        if self._settings.always_on_top:
            self.setWindowFlags(
                self.windowFlags() | Qt.WindowType.WindowStaysOnTopHint
            )
        if self._settings.autostart:
            self._timer_widget.start()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        s = self._settings
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        # ── options row ──────────────────────────────────────────────
        opts = QHBoxLayout()
        self._mode_combo = QComboBox(central)
        for mode, label in _MODE_LABELS.items():
            self._mode_combo.addItem(label, mode.value)
        self._mode_combo.setCurrentIndex(
            self._mode_combo.findData(TimerMode(s.mode).value)
        )

        self._length_spin = QSpinBox(central)
        self._length_spin.setRange(0, 24 * 60 * 60)
        self._length_spin.setSuffix(" s")
        self._length_spin.setValue(s.length_ms // 1000)

        self._overflow_check = QCheckBox("Overflow", central)
        self._overflow_check.setChecked(s.allow_overflow)

        opts.addWidget(self._mode_combo)
        opts.addWidget(self._length_spin)
        opts.addWidget(self._overflow_check)
        layout.addLayout(opts)

        # ── timer ────────────────────────────────────────────────────
        self._timer_widget = TimerWidget(
            s.mode, s.length_ms,
            allow_overflow=s.allow_overflow,
            scheduler=FrameScheduler(s.frame_interval_ms),
            parent=central,
        )
        layout.addWidget(self._timer_widget)

        self._state_label = QLabel(central)
        self._state_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._state_label)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._stop_btn = QPushButton("Stop", central)
        self._stop_btn.setObjectName("dangerButton")
        self._toggle_btn = QPushButton("Start", central)
        self._toggle_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", central)

        btn_row.addWidget(self._stop_btn)
        btn_row.addWidget(self._toggle_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        tw = self._timer_widget
        self._toggle_btn.clicked.connect(tw.toggle)
        self._stop_btn.clicked.connect(tw.stop)
        self._reset_btn.clicked.connect(tw.reset)

        self._mode_combo.currentIndexChanged.connect(self._on_mode_changed)
        self._length_spin.valueChanged.connect(self._on_length_changed)
        self._overflow_check.toggled.connect(self._on_overflow_toggled)

        tw.state_changed.connect(self._on_state_changed)
        tw.ticked.connect(self._on_tick)
        tw.done_changed.connect(self._on_done_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: RunState) -> None:
        self._toggle_btn.setText(_TOGGLE_LABELS[state])
        self._state_label.setText(state.value.upper())
        self._state_label.setStyleSheet(f"color: {state_color(state)};")
        if state == RunState.STOPPED:
            self.setWindowTitle("SplitSecond")

    def _on_tick(self, elapsed: int) -> None:
        self.setWindowTitle(f"{format_clock(elapsed)} - SplitSecond")

    def _on_done_changed(self, done: bool) -> None:
        if done:
            logger.info("Timer reached %s", format_clock(self._timer_widget.engine.length))

    def _on_mode_changed(self, index: int) -> None:
        mode = TimerMode(self._mode_combo.itemData(index))
        self._timer_widget.set_mode(mode)
        # mode changes apply on the next start/reset
        self._timer_widget.reset()
        self._settings.mode = mode.value
        save_settings(self._settings)

    def _on_length_changed(self, seconds: int) -> None:
        self._timer_widget.set_length(seconds * 1000)
        self._settings.length_ms = seconds * 1000
        save_settings(self._settings)

    def _on_overflow_toggled(self, checked: bool) -> None:
        self._timer_widget.set_allow_overflow(checked)
        self._settings.allow_overflow = checked
        save_settings(self._settings)

    # ── keyboard ──────────────────────────────────────────────────────────

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        self._timer_widget.toggle()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when stopped)."""
        if self._timer_widget.state != RunState.STOPPED:
            self._timer_widget.reset()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (toggle) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        save_settings(self._settings)
        self._timer_widget.dispose()
        super().closeEvent(event)
