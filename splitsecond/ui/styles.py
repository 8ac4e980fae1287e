"""QSS stylesheet and state colours for SplitSecond."""

from __future__ import annotations

from ..timer.engine import RunState

# ── state colours (digits) ──────────────────────────────────────────────

STATE_COLORS: dict[RunState, str] = {
    RunState.RUNNING: "#A6E3A1",   # green
    RunState.PAUSED:  "#F9E2AF",   # amber
    RunState.STOPPED: "#7A7A9A",   # muted
}

# ── default palette ──────────────────────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "success":      "#A6E3A1",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def state_color(state: RunState) -> str:
    return STATE_COLORS.get(state, DEFAULT_PALETTE["text"])


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = dict(DEFAULT_PALETTE)
    if palette:
        p.update(palette)
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    /* ── buttons ───────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 8px 20px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#dangerButton {{
        color: {p['danger']};
    }}

    /* ── timer digits ──────────────────────────── */
    QFrame#timer QLabel {{
        font-size: 40px;
        font-weight: 300;
        font-family: "Menlo", "DejaVu Sans Mono", monospace;
    }}

    QFrame#timer QLabel#timerDelimiter {{
        color: {p['text_muted']};
    }}

    QFrame#timer[done="true"] QLabel {{
        color: {p['success']};
    }}

    QFrame#timer[overflowed="true"] QLabel {{
        color: {p['danger']};
    }}
    """
