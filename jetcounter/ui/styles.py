"""QSS stylesheet and state colors for JetCounter."""

from __future__ import annotations

from ..timer.engine import TimerState

# ── state colors (ring arc) ──────────────────────────────────────────────

STATE_COLORS: dict[TimerState, str] = {
    TimerState.READY:   "#6200EE",   # primary
    TimerState.RUNNING: "#6200EE",
    TimerState.PAUSE:   "#9E9E9E",   # desaturated gray
}

TRACK_COLOR = "#D3D3D3"   # light gray

# ── default palette (Material light) ─────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#FAFAFA",
    "bg_secondary": "#FFFFFF",
    "primary":      "#6200EE",
    "primary_dark": "#3700B3",
    "text":         "#212121",
    "text_muted":   "#808080",
    "caption":      "#555555",
    "border":       "#E0E0E0",
}


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("Roboto", "SF Pro", ".AppleSystemUIFont"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── counters ────────────────────────────────── */
    QLabel#counterValue {{
        background-color: transparent;
        font-size: 60px;
        font-weight: 300;
    }}

    QLabel#counterUnit {{
        background-color: transparent;
        color: {p['text_muted']};
        font-size: 12px;
    }}

    QLabel#instructions {{
        background-color: transparent;
        color: {p['caption']};
        font-size: 20px;
        font-weight: 500;
    }}

    QPushButton#counterButton {{
        background-color: {p['primary']};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 18px;
        font-size: 18px;
        font-weight: 700;
    }}

    QPushButton#counterButton:pressed {{
        background-color: {p['primary_dark']};
    }}

    /* ── round timer buttons ─────────────────────── */
    QPushButton#timerButton {{
        background-color: {p['primary']};
        color: #FFFFFF;
        border: none;
        border-radius: 37px;
        min-width: 75px;
        max-width: 75px;
        min-height: 75px;
        max-height: 75px;
        font-size: 13px;
        font-weight: 700;
    }}

    QPushButton#timerButton:hover {{
        background-color: {p['primary_dark']};
    }}

    /* ── menu bar ────────────────────────────────── */
    QMenuBar {{
        background-color: {p['primary']};
        color: #FFFFFF;
    }}
    """
