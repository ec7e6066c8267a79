"""Circular progress ring rendered with QPainter.

- Light-gray track circle, always visible.
- Arc grows clockwise from 12 o'clock as the countdown progresses;
  nothing is drawn while progress is 0.
- Arc colour follows the timer state (see ``STATE_COLORS``).
- Progress changes animate smoothly; a jump back to 0 (reset, finish)
  is applied at once.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor
from PyQt6.QtWidgets import QWidget

from ..timer.engine import TimerState
from .styles import STATE_COLORS, TRACK_COLOR


class ProgressRing(QWidget):
    """Custom-painted countdown ring."""

    RING_THICKNESS = 8
    MARGIN = 16

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        self._percent: float = 0.0           # target arc fill
        self._display_percent: float = 0.0   # animated arc fill
        self._timer_state: TimerState = TimerState.READY
        self._state_colors: dict[TimerState, str] = dict(STATE_COLORS)
        self._arc_color = QColor(self._state_colors[TimerState.READY])
        self._track_color = QColor(TRACK_COLOR)

        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(300)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def arc_color(self) -> QColor:
        return QColor(self._arc_color)

    def set_percent(self, pct: float) -> None:
        """Update the arc fill (0..1)."""
        pct = max(0.0, min(1.0, pct))
        self._percent = pct
        self._arc_anim.stop()
        if pct <= 0.0 or pct < self._display_percent:
            self._display_percent = pct
            self.update()
            return
        self._arc_anim.setStartValue(self._display_percent)
        self._arc_anim.setEndValue(pct)
        self._arc_anim.start()

    def apply_state(self, state: TimerState) -> None:
        self._timer_state = state
        self._arc_color = QColor(self._state_colors[state])
        self.update()

    def apply_palette(self, palette: dict[str, str]) -> None:
        """Active states take the palette's primary colour."""
        primary = palette.get("primary")
        if primary:
            self._state_colors[TimerState.READY] = primary
            self._state_colors[TimerState.RUNNING] = primary
        self._track_color = QColor(palette.get("track", TRACK_COLOR))
        self.apply_state(self._timer_state)

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION / PAINTING
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_percent = float(value)  # type: ignore[arg-type]
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w, h = self.width(), self.height()
        diameter = max(0, min(w, h) - 2 * self.MARGIN)
        ring_rect = QRectF(
            (w - diameter) / 2, (h - diameter) / 2, diameter, diameter,
        )

        # ── background track ─────────────────────────────────────────
        track_pen = QPen(self._track_color, self.RING_THICKNESS)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        pct = self._display_percent
        if pct > 0:
            arc_pen = QPen(self._arc_color, self.RING_THICKNESS)
            arc_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(pct * 360 * 16))

        painter.end()
