"""The countdown card, the only screen in JetCounter.

Layout (top → bottom):
    - Instruction text
    - ProgressRing with the minutes / seconds counters on top of it
    - Timer buttons (context-dependent)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QSizePolicy,
)

from ..timer.engine import TimerEngine, UiState
from .counter import CounterWidget
from .progress_ring import ProgressRing
from .timer_buttons import TimerButtons


INSTRUCTIONS = "Set Minutes and seconds and\npress on play button to start timer."


class CountdownWidget(QWidget):
    """Renders ``UiState`` snapshots and forwards clicks to the engine."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._last_state: UiState | None = None
        self._build_ui()
        self._connect_signals()
        engine.subscribe(self.show_state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 0)
        layout.setSpacing(0)

        self._instructions = QLabel(INSTRUCTIONS, self)
        self._instructions.setObjectName("instructions")
        self._instructions.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._instructions.setWordWrap(True)
        layout.addWidget(self._instructions)

        # ── ring with counters layered on top ────────────────────────
        stage = QGridLayout()
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
        )
        self._ring.setMinimumSize(280, 280)
        stage.addWidget(self._ring, 0, 0)

        counter_row = QHBoxLayout()
        counter_row.setSpacing(36)
        counter_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._minutes = CounterWidget("minutes", self)
        self._seconds = CounterWidget("seconds", self)
        counter_row.addWidget(self._minutes)
        counter_row.addWidget(self._seconds)
        stage.addLayout(counter_row, 0, 0)
        layout.addLayout(stage, 1)

        self._buttons = TimerButtons(self)
        layout.addWidget(self._buttons)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        e = self._engine
        self._minutes.increment_clicked.connect(e.increment_minutes)
        self._minutes.decrement_clicked.connect(e.decrement_minutes)
        self._seconds.increment_clicked.connect(e.increment_seconds)
        self._seconds.decrement_clicked.connect(e.decrement_seconds)

        self._buttons.start_clicked.connect(e.start_timer)
        self._buttons.pause_clicked.connect(e.pause_timer)
        self._buttons.resume_clicked.connect(e.resume_timer)
        self._buttons.reset_clicked.connect(e.reset_timer)

    # ── rendering ─────────────────────────────────────────────────────────

    @property
    def last_state(self) -> UiState | None:
        """Most recent snapshot rendered."""
        return self._last_state

    def show_state(self, state: UiState) -> None:
        self._last_state = state
        self._minutes.set_value(state.minutes)
        self._seconds.set_value(state.seconds)
        self._minutes.apply_state(state.timer_state)
        self._seconds.apply_state(state.timer_state)
        self._buttons.apply_state(state.timer_state)
        self._ring.apply_state(state.timer_state)
        self._ring.set_percent(state.progress)

    def detach(self) -> None:
        """Stop observing the engine (called before the engine goes away)."""
        self._engine.unsubscribe(self.show_state)

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._ring.apply_palette(palette)
