"""Round action buttons under the counters.

    READY    Start
    RUNNING  Pause
    PAUSE    Reset  Resume
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton

from ..timer.engine import TimerState


# Which buttons each state offers, left to right.
VISIBLE_BUTTONS: dict[TimerState, tuple[str, ...]] = {
    TimerState.READY:   ("start",),
    TimerState.RUNNING: ("pause",),
    TimerState.PAUSE:   ("reset", "resume"),
}


class TimerButtons(QWidget):

    start_clicked = pyqtSignal()
    pause_clicked = pyqtSignal()
    resume_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 32)
        row.setSpacing(16)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._buttons: dict[str, QPushButton] = {}
        for key, label, signal in (
            ("reset", "Reset", self.reset_clicked),
            ("start", "Start", self.start_clicked),
            ("pause", "Pause", self.pause_clicked),
            ("resume", "Resume", self.resume_clicked),
        ):
            btn = QPushButton(label, self)
            btn.setObjectName("timerButton")
            btn.setAccessibleName(label)
            btn.clicked.connect(lambda _checked=False, s=signal: s.emit())
            row.addWidget(btn)
            self._buttons[key] = btn

        self.apply_state(TimerState.READY)

    def button(self, key: str) -> QPushButton:
        return self._buttons[key]

    def visible_keys(self) -> tuple[str, ...]:
        """Keys of the buttons currently offered, left to right."""
        return tuple(k for k, b in self._buttons.items() if not b.isHidden())

    def apply_state(self, state: TimerState) -> None:
        offered = VISIBLE_BUTTONS[state]
        for key, btn in self._buttons.items():
            btn.setVisible(key in offered)
