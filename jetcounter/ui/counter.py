"""A single minutes/seconds counter: "+" button, two-digit value, unit,
"−" button.  The buttons only show while the timer is READY."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton

from ..timer.engine import TimerState


def format_two_digits(value: int) -> str:
    return f"{value:02d}"


class CounterWidget(QWidget):

    increment_clicked = pyqtSignal()
    decrement_clicked = pyqtSignal()

    def __init__(self, unit: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._value: int = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        self._up_btn = QPushButton("+", self)
        self._up_btn.setObjectName("counterButton")
        self._up_btn.setToolTip("Up")
        self._up_btn.setAccessibleName("Up")

        self._value_label = QLabel(format_two_digits(0), self)
        self._value_label.setObjectName("counterValue")
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._unit_label = QLabel(unit, self)
        self._unit_label.setObjectName("counterUnit")
        self._unit_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._down_btn = QPushButton("−", self)
        self._down_btn.setObjectName("counterButton")
        self._down_btn.setToolTip("Down")
        self._down_btn.setAccessibleName("Down")

        layout.addWidget(self._up_btn, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addSpacing(16)
        layout.addWidget(self._value_label)
        layout.addWidget(self._unit_label)
        layout.addSpacing(16)
        layout.addWidget(self._down_btn, 0, Qt.AlignmentFlag.AlignHCenter)

        self._up_btn.clicked.connect(lambda: self.increment_clicked.emit())
        self._down_btn.clicked.connect(lambda: self.decrement_clicked.emit())

    @property
    def value(self) -> int:
        return self._value

    @property
    def text(self) -> str:
        return self._value_label.text()

    @property
    def unit(self) -> str:
        return self._unit_label.text()

    def set_value(self, value: int) -> None:
        self._value = value
        self._value_label.setText(format_two_digits(value))

    def apply_state(self, state: TimerState) -> None:
        """Editing buttons are only offered while READY."""
        editable = state == TimerState.READY
        self._up_btn.setVisible(editable)
        self._down_btn.setVisible(editable)
