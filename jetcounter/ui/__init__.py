"""UI package."""

from .countdown_widget import CountdownWidget
from .counter import CounterWidget
from .progress_ring import ProgressRing
from .timer_buttons import TimerButtons

__all__ = [
    "CountdownWidget",
    "CounterWidget",
    "ProgressRing",
    "TimerButtons",
]
