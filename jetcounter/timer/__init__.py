"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerConfiguration,
    UiState,
    MAX_MINUTES,
    MAX_SECONDS,
    TICK_INTERVAL_MS,
    MIN_TICK_INTERVAL_MS,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerConfiguration",
    "UiState",
    "MAX_MINUTES",
    "MAX_SECONDS",
    "TICK_INTERVAL_MS",
    "MIN_TICK_INTERVAL_MS",
]
