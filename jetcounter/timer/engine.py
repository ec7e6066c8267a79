"""Countdown state machine for JetCounter.

States
------
READY     Idle, minutes/seconds can be edited.
RUNNING   Counting down, one tick per second.
PAUSE     Frozen mid-countdown (duration fixed).

Transitions
-----------
READY   → RUNNING   (start, only with a non-zero duration)
RUNNING → PAUSE     (pause)
PAUSE   → RUNNING   (resume)
PAUSE   → READY     (reset, restores the configured duration)
RUNNING → READY     (remaining reaches 0)

Commands that don't apply to the current state are ignored.  The UI
only offers the valid ones anyway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSE = "pause"


# ── constants ─────────────────────────────────────────────────────────────

MAX_MINUTES = 99
MAX_SECONDS = 59
TICK_INTERVAL_MS = 1000
MIN_TICK_INTERVAL_MS = 100


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


# ── value types ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerConfiguration:
    """The duration the user picked before starting."""

    minutes: int = 0
    seconds: int = 0

    @classmethod
    def clamped(cls, minutes: int, seconds: int) -> "TimerConfiguration":
        return cls(_clamp(minutes, MAX_MINUTES), _clamp(seconds, MAX_SECONDS))

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class UiState:
    """Immutable snapshot handed to observers on every change."""

    minutes: int
    seconds: int
    timer_state: TimerState
    progress: float = 0.0

    @property
    def minutes_text(self) -> str:
        return f"{self.minutes:02d}"

    @property
    def seconds_text(self) -> str:
        return f"{self.seconds:02d}"


Observer = Callable[[UiState], None]


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown timer.

    Signals
    -------
    ui_state_changed(snapshot: UiState)
        Emitted whenever the observable snapshot changes.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    finished(total_seconds: int)
        Emitted when a countdown reaches zero on its own.
    """

    ui_state_changed = pyqtSignal(object)
    state_changed = pyqtSignal(object)
    finished = pyqtSignal(int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        configuration: TimerConfiguration | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._configuration: TimerConfiguration = (
            configuration or TimerConfiguration()
        )

        # ── countdown state ───────────────────────────────────────────
        self._state: TimerState = TimerState.READY
        self._remaining: int = self._configuration.total_seconds
        self._total_duration: int = 0
        self._disposed: bool = False

        # ── observers ─────────────────────────────────────────────────
        self._observers: list[Observer] = []
        self._ui_state: UiState = self._snapshot()

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(MIN_TICK_INTERVAL_MS, tick_interval_ms))
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def ui_state(self) -> UiState:
        """The most recently published snapshot."""
        return self._ui_state

    @property
    def configuration(self) -> TimerConfiguration:
        return self._configuration

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def total_duration(self) -> int:
        """Duration captured at start (0 before the first start)."""
        return self._total_duration

    @property
    def progress(self) -> float:
        """0.0 → 1.0 elapsed fraction; always 0 while READY."""
        if self._state == TimerState.READY or self._total_duration <= 0:
            return 0.0
        return max(0.0, min(1.0, 1 - self._remaining / self._total_duration))

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def tick_interval_ms(self) -> int:
        return self._qt_timer.interval()

    # ══════════════════════════════════════════════════════════════════
    #  OBSERVATION
    # ══════════════════════════════════════════════════════════════════

    def subscribe(self, observer: Observer) -> None:
        """Deliver the current snapshot now, then every later change."""
        if self._disposed or observer in self._observers:
            return
        self._observers.append(observer)
        self.ui_state_changed.connect(observer)
        observer(self._ui_state)

    def unsubscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            return
        self._observers.remove(observer)
        self.ui_state_changed.disconnect(observer)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS — duration editing (READY only)
    # ══════════════════════════════════════════════════════════════════

    def increment_minutes(self) -> None:
        self._edit(1, 0)

    def decrement_minutes(self) -> None:
        self._edit(-1, 0)

    def increment_seconds(self) -> None:
        self._edit(0, 1)

    def decrement_seconds(self) -> None:
        self._edit(0, -1)

    def set_configuration(self, minutes: int, seconds: int) -> None:
        """Replace the configured duration (clamped).  READY only."""
        if not self._accepts("set_configuration", TimerState.READY):
            return
        self._apply_configuration(TimerConfiguration.clamped(minutes, seconds))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS — countdown
    # ══════════════════════════════════════════════════════════════════

    def start_timer(self) -> None:
        """Begin counting down.  Needs READY and a non-zero duration."""
        if not self._accepts("start_timer", TimerState.READY):
            return
        total = self._configuration.total_seconds
        if total <= 0:
            logger.debug("start_timer ignored: configured duration is zero")
            return
        self._total_duration = total
        self._remaining = total
        self._set_state(TimerState.RUNNING)
        self._qt_timer.start()

    def pause_timer(self) -> None:
        if not self._accepts("pause_timer", TimerState.RUNNING):
            return
        self._qt_timer.stop()
        self._set_state(TimerState.PAUSE)

    def resume_timer(self) -> None:
        if not self._accepts("resume_timer", TimerState.PAUSE):
            return
        self._set_state(TimerState.RUNNING)
        self._qt_timer.start()

    def reset_timer(self) -> None:
        """Abandon the paused countdown and show the configured duration."""
        if not self._accepts("reset_timer", TimerState.PAUSE):
            return
        self._qt_timer.stop()
        self._remaining = self._configuration.total_seconds
        self._set_state(TimerState.READY)

    def dispose(self) -> None:
        """Stop ticking and forget every observer.  Idempotent."""
        if self._disposed:
            return
        self._qt_timer.stop()
        for observer in list(self._observers):
            self.unsubscribe(observer)
        self._disposed = True
        logger.debug("timer engine disposed in state %s", self._state.name)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        # A timeout queued before pause, reset or dispose must not count.
        if self._disposed or self._state != TimerState.RUNNING:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._remaining <= 0:
            self._finish()
            return
        self._publish()

    def _finish(self) -> None:
        self._qt_timer.stop()
        total = self._total_duration
        # READY displays the configuration, so zero it to leave 00:00 shown.
        self._configuration = TimerConfiguration()
        self._remaining = 0
        self._set_state(TimerState.READY)
        logger.info("countdown of %d s finished", total)
        self.finished.emit(total)

    def _edit(self, minutes_delta: int, seconds_delta: int) -> None:
        if not self._accepts("edit", TimerState.READY):
            return
        current = self._configuration
        self._apply_configuration(
            TimerConfiguration.clamped(
                current.minutes + minutes_delta,
                current.seconds + seconds_delta,
            )
        )

    def _apply_configuration(self, configuration: TimerConfiguration) -> None:
        self._configuration = configuration
        self._remaining = configuration.total_seconds
        self._publish()

    def _accepts(self, command: str, required: TimerState) -> bool:
        if self._disposed:
            logger.debug("%s ignored: engine disposed", command)
            return False
        if self._state != required:
            logger.debug(
                "%s ignored in state %s", command, self._state.name,
            )
            return False
        return True

    def _set_state(self, new_state: TimerState) -> None:
        logger.debug("%s -> %s", self._state.name, new_state.name)
        self._state = new_state
        self.state_changed.emit(new_state)
        self._publish()

    def _snapshot(self) -> UiState:
        minutes, seconds = divmod(self._remaining, 60)
        return UiState(
            minutes=minutes,
            seconds=seconds,
            timer_state=self._state,
            progress=self.progress,
        )

    def _publish(self) -> None:
        snapshot = self._snapshot()
        if snapshot == self._ui_state:
            return
        self._ui_state = snapshot
        self.ui_state_changed.emit(snapshot)
