"""Shared test helpers for JetCounter."""

from jetcounter.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions (or observer calls) into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def tick(engine: TimerEngine, count: int = 1) -> None:
    """Simulate *count* one-second ticks without waiting."""
    for _ in range(count):
        engine._on_tick()


def observable(engine: TimerEngine) -> tuple:
    """Everything a presentation layer could see about *engine*."""
    return (
        engine.state,
        engine.ui_state,
        engine.configuration,
        engine.remaining,
        engine.progress,
        engine._qt_timer.isActive(),
    )
