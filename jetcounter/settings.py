"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/JetCounter/settings.json

Usage::

    settings = load_settings()
    settings.default_minutes = 5
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import TimerConfiguration, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "JetCounter"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    default_minutes: int = 1
    default_seconds: int = 0
    tick_interval_ms: int = TICK_INTERVAL_MS

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 420
    window_height: int = 640
    always_on_top: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    def timer_configuration(self) -> TimerConfiguration:
        """The starting duration, clamped into the editable range."""
        return TimerConfiguration.clamped(
            self.default_minutes, self.default_seconds,
        )


def _value_fits(name: str, value: object) -> bool:
    """True when *value* has the type of the field's default."""
    default = getattr(Settings, name, None)
    if default is None:
        # Optional geometry fields
        return value is None or (isinstance(value, int) and not isinstance(value, bool))
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored; values of the wrong type fall back to the
    field default.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {}
        for key, value in data.items():
            if key not in valid_keys:
                continue
            if not _value_fits(key, value):
                logger.warning(
                    "ignoring settings value %s=%r: wrong type", key, value,
                )
                continue
            filtered[key] = value
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
