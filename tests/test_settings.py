"""Tests for settings persistence and logging configuration."""

from __future__ import annotations

import json
import logging

import pytest

from jetcounter import settings as settings_mod
from jetcounter.logging_config import configure_logging
from jetcounter.settings import Settings, load_settings, save_settings
from jetcounter.timer.engine import TimerConfiguration, TICK_INTERVAL_MS


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.default_minutes == 1
        assert s.default_seconds == 0
        assert s.tick_interval_ms == TICK_INTERVAL_MS
        assert s.window_x is None
        assert s.window_y is None
        assert s.always_on_top is False
        assert s.log_level == "INFO"

    def test_missing_file_gives_defaults(self):
        assert load_settings() == Settings()

    def test_round_trip(self):
        original = Settings(
            default_minutes=5, default_seconds=30,
            window_x=100, window_y=200,
            window_width=500, window_height=700,
            always_on_top=True, log_level="DEBUG",
        )
        save_settings(original)
        assert load_settings() == original

    def test_saved_file_is_json(self, settings_dir):
        save_settings(Settings(default_minutes=7))
        data = json.loads((settings_dir / "settings.json").read_text())
        assert data["default_minutes"] == 7

    def test_unknown_keys_ignored(self, settings_dir):
        (settings_dir / "settings.json").write_text(
            json.dumps({"default_seconds": 45, "sound_volume": 70}),
        )
        loaded = load_settings()
        assert loaded.default_seconds == 45
        assert not hasattr(loaded, "sound_volume")

    def test_malformed_file_falls_back_to_defaults(self, settings_dir, caplog):
        (settings_dir / "settings.json").write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="jetcounter.settings"):
            loaded = load_settings()
        assert loaded == Settings()
        assert "ignoring unreadable settings" in caplog.text

    def test_non_object_json_falls_back_to_defaults(self, settings_dir):
        (settings_dir / "settings.json").write_text("[1, 2, 3]")
        assert load_settings() == Settings()

    @pytest.mark.parametrize("payload, key", [
        ({"default_minutes": "5"}, "default_minutes"),
        ({"default_seconds": None}, "default_seconds"),
        ({"tick_interval_ms": "fast"}, "tick_interval_ms"),
        ({"always_on_top": 1}, "always_on_top"),
        ({"default_minutes": True}, "default_minutes"),
        ({"window_x": "left"}, "window_x"),
        ({"log_level": None}, "log_level"),
    ])
    def test_wrongly_typed_value_uses_default(self, settings_dir, caplog, payload, key):
        payload = dict(payload, default_seconds=payload.get("default_seconds", 20))
        (settings_dir / "settings.json").write_text(json.dumps(payload))
        with caplog.at_level(logging.WARNING, logger="jetcounter.settings"):
            loaded = load_settings()
        assert getattr(loaded, key) == getattr(Settings(), key)
        assert f"ignoring settings value {key}=" in caplog.text
        if key != "default_seconds":
            assert loaded.default_seconds == 20  # well-typed values survive

    def test_wrongly_typed_values_still_build_engine(self, qapp, settings_dir):
        from jetcounter.app import CountdownWindow
        (settings_dir / "settings.json").write_text(json.dumps({
            "default_minutes": "5", "default_seconds": None,
            "tick_interval_ms": "fast", "log_level": None,
        }))
        loaded = load_settings()
        configure_logging(loaded.log_level)
        win = CountdownWindow(loaded)
        assert win.engine.configuration == TimerConfiguration(1, 0)
        assert win.engine.tick_interval_ms == TICK_INTERVAL_MS
        win.engine.dispose()

    def test_optional_geometry_accepts_null(self, settings_dir):
        (settings_dir / "settings.json").write_text(
            json.dumps({"window_x": None, "window_y": 40}),
        )
        loaded = load_settings()
        assert loaded.window_x is None
        assert loaded.window_y == 40

    def test_timer_configuration_is_clamped(self):
        s = Settings(default_minutes=150, default_seconds=-3)
        assert s.timer_configuration() == TimerConfiguration(99, 0)

    def test_paths_are_patched_for_tests(self, settings_dir):
        assert settings_mod.SETTINGS_PATH.parent == settings_dir


# ═══════════════════════════════════════════════════════════════════════
#  LOGGING
# ═══════════════════════════════════════════════════════════════════════


class TestLoggingConfig:
    def test_returns_app_logger(self):
        logger = configure_logging()
        assert logger.name == "jetcounter"
        assert logger.level == logging.INFO

    def test_level_by_name(self):
        logger = configure_logging("debug")
        assert logger.level == logging.DEBUG
        configure_logging()

    def test_unknown_level_name_falls_back_to_info(self):
        logger = configure_logging("LOUD")
        assert logger.level == logging.INFO

    @pytest.mark.parametrize("level", [None, True, 3.5, ["DEBUG"]])
    def test_non_level_values_fall_back_to_info(self, level):
        logger = configure_logging(level)
        assert logger.level == logging.INFO

    def test_numeric_level_passes_through(self):
        logger = configure_logging(logging.WARNING)
        assert logger.level == logging.WARNING
        configure_logging()
