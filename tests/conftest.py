"""Shared pytest fixtures for JetCounter tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from jetcounter.timer.engine import TimerEngine, TimerConfiguration


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_dir(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("jetcounter.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr(
        "jetcounter.settings.SETTINGS_PATH", tmp_path / "settings.json",
    )
    yield tmp_path


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine at 00:00."""
    eng = TimerEngine(parent=None)
    yield eng
    eng.dispose()


@pytest.fixture
def engine_5s(qapp):
    """Fresh TimerEngine configured for 00:05."""
    eng = TimerEngine(parent=None, configuration=TimerConfiguration(0, 5))
    yield eng
    eng.dispose()
