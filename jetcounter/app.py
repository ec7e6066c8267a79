"""Main application window for JetCounter."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMessageBox

from .timer.engine import TimerEngine, TimerState
from .ui.countdown_widget import CountdownWidget
from .ui.styles import build_stylesheet, DEFAULT_PALETTE
from .settings import Settings, load_settings, save_settings

logger = logging.getLogger(__name__)


class CountdownWindow(QMainWindow):
    """Main application window.  Owns exactly one TimerEngine."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("JetCounter")
        self.setMinimumSize(360, 560)

        # ── geometry save timer ───────────────────────────────────────
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            configuration=self._settings.timer_configuration(),
            tick_interval_ms=self._settings.tick_interval_ms,
        )
        self._timer_engine.finished.connect(self._on_finished)
        self._timer_engine.state_changed.connect(self._on_state_changed)

        # ── theme + central widget ────────────────────────────────────
        self._palette = dict(DEFAULT_PALETTE)
        self.setStyleSheet(build_stylesheet(self._palette))

        self._countdown = CountdownWidget(self._timer_engine, self)
        self._countdown.apply_palette(self._palette)
        self.setCentralWidget(self._countdown)

        self._build_menu_bar()

        # ── restore window state ───────────────────────────────────────
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def countdown_widget(self) -> CountdownWidget:
        return self._countdown

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        about_action = QAction("About JetCounter", self)
        about_action.setMenuRole(QAction.MenuRole.AboutRole)
        about_action.triggered.connect(self._show_about)

        quit_action = QAction("Quit JetCounter", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        app_menu = menu_bar.addMenu("JetCounter")
        app_menu.addAction(about_action)
        app_menu.addAction(quit_action)

        view_menu = menu_bar.addMenu("View")
        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        view_menu.addAction(self._aot_action)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About JetCounter",
            "<h3>JetCounter</h3>"
            "<p>Set minutes and seconds, then press play.</p>"
            "<p>Built with PyQt6.</p>",
        )

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE CALLBACKS
    # ══════════════════════════════════════════════════════════════════

    def _on_finished(self, total_seconds: int) -> None:
        minutes, seconds = divmod(total_seconds, 60)
        self.setWindowTitle(f"JetCounter ({minutes:02d}:{seconds:02d} done)")

    def _on_state_changed(self, state: TimerState) -> None:
        if state == TimerState.RUNNING:
            self.setWindowTitle("JetCounter")

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        state = self._timer_engine.state
        if state == TimerState.READY:
            self._timer_engine.start_timer()
        elif state == TimerState.RUNNING:
            self._timer_engine.pause_timer()
        elif state == TimerState.PAUSE:
            self._timer_engine.resume_timer()

    def _on_escape(self) -> None:
        """Reset the timer (only offered while paused)."""
        self._timer_engine.reset_timer()

    def _on_arrow(self, up: bool, seconds: bool) -> None:
        e = self._timer_engine
        if seconds:
            step = e.increment_seconds if up else e.decrement_seconds
        else:
            step = e.increment_minutes if up else e.decrement_minutes
        step()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE (geometry, always-on-top)
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        self._write_settings()

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves: restart 500ms timer on each move/resize."""
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        self._write_settings()
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        """Apply or remove WindowStaysOnTopHint."""
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)
        self.show()  # Required: setWindowFlags hides the window

    def _write_settings(self) -> None:
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Save geometry and tear the engine down with the screen."""
        self._save_geometry()
        self._geometry_save_timer.stop()
        self._countdown.detach()
        self._timer_engine.dispose()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space = start/pause/resume, Escape = reset, arrows edit."""
        key = event.key()
        mods = event.modifiers()
        if key == Qt.Key.Key_Space and mods == Qt.KeyboardModifier.NoModifier:
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        if key in (Qt.Key.Key_Up, Qt.Key.Key_Down):
            self._on_arrow(
                up=key == Qt.Key.Key_Up,
                seconds=bool(mods & Qt.KeyboardModifier.ShiftModifier),
            )
            event.accept()
            return
        super().keyPressEvent(event)
