"""Main application window for Potion Timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow

from .settings import Settings
from .timer.registry import TimerRegistry, MultiplierSettings
from .ui.timer_panel import TimerPanel
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)


class PotionTimerApp(QMainWindow):
    """Main window.  The title always shows the soonest finishing timer
    in real time, so it stays readable from the taskbar or a tab strip."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings: Settings = settings or Settings()
        s = self._settings

        self.setWindowTitle(s.idle_title)
        self.resize(s.window_width, s.window_height)
        if s.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        self.setStyleSheet(build_stylesheet())

        # ── registry ──────────────────────────────────────────────────
        self._registry = TimerRegistry(
            self,
            settings=MultiplierSettings(
                builder=s.builder_potion, research=s.research_potion,
            ),
            interval_ms=s.tick_interval_ms,
            idle_title=s.idle_title,
        )
        self._registry.title_changed.connect(self.setWindowTitle)

        # ── central widget ────────────────────────────────────────────
        self._panel = TimerPanel(
            self._registry,
            self,
            heading=s.idle_title,
            default_category=s.default_category,
        )
        self.setCentralWidget(self._panel)

        self._registry.start()

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def registry(self) -> TimerRegistry:
        return self._registry

    @property
    def panel(self) -> TimerPanel:
        return self._panel

    # ── shutdown ──────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Stop the tick timer.  Safe to call more than once."""
        if self._registry.is_running:
            logger.info("Stopping tick timer")
        self._registry.stop()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.shutdown()
        super().closeEvent(event)
