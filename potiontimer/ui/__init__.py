"""UI package."""

from .timer_panel import TimerPanel, TimerRow
from .styles import build_stylesheet

__all__ = [
    "TimerPanel",
    "TimerRow",
    "build_stylesheet",
]
