"""Timer package."""

from .duration import (
    parse_duration,
    format_full,
    format_dominant_unit,
    format_clock,
)
from .registry import (
    TimerRegistry,
    Timer,
    TimerView,
    Category,
    MultiplierSettings,
    multiplier_for,
    advance,
    soonest_completion,
    soonest_completion_title,
    IDLE_TITLE,
    TICK_INTERVAL_MS,
)

__all__ = [
    "parse_duration",
    "format_full",
    "format_dominant_unit",
    "format_clock",
    "TimerRegistry",
    "Timer",
    "TimerView",
    "Category",
    "MultiplierSettings",
    "multiplier_for",
    "advance",
    "soonest_completion",
    "soonest_completion_title",
    "IDLE_TITLE",
    "TICK_INTERVAL_MS",
]
