"""Startup settings for Potion Timer.

Nothing here is saved between runs; every launch starts from these
defaults.  Tests and embedders can pass a customised instance::

    settings = Settings(builder_potion=False)
    window = PotionTimerApp(settings)
"""

from __future__ import annotations

from dataclasses import dataclass

from .timer.registry import Category, IDLE_TITLE, TICK_INTERVAL_MS


@dataclass
class Settings:
    """Initial state of the window and the registry."""

    # ── potions ───────────────────────────────────────────────────────
    builder_potion: bool = True
    research_potion: bool = True
    default_category: Category = Category.BUILDER

    # ── ticking ───────────────────────────────────────────────────────
    tick_interval_ms: int = TICK_INTERVAL_MS
    idle_title: str = IDLE_TITLE

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 560
    always_on_top: bool = False
