"""Timer registry for Potion Timer.

Every registered timer counts down once per real second.  While a potion
is active for a timer's category, each tick takes a multiplied bite out of
``remaining``:

Category    Potion on    Potion off
--------    ---------    ----------
builder     10 s/tick    1 s/tick
research    24 s/tick    1 s/tick

Timers that reach zero are dropped in the same tick.  After each tick the
registry works out which timer will finish first in *real* time
(``remaining / multiplier``) and publishes that as an ``MM:SS`` title.

The decay / prune / derive step is the pure function :func:`advance`;
:class:`TimerRegistry` only stores its result and drives it from a
``QTimer``.
"""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .duration import format_clock, format_dominant_unit, format_full, parse_duration

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Category(Enum):
    BUILDER = "builder"
    RESEARCH = "research"


# ── constants ─────────────────────────────────────────────────────────────

BUILDER_POTION_MULTIPLIER = 10
RESEARCH_POTION_MULTIPLIER = 24
TICK_INTERVAL_MS = 1000
IDLE_TITLE = "Clash of Clans Timer App"


# ── value types ───────────────────────────────────────────────────────────


@dataclass
class MultiplierSettings:
    """Potion toggles, one per category.  Both on at startup."""

    builder: bool = True
    research: bool = True

    def is_enabled(self, category: Category | str) -> bool:
        category = Category(category)
        if category is Category.BUILDER:
            return self.builder
        return self.research

    def set_enabled(self, category: Category | str, enabled: bool) -> None:
        category = Category(category)
        if category is Category.BUILDER:
            self.builder = enabled
        elif category is Category.RESEARCH:
            self.research = enabled


@dataclass(frozen=True)
class Timer:
    id: int
    remaining: int  # seconds, never negative
    category: Category


@dataclass(frozen=True)
class TimerView:
    """Render-ready row for one timer."""

    id: int
    category: Category
    remaining: int
    multiplier: int
    full: str
    dominant: str

    @property
    def label(self) -> str:
        """``[builder] 1h 30m 20s (9m)``; the suffix only while boosted."""
        text = f"[{self.category.value}] {self.full}"
        if self.multiplier > 1:
            text += f" ({self.dominant})"
        return text


# ── pure tick logic ───────────────────────────────────────────────────────


def multiplier_for(category: Category, settings: MultiplierSettings) -> int:
    """Seconds of countdown consumed per real second for *category*."""
    if category is Category.BUILDER:
        return BUILDER_POTION_MULTIPLIER if settings.builder else 1
    if category is Category.RESEARCH:
        return RESEARCH_POTION_MULTIPLIER if settings.research else 1
    return 1


def soonest_completion(
    timers: tuple[Timer, ...], settings: MultiplierSettings,
) -> float | None:
    """Smallest real-time remaining across *timers*, or None when empty."""
    if not timers:
        return None
    return min(t.remaining / multiplier_for(t.category, settings) for t in timers)


def soonest_completion_title(value: float | None, idle_title: str = IDLE_TITLE) -> str:
    if value is None:
        return idle_title
    return format_clock(math.ceil(value))


def advance(
    timers: tuple[Timer, ...], settings: MultiplierSettings,
) -> tuple[tuple[Timer, ...], float | None]:
    """Run one tick: decay every timer, drop the finished ones, and return
    the survivors together with their soonest-completion value."""
    survivors = []
    for timer in timers:
        remaining = max(0, timer.remaining - multiplier_for(timer.category, settings))
        if remaining > 0:
            survivors.append(replace(timer, remaining=remaining))
    updated = tuple(survivors)
    return updated, soonest_completion(updated, settings)


def make_view(timer: Timer, settings: MultiplierSettings) -> TimerView:
    multiplier = multiplier_for(timer.category, settings)
    return TimerView(
        id=timer.id,
        category=timer.category,
        remaining=timer.remaining,
        multiplier=multiplier,
        full=format_full(timer.remaining),
        dominant=format_dominant_unit(timer.remaining / multiplier),
    )


# ── registry ──────────────────────────────────────────────────────────────


class TimerRegistry(QObject):
    """Owns the active timers and the potion toggles.

    Signals
    -------
    ticked()
        Emitted after every tick, once the new state is stored.
    timers_changed(views: tuple[TimerView, ...])
        Emitted after any change to the timers or the toggles.
    title_changed(title: str)
        Emitted when the soonest-completion title text changes.
    timer_expired(timer_id: int)
        Emitted for each timer pruned by a tick.
    """

    ticked = pyqtSignal()
    timers_changed = pyqtSignal(object)
    title_changed = pyqtSignal(str)
    timer_expired = pyqtSignal(int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: MultiplierSettings | None = None,
        interval_ms: int = TICK_INTERVAL_MS,
        idle_title: str = IDLE_TITLE,
    ) -> None:
        super().__init__(parent)

        self._settings: MultiplierSettings = settings or MultiplierSettings()
        self._timers: tuple[Timer, ...] = ()
        self._ids = itertools.count(1)
        self._idle_title: str = idle_title
        self._soonest: float | None = None
        self._title: str = idle_title

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def timers(self) -> tuple[Timer, ...]:
        return self._timers

    @property
    def soonest(self) -> float | None:
        """Real seconds until the first timer finishes (None when empty)."""
        return self._soonest

    @property
    def is_running(self) -> bool:
        return self._qt_timer.isActive()

    def title(self) -> str:
        return self._title

    def multiplier_enabled(self, category: Category | str) -> bool:
        return self._settings.is_enabled(category)

    def snapshot(self) -> tuple[TimerView, ...]:
        return tuple(make_view(t, self._settings) for t in self._timers)

    # ══════════════════════════════════════════════════════════════════
    #  USER ACTIONS
    # ══════════════════════════════════════════════════════════════════

    def add_timer(self, raw_input: str, category: Category | str) -> Timer | None:
        """Register a new timer.  Returns None (and does nothing) when the
        input does not parse to a positive duration.

        *category* may also be the plain value (``"builder"``); anything
        else raises ``ValueError`` before the registry is touched.
        """
        category = Category(category)
        duration = parse_duration(raw_input)
        if duration <= 0:
            logger.debug("Ignoring duration input %r", raw_input)
            return None

        timer = Timer(id=next(self._ids), remaining=duration, category=category)
        self._timers = self._timers + (timer,)
        logger.info(
            "Added %s timer #%d (%s)",
            category.value, timer.id, format_full(duration),
        )
        self._refresh()
        return timer

    def remove_timer(self, timer_id: int) -> None:
        """Drop the timer with *timer_id*; unknown ids are ignored."""
        kept = tuple(t for t in self._timers if t.id != timer_id)
        if len(kept) == len(self._timers):
            return
        self._timers = kept
        logger.info("Removed timer #%d", timer_id)
        self._refresh()

    def clear_all(self) -> None:
        if self._timers:
            logger.info("Cleared %d timer(s)", len(self._timers))
        self._timers = ()
        self._refresh()

    def set_multiplier_enabled(self, category: Category | str, enabled: bool) -> None:
        """Toggle a potion.  Applies from the next tick on; the tick
        cadence itself is left alone."""
        category = Category(category)
        self._settings.set_enabled(category, bool(enabled))
        logger.info(
            "%s potion %s", category.value.capitalize(),
            "enabled" if enabled else "disabled",
        )
        self._refresh()

    # ══════════════════════════════════════════════════════════════════
    #  TICK DRIVER
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin ticking.  No-op if already running."""
        if self._qt_timer.isActive():
            return
        self._qt_timer.start()

    def stop(self) -> None:
        """Stop ticking.  Safe to call repeatedly."""
        self._qt_timer.stop()

    def tick(self) -> None:
        before = {t.id for t in self._timers}
        self._timers, soonest = advance(self._timers, self._settings)
        expired = before - {t.id for t in self._timers}
        for timer_id in sorted(expired):
            logger.info("Timer #%d finished", timer_id)
            self.timer_expired.emit(timer_id)
        self._publish(soonest)
        self.ticked.emit()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _refresh(self) -> None:
        self._publish(soonest_completion(self._timers, self._settings))

    def _publish(self, soonest: float | None) -> None:
        self._soonest = soonest
        title = soonest_completion_title(soonest, self._idle_title)
        self.timers_changed.emit(self.snapshot())
        if title != self._title:
            self._title = title
            self.title_changed.emit(title)
