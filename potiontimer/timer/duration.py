"""Duration parsing and formatting.

A duration is always a plain ``int`` number of seconds.  Users type it as
a run of ordered segments::

    1w2d3h4m5s      weeks, days, hours, minutes, seconds
    1h30m20s
    45m

Every segment is optional, unit letters are case-insensitive, and the
segments must appear in the order above.  Anything the pattern cannot
consume at the start of the string counts as zero, so ``parse_duration``
never raises.
"""

from __future__ import annotations

import math
import re

# ── unit sizes ────────────────────────────────────────────────────────────

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

_DURATION_RE = re.compile(
    r"(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?",
    re.IGNORECASE | re.ASCII,
)

_SEGMENT_SIZES = (WEEK, DAY, HOUR, MINUTE, 1)


# ── parsing ───────────────────────────────────────────────────────────────


def parse_duration(text: str | None) -> int:
    """Convert ``"1h30m20s"``-style input into seconds (0 if unparseable)."""
    if not text:
        return 0
    match = _DURATION_RE.match(text)
    if match is None:
        return 0
    return sum(
        int(group or 0) * size
        for group, size in zip(match.groups(), _SEGMENT_SIZES)
    )


# ── formatting ────────────────────────────────────────────────────────────


def _components(seconds: float) -> tuple[int, int, int, int, int]:
    """Split into (weeks, days, hours, minutes, seconds), each floored."""
    total = math.floor(max(0, seconds))
    weeks, rest = divmod(total, WEEK)
    days, rest = divmod(rest, DAY)
    hours, rest = divmod(rest, HOUR)
    minutes, secs = divmod(rest, MINUTE)
    return weeks, days, hours, minutes, secs


def format_full(seconds: int) -> str:
    """Render every unit down to seconds, skipping leading zero units.

    Once a unit has been shown, every smaller unit is shown too.  Seconds
    are always present and zero-padded::

        format_full(5420)   -> "1h 30m 20s"
        format_full(90061)  -> "1d 1h 1m 01s"
        format_full(59)     -> "59s"
    """
    weeks, days, hours, minutes, secs = _components(seconds)

    parts: list[str] = []
    for amount, label in ((weeks, "w"), (days, "d"), (hours, "h"), (minutes, "m")):
        if amount or parts:
            parts.append(f"{amount}{label}")
    parts.append(f"{secs:02d}s")
    return " ".join(parts)


def format_dominant_unit(seconds: float) -> str:
    """Compact label showing the second-largest nonzero unit.

    With a single nonzero unit that unit is shown; with none (under a
    minute) the result is ``"<1m"``.  The next-finer unit is preferred over
    the largest one when both are present: ``90061`` (1d 1h 1m 1s) renders
    as ``"1h"``.
    """
    weeks, days, hours, minutes, _ = _components(seconds)
    active = [
        (amount, label)
        for amount, label in ((weeks, "w"), (days, "d"), (hours, "h"), (minutes, "m"))
        if amount
    ]
    if not active:
        return "<1m"
    amount, label = active[1] if len(active) > 1 else active[0]
    return f"{amount}{label}"


def format_clock(seconds: int) -> str:
    """``MM:SS`` with no wrap-around: 6000 seconds is ``"100:00"``."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"
