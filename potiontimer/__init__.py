"""Potion Timer: builder and research countdowns with potion speed-ups."""

__version__ = "0.1.0"
