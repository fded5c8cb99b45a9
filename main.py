#!/usr/bin/env python3
"""Potion Timer entry point.

Run with:
    python main.py
    python -m potiontimer
"""

from potiontimer.__main__ import main


if __name__ == "__main__":
    main()
