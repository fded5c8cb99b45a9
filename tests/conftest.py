"""Shared pytest fixtures for Potion Timer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from potiontimer.timer.registry import TimerRegistry, MultiplierSettings


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def registry(qapp):
    """Fresh TimerRegistry with both potions on (the startup default)."""
    reg = TimerRegistry(parent=None)
    yield reg
    reg.stop()


@pytest.fixture
def registry_no_potions(qapp):
    """Fresh TimerRegistry with both potions off: 1 second per tick."""
    reg = TimerRegistry(
        parent=None, settings=MultiplierSettings(builder=False, research=False),
    )
    yield reg
    reg.stop()
