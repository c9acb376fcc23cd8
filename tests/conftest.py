"""Shared fixtures: seeded RNG, viewports and in-memory devices."""

import random

import pytest

from asciirunner.game.loop import GameConfig
from asciirunner.game.viewport import Viewport
from asciirunner.simulator.mock_hardware import ManualClock, MemoryDisplay, ScriptedKeys


@pytest.fixture
def rng():
    """Deterministic RNG."""
    return random.Random(1234)


@pytest.fixture
def viewport():
    """The standard 80x32 viewport."""
    return Viewport(80, 32)


@pytest.fixture
def buffer(viewport, rng):
    return viewport.create_buffer(rng)


@pytest.fixture
def display():
    return MemoryDisplay()


@pytest.fixture
def keys():
    return ScriptedKeys()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def fixed_gap_config():
    """80x32 session with every spawn gap fixed at 10 frames and no frame delay."""
    return GameConfig(
        width=80,
        height=32,
        frame_delay_ms=0,
        seed=1234,
        min_gap=10,
        max_gap=10,
        first_gap=10,
    )
