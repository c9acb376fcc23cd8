"""In-memory devices for tests and headless runs."""

from .display import MemoryDisplay
from .input import ScriptedKeys, ManualClock

__all__ = [
    "MemoryDisplay",
    "ScriptedKeys",
    "ManualClock",
]
