"""I/O capabilities and the terminal frontend."""

from .base import Display, KeyInput, Clock, Key
from .clock import SystemClock

__all__ = [
    # Base classes
    "Display",
    "KeyInput",
    "Clock",
    "Key",
    # Implementations
    "SystemClock",
]
