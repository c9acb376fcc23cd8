"""
Abstract base classes for the game's I/O capabilities.

These interfaces define the contract that the terminal frontend, the
pygame simulator and the in-memory test devices all follow.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..graphics.framebuffer import FrameBuffer


class Key(Enum):
    """Game-level key codes, independent of the frontend."""
    JUMP = auto()
    QUIT = auto()


class Display(ABC):
    """Abstract base class for frame output surfaces."""

    @abstractmethod
    def write_frame(self, buffer: "FrameBuffer", status: str = "") -> None:
        """
        Write the whole glyph grid, plus an optional status line below it.

        Leaves the draw cursor at the top-left corner.
        """
        ...

    @abstractmethod
    def reset_cursor(self) -> None:
        """Move the draw cursor back to the top-left corner."""
        ...


class KeyInput(ABC):
    """Abstract base class for non-blocking key sources."""

    @abstractmethod
    def poll_key(self) -> Key | None:
        """Consume and return the next queued key, or None. Never blocks."""
        ...

    @abstractmethod
    def key_pending(self) -> bool:
        """
        Check for a queued key without consuming it.

        The inspected key stays available to the next ``poll_key``.
        """
        ...


class Clock(ABC):
    """Abstract base class for frame pacing."""

    @abstractmethod
    def sleep_millis(self, ms: int) -> None:
        """Block for ``ms`` milliseconds. Not interruptible."""
        ...
