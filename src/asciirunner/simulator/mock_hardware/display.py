"""
Simulated display that keeps frames in memory.

Frames are stored as text so tests can compare them directly.
"""

from ...graphics.framebuffer import FrameBuffer
from ...hardware.base import Display


class MemoryDisplay(Display):
    """
    Records every written frame.

    Only the most recent ``history`` frames are kept; ``frames_written``
    counts all of them.
    """

    def __init__(self, history: int = 2) -> None:
        self._history = history
        self.frames: list[list[str]] = []
        self.statuses: list[str] = []
        self.frames_written = 0
        self.cursor = (0, 0)
        self.cursor_resets = 0

    def write_frame(self, buffer: FrameBuffer, status: str = "") -> None:
        self.frames.append(buffer.to_lines())
        self.statuses.append(status)
        if len(self.frames) > self._history:
            self.frames.pop(0)
            self.statuses.pop(0)
        self.frames_written += 1
        self.cursor = (0, 0)

    def reset_cursor(self) -> None:
        self.cursor = (0, 0)
        self.cursor_resets += 1

    @property
    def last_frame(self) -> list[str] | None:
        return self.frames[-1] if self.frames else None

    @property
    def last_status(self) -> str | None:
        return self.statuses[-1] if self.statuses else None
