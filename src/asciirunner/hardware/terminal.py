"""
Curses terminal frontend.

The screen must hold the viewport plus one status line. Input runs in
no-delay mode so polling never blocks.
"""

import curses
import logging

from ..core.errors import ConfigurationError
from ..graphics.framebuffer import FrameBuffer
from .base import Display, Key, KeyInput

logger = logging.getLogger(__name__)

JUMP_KEYS = {ord(" "), ord("w"), ord("W"), curses.KEY_UP}
QUIT_KEYS = {ord("q"), ord("Q"), 27}  # 27 = Esc


def safe_addstr(stdscr: "curses.window", row: int, col: int, text: str) -> None:
    """Write text, tolerating the error curses raises for the last screen cell."""
    try:
        stdscr.addstr(row, col, text)
    except curses.error:
        pass


class TerminalDisplay(Display):
    """Draws frames onto a curses window."""

    def __init__(self, stdscr: "curses.window", width: int, height: int) -> None:
        rows, cols = stdscr.getmaxyx()
        if rows < height + 1 or cols < width:
            raise ConfigurationError(
                f"Terminal is {cols}x{rows}, needs at least {width}x{height + 1}"
            )

        self._stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        stdscr.erase()
        logger.info(f"TerminalDisplay ready on {cols}x{rows} terminal")

    def write_frame(self, buffer: FrameBuffer, status: str = "") -> None:
        for row, line in enumerate(buffer.to_lines()):
            safe_addstr(self._stdscr, row, 0, line)
        safe_addstr(self._stdscr, buffer.height, 0, status.ljust(buffer.width)[:buffer.width])
        self._stdscr.refresh()
        self.reset_cursor()

    def reset_cursor(self) -> None:
        self._stdscr.move(0, 0)


class TerminalKeyboard(KeyInput):
    """
    Non-blocking keyboard reader.

    ``key_pending`` peeks with ``getch`` and pushes the key back with
    ``ungetch`` so the next poll still sees it.
    """

    def __init__(self, stdscr: "curses.window") -> None:
        self._stdscr = stdscr
        stdscr.nodelay(True)
        stdscr.keypad(True)

    @staticmethod
    def translate(code: int) -> Key | None:
        if code in JUMP_KEYS:
            return Key.JUMP
        if code in QUIT_KEYS:
            return Key.QUIT
        return None

    def key_pending(self) -> bool:
        code = self._stdscr.getch()
        if code == -1:
            return False
        curses.ungetch(code)
        return True

    def poll_key(self) -> Key | None:
        code = self._stdscr.getch()
        if code == -1:
            return None
        key = self.translate(code)
        if key is None:
            logger.debug(f"Ignored key code {code}")
        return key
