"""
Simulator window using pygame.

Renders the glyph grid in a desktop window with a monospace font. The
window is display, keyboard and clock in one, so the game loop runs
against it exactly as it runs against the terminal.
"""

import logging
from collections import deque
from dataclasses import dataclass

import pygame

from ..graphics.framebuffer import FrameBuffer
from ..graphics.glyphs import CellKind, GLYPHS, PLAYER_KINDS, COLLISION_KINDS
from ..hardware.base import Clock, Display, Key, KeyInput

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "asciirunner"
    font_size: int = 18
    margin: int = 12

    # Colors
    bg_color: tuple[int, int, int] = (12, 12, 20)
    text_color: tuple[int, int, int] = (200, 200, 220)
    sky_color: tuple[int, int, int] = (240, 230, 140)
    ground_color: tuple[int, int, int] = (150, 110, 70)
    player_color: tuple[int, int, int] = (120, 220, 120)
    obstacle_color: tuple[int, int, int] = (230, 90, 80)
    status_color: tuple[int, int, int] = (100, 150, 255)


class SimulatorWindow(Display, KeyInput, Clock):
    """
    Desktop window frontend.

    Keyboard Mapping:
        SPACE / UP / W: Jump
        ESC / Q: Quit
    """

    JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
    QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

    def __init__(self, width: int, height: int, config: WindowConfig | None = None) -> None:
        self.config = config or WindowConfig()
        self._cols = width
        self._rows = height
        self._keys: deque[Key] = deque()

        pygame.init()
        pygame.display.set_caption(self.config.title)
        pygame.font.init()
        self._font = pygame.font.SysFont("monospace", self.config.font_size)
        self._cell_w, self._cell_h = self._font.size("W")

        margin = self.config.margin
        size = (
            self._cell_w * width + margin * 2,
            self._cell_h * (height + 1) + margin * 2,
        )
        self._screen = pygame.display.set_mode(size)
        self._glyph_cache: dict[CellKind, pygame.Surface] = {}
        self._cursor = (0, 0)

        logger.info(f"SimulatorWindow created: {size[0]}x{size[1]} px")

    def _color_for(self, kind: CellKind) -> tuple[int, int, int]:
        if kind in PLAYER_KINDS:
            return self.config.player_color
        if kind in COLLISION_KINDS:
            return self.config.obstacle_color
        if kind in (CellKind.SURFACE, CellKind.GRAVEL, CellKind.DIRT):
            return self.config.ground_color
        if kind is CellKind.STAR:
            return self.config.sky_color
        return self.config.text_color

    def _glyph(self, kind: CellKind) -> pygame.Surface:
        surface = self._glyph_cache.get(kind)
        if surface is None:
            surface = self._font.render(GLYPHS[kind], True, self._color_for(kind))
            self._glyph_cache[kind] = surface
        return surface

    def _pump_events(self) -> None:
        """Translate pending pygame events into queued game keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._keys.append(Key.QUIT)
            elif event.type == pygame.KEYDOWN:
                if event.key in self.JUMP_KEYS:
                    self._keys.append(Key.JUMP)
                elif event.key in self.QUIT_KEYS:
                    self._keys.append(Key.QUIT)

    # Display

    def write_frame(self, buffer: FrameBuffer, status: str = "") -> None:
        self._pump_events()
        self._screen.fill(self.config.bg_color)

        margin = self.config.margin
        cells = buffer.cells
        for row in range(buffer.height):
            y = margin + row * self._cell_h
            for col in range(buffer.width):
                kind = CellKind(cells[row, col])
                if kind is CellKind.EMPTY:
                    continue
                self._screen.blit(self._glyph(kind), (margin + col * self._cell_w, y))

        if status:
            text = self._font.render(status, True, self.config.status_color)
            self._screen.blit(text, (margin, margin + buffer.height * self._cell_h))

        pygame.display.flip()
        self.reset_cursor()

    def reset_cursor(self) -> None:
        self._cursor = (0, 0)

    # KeyInput

    def key_pending(self) -> bool:
        self._pump_events()
        return bool(self._keys)

    def poll_key(self) -> Key | None:
        self._pump_events()
        return self._keys.popleft() if self._keys else None

    # Clock

    def sleep_millis(self, ms: int) -> None:
        if ms > 0:
            pygame.time.wait(ms)

    def close(self) -> None:
        pygame.quit()
        logger.info("SimulatorWindow closed")
