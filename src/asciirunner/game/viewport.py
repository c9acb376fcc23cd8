"""Viewport geometry shared by every subsystem."""

from dataclasses import dataclass
import random

from ..core.errors import ConfigurationError
from ..graphics.framebuffer import FrameBuffer
from ..graphics.glyphs import OBSTACLE_HEIGHT

MIN_WIDTH = 32
MIN_HEIGHT = 20
GROUND_ROWS = 2


@dataclass(frozen=True)
class Viewport:
    """
    Fixed grid size for a session and the row layout derived from it.

    Rows, top to bottom: sky, dynamic band (ends at ``stand_row``),
    the hard ``surface_row``, then ``GROUND_ROWS`` decorative rows.
    """
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise ConfigurationError(
                f"Viewport {self.width}x{self.height} is below the minimum "
                f"{MIN_WIDTH}x{MIN_HEIGHT}"
            )

    @property
    def sky_rows(self) -> int:
        return self.height // 3

    @property
    def ground_rows(self) -> int:
        return GROUND_ROWS

    @property
    def surface_row(self) -> int:
        return self.height - GROUND_ROWS - 1

    @property
    def stand_row(self) -> int:
        """Row the player's feet and the obstacle's base occupy."""
        return self.surface_row - 1

    @property
    def band_rows(self) -> int:
        return self.stand_row - self.sky_rows + 1

    def validate_jump(self, rise_frames: int, hover_frames: int) -> None:
        """Reject jumps that would carry the player's head out of the band."""
        if rise_frames < 1 or hover_frames < 0:
            raise ConfigurationError(
                f"Invalid jump: rise={rise_frames}, hover={hover_frames}"
            )
        # Two rows of body and head above the feet
        if self.stand_row - rise_frames - 2 < self.sky_rows:
            raise ConfigurationError(
                f"A {rise_frames}-row jump does not fit the {self.band_rows}-row "
                f"play band of a {self.height}-row viewport"
            )
        if OBSTACLE_HEIGHT > self.band_rows:
            raise ConfigurationError("Obstacle is taller than the play band")

    def validate_column(self, column: int) -> None:
        """The player's arms occupy the columns on either side."""
        if not 1 <= column <= self.width - 2:
            raise ConfigurationError(
                f"Player column {column} does not fit a {self.width}-column viewport"
            )

    def create_buffer(self, rng: random.Random) -> FrameBuffer:
        return FrameBuffer(self.width, self.height, self.sky_rows, GROUND_ROWS, rng)
