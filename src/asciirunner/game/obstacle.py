"""
Obstacle generator.

A single obstacle travels right to left, one column per active frame,
matching the scroll speed. Between passes a countdown, drawn from the
spawn-gap range, keeps it parked off-screen.
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random

from ..core.errors import ConfigurationError
from ..graphics.framebuffer import FrameBuffer
from ..graphics.glyphs import (
    OBSTACLE_KINDS,
    OBSTACLE_MASK,
    OBSTACLE_HEIGHT,
    OBSTACLE_HALF_WIDTH,
)
from .viewport import Viewport

logger = logging.getLogger(__name__)


class ObstaclePhase(Enum):
    """Lifecycle of the in-flight obstacle."""
    PENDING = auto()   # Waiting for the countdown
    ENTERING = auto()  # Clipped by the right edge
    FULL = auto()      # Fully inside the viewport
    EXITING = auto()   # Clipped by the left edge


def check_gap_range(min_gap: int, max_gap: int) -> None:
    if min_gap < 0 or max_gap < min_gap:
        raise ConfigurationError(f"Invalid spawn gap range [{min_gap}, {max_gap}]")


def spawn_gap_bounds(min_gap: int, max_gap: int, difficulty: int) -> tuple[int, int]:
    """
    Inclusive spawn-gap range for a difficulty level.

    Difficulty lowers the upper bound; it never drops below ``min_gap``.
    """
    return min_gap, max(min_gap, max_gap - difficulty)


@dataclass
class StepOutcome:
    """What happened to the obstacle during one frame."""
    painted: bool = False
    spawned: bool = False
    cleared: bool = False
    next_gap: int | None = None


class Obstacle:
    """The one obstacle instance; parked when not in flight."""

    half_width = OBSTACLE_HALF_WIDTH

    def __init__(
        self,
        viewport: Viewport,
        min_gap: int,
        max_gap: int,
        rng: random.Random,
        first_gap: int | None = None,
    ) -> None:
        check_gap_range(min_gap, max_gap)

        self.viewport = viewport
        self.min_gap = min_gap
        self.max_gap = max_gap
        self._rng = rng

        self.center = self.spawn_column
        self.countdown = self.draw_gap(0) if first_gap is None else first_gap
        self._in_flight = False

    @property
    def spawn_column(self) -> int:
        return self.viewport.width + self.half_width

    @property
    def phase(self) -> ObstaclePhase:
        if not self._in_flight and self.countdown > 0:
            return ObstaclePhase.PENDING
        if self.center + self.half_width >= self.viewport.width:
            return ObstaclePhase.ENTERING
        if self.center - self.half_width < 0:
            return ObstaclePhase.EXITING
        return ObstaclePhase.FULL

    def draw_gap(self, difficulty: int) -> int:
        low, high = spawn_gap_bounds(self.min_gap, self.max_gap, difficulty)
        return self._rng.randint(low, high)

    def visible_span(self) -> tuple[int, int, int]:
        """
        Exact clipping of the pattern against the viewport.

        Returns:
            (first viewport column, first pattern column, column count)
        """
        left = self.center - self.half_width
        first = max(0, left)
        end = min(self.viewport.width, left + OBSTACLE_KINDS.shape[1])
        count = max(0, end - first)
        return first, first - left, count

    def paint(self, buffer: FrameBuffer) -> int:
        """
        Paint the visible part of the pattern onto the buffer.

        Returns:
            Number of columns painted
        """
        first, offset, count = self.visible_span()
        if count:
            top = self.viewport.stand_row - OBSTACLE_HEIGHT + 1
            buffer.blit(
                top,
                first,
                OBSTACLE_KINDS[:, offset:offset + count],
                OBSTACLE_MASK[:, offset:offset + count],
            )
        return count

    def step(self, buffer: FrameBuffer, difficulty: int) -> StepOutcome:
        """
        Run one frame: count down while parked, otherwise paint then move.
        """
        if self.countdown > 0:
            self.countdown -= 1
            return StepOutcome()

        outcome = StepOutcome(painted=True)
        if not self._in_flight:
            self._in_flight = True
            outcome.spawned = True
            logger.debug(f"Obstacle spawned at column {self.center}")

        self.paint(buffer)
        self.center -= 1

        if self.center < -self.half_width:
            self.center = self.spawn_column
            self.countdown = self.draw_gap(difficulty)
            self._in_flight = False
            outcome.cleared = True
            outcome.next_gap = self.countdown
            logger.debug(f"Obstacle cleared, next spawn in {self.countdown} frames")

        return outcome
