"""Runner character: jump cycle, sprite layout and the collision-gated draw."""

from typing import Callable
import logging

from ..core.state import JumpState, JumpStateMachine
from ..graphics.framebuffer import FrameBuffer
from ..graphics.glyphs import CellKind, is_collision
from .viewport import Viewport

logger = logging.getLogger(__name__)

Cell = tuple[int, int, CellKind]


class Player:
    """
    The auto-running character.

    The column never changes. A jump runs for ``2 * rise + hover``
    updates: ``rise`` rows up, ``hover`` frames held at the peak, then
    back down, landing exactly on the stand row.
    """

    def __init__(
        self,
        viewport: Viewport,
        column: int,
        rise_frames: int,
        hover_frames: int,
    ) -> None:
        viewport.validate_column(column)
        viewport.validate_jump(rise_frames, hover_frames)

        self.viewport = viewport
        self.column = column
        self.rise_frames = rise_frames
        self.hover_frames = hover_frames

        self.row = viewport.stand_row
        self.phase = 0
        self._legs_alt = False
        self._machine = JumpStateMachine()

    @property
    def state(self) -> JumpState:
        return self._machine.state

    @property
    def grounded(self) -> bool:
        return self._machine.state is JumpState.GROUNDED

    @property
    def jump_frames(self) -> int:
        """Updates from takeoff to landing."""
        return 2 * self.rise_frames + self.hover_frames

    @property
    def height(self) -> int:
        """Rows above the stand row."""
        return self.viewport.stand_row - self.row

    def add_state_listener(self, callback: Callable[[JumpState, JumpState], None]) -> None:
        """Call ``callback(old, new)`` on every jump state change."""
        self._machine.add_listener(callback)

    def request_jump(self) -> bool:
        """
        Start a jump if grounded.

        Returns:
            True if a jump started; airborne requests are ignored.
        """
        if not self.grounded:
            return False
        self._machine.transition(JumpState.ASCENDING)
        self.phase = 0
        logger.debug("Jump started")
        return True

    def update(self) -> bool:
        """
        Advance the jump by one frame.

        Returns:
            True if the player landed on this update
        """
        if self.grounded:
            return False

        self.phase += 1
        rise, hover = self.rise_frames, self.hover_frames

        if self.phase >= self.jump_frames:
            # The landing is the last row of the fall
            self._machine.transition(JumpState.DESCENDING)
            self._machine.transition(JumpState.GROUNDED)
            self.phase = 0
            self.row = self.viewport.stand_row
            logger.debug("Landed")
            return True

        if self.phase <= rise:
            self._machine.transition(JumpState.ASCENDING)
            self.row -= 1
        elif self.phase <= rise + hover:
            self._machine.transition(JumpState.HOVERING)
        else:
            self._machine.transition(JumpState.DESCENDING)
            self.row += 1
        return False

    def cells(self) -> list[Cell]:
        """The five cells the sprite covers at its current position."""
        row, col = self.row, self.column
        legs = CellKind.PLAYER_LEGS_ALT if self._legs_alt else CellKind.PLAYER_LEGS

        if self.grounded:
            arm_row = row - 1
            left, right = CellKind.PLAYER_ARM_LEFT, CellKind.PLAYER_ARM_RIGHT
        else:
            arm_row = row - 2
            left, right = CellKind.PLAYER_ARM_UP_LEFT, CellKind.PLAYER_ARM_UP_RIGHT

        return [
            (row, col, legs),
            (row - 1, col, CellKind.PLAYER_BODY),
            (arm_row, col - 1, left),
            (arm_row, col + 1, right),
            (row - 2, col, CellKind.PLAYER_HEAD),
        ]

    def try_draw(self, buffer: FrameBuffer) -> bool:
        """
        Draw the sprite unless any target cell holds an obstacle edge.

        Returns:
            True on collision, in which case nothing is written.
        """
        cells = self.cells()
        for row, col, _ in cells:
            if is_collision(buffer.get(row, col)):
                logger.info(f"Collision at ({row}, {col})")
                return True

        for row, col, kind in cells:
            buffer.set(row, col, kind)
        self._legs_alt = not self._legs_alt
        return False
