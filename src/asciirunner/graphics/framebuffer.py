"""
Scrolling frame buffer.

The buffer is a row-major numpy grid of ``CellKind`` values. Sky rows get
sparse stars, the surface row is solid hard surface, and the rows below it
are decorative ground. Every frame the whole grid shifts one column left
and a fresh column is generated on the right.
"""

import logging
import random

import numpy as np
from numpy.typing import NDArray

from ..core.errors import ResourceExhaustedError
from .glyphs import CellKind, GLYPH_TABLE

logger = logging.getLogger(__name__)

STAR_DENSITY = 0.01
GRAVEL_RATIO = 0.5


class FrameBuffer:
    """
    Owned H x W glyph grid with bounds-checked access.

    Negative or out-of-range indices raise ``IndexError``; numpy's
    wrap-around indexing is never used for game coordinates.
    """

    def __init__(
        self,
        width: int,
        height: int,
        sky_rows: int,
        ground_rows: int,
        rng: random.Random,
    ) -> None:
        if not 0 < sky_rows < height - ground_rows - 1:
            raise ValueError(
                f"sky_rows={sky_rows} leaves no room below it in a {height}-row grid"
            )

        self._width = width
        self._height = height
        self._sky_rows = sky_rows
        self._ground_rows = ground_rows
        self._rng = rng

        try:
            self._cells = np.full((height, width), CellKind.EMPTY, dtype=np.uint8)
        except MemoryError as e:
            raise ResourceExhaustedError(
                f"Cannot allocate {width}x{height} frame buffer"
            ) from e

        self.initialize()
        logger.debug(f"FrameBuffer allocated: {width}x{height}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def surface_row(self) -> int:
        """Hard-surface boundary between the play band and the ground."""
        return self._height - self._ground_rows - 1

    @property
    def band(self) -> tuple[int, int]:
        """First and last row (inclusive) of the dynamic band."""
        return self._sky_rows, self.surface_row - 1

    @property
    def cells(self) -> NDArray[np.uint8]:
        """Read-only view of the grid."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def _cell_for_row(self, row: int) -> CellKind:
        """Pick a freshly generated cell for the given row."""
        if row < self._sky_rows:
            return CellKind.STAR if self._rng.random() < STAR_DENSITY else CellKind.EMPTY
        if row < self.surface_row:
            return CellKind.EMPTY
        if row == self.surface_row:
            return CellKind.SURFACE
        return CellKind.GRAVEL if self._rng.random() < GRAVEL_RATIO else CellKind.DIRT

    def initialize(self) -> None:
        """Fill the whole grid with sky, empty band, surface and ground."""
        for row in range(self._height):
            for col in range(self._width):
                self._cells[row, col] = self._cell_for_row(row)

    def scroll_left(self) -> None:
        """Shift every row one column left and generate the rightmost column."""
        self._cells[:, :-1] = self._cells[:, 1:]
        for row in range(self._height):
            self._cells[row, -1] = self._cell_for_row(row)

    def clear_band(self, row_start: int | None = None, row_end: int | None = None) -> None:
        """
        Blank rows ``row_start..row_end`` inclusive.

        Defaults to the dynamic band between the sky and the surface.
        """
        band_start, band_end = self.band
        row_start = band_start if row_start is None else row_start
        row_end = band_end if row_end is None else row_end
        self._check(row_start, 0)
        self._check(row_end, 0)
        self._cells[row_start:row_end + 1, :] = CellKind.EMPTY

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self._width}x{self._height} buffer"
            )

    def get(self, row: int, col: int) -> CellKind:
        self._check(row, col)
        return CellKind(self._cells[row, col])

    def set(self, row: int, col: int, kind: CellKind) -> None:
        self._check(row, col)
        self._cells[row, col] = kind

    def blit(
        self,
        row: int,
        col: int,
        kinds: NDArray[np.uint8],
        mask: NDArray[np.bool_],
    ) -> None:
        """
        Copy opaque cells of a sprite whose top-left corner is (row, col).

        The sprite region must lie fully inside the buffer; callers clip first.
        """
        height, width = kinds.shape
        self._check(row, col)
        self._check(row + height - 1, col + width - 1)
        region = self._cells[row:row + height, col:col + width]
        region[mask] = kinds[mask]

    def row_text(self, row: int) -> str:
        self._check(row, 0)
        return "".join(GLYPH_TABLE[self._cells[row]])

    def to_lines(self) -> list[str]:
        """Render the grid as one string per row."""
        glyphs = GLYPH_TABLE[self._cells]
        return ["".join(row) for row in glyphs]

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
