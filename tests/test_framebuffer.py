"""Tests for graphics/framebuffer.py - generation, scrolling and bounds."""
import random

import numpy as np
import pytest

from asciirunner.graphics.framebuffer import FrameBuffer
from asciirunner.graphics.glyphs import CellKind, OBSTACLE_KINDS, OBSTACLE_MASK


@pytest.mark.unit
class TestInitialize:
    """Procedural fill of a fresh buffer."""

    def test_shape(self, buffer):
        assert buffer.cells.shape == (32, 80)
        assert len(buffer.to_lines()) == 32
        assert all(len(line) == 80 for line in buffer.to_lines())

    def test_row_layout(self, buffer, viewport):
        cells = buffer.cells
        sky = cells[:viewport.sky_rows]
        band = cells[viewport.sky_rows:viewport.surface_row]
        ground = cells[viewport.surface_row + 1:]

        assert set(np.unique(sky)) <= {CellKind.EMPTY, CellKind.STAR}
        assert np.all(band == CellKind.EMPTY)
        assert np.all(cells[viewport.surface_row] == CellKind.SURFACE)
        assert set(np.unique(ground)) <= {CellKind.GRAVEL, CellKind.DIRT}

    def test_densities(self):
        big = FrameBuffer(400, 60, 20, 2, random.Random(7))
        cells = big.cells
        star_ratio = np.mean(cells[:20] == CellKind.STAR)
        gravel_ratio = np.mean(cells[58:] == CellKind.GRAVEL)

        assert 0.002 < star_ratio < 0.03
        assert 0.4 < gravel_ratio < 0.6

    def test_same_seed_same_landscape(self):
        a = FrameBuffer(80, 32, 10, 2, random.Random(99))
        b = FrameBuffer(80, 32, 10, 2, random.Random(99))
        assert a.to_lines() == b.to_lines()

    def test_sky_must_leave_room(self):
        with pytest.raises(ValueError):
            FrameBuffer(80, 32, 29, 2, random.Random(0))


@pytest.mark.unit
class TestScroll:
    """Left scroll and trailing column regeneration."""

    def test_pure_left_shift_except_last_column(self, buffer):
        for _ in range(50):
            before = buffer.cells.copy()
            buffer.scroll_left()
            after = buffer.cells

            assert after.shape == before.shape
            assert np.array_equal(after[:, :-1], before[:, 1:])

    def test_surface_edge_never_randomized(self, buffer, viewport):
        for _ in range(500):
            buffer.scroll_left()
            assert buffer.get(viewport.surface_row, viewport.width - 1) == CellKind.SURFACE

    def test_band_column_is_blank(self, buffer, viewport):
        buffer.scroll_left()
        band = buffer.cells[viewport.sky_rows:viewport.surface_row, -1]
        assert np.all(band == CellKind.EMPTY)

    def test_entities_move_with_scroll(self, buffer):
        buffer.set(20, 40, CellKind.OBSTACLE_EDGE)
        buffer.scroll_left()
        assert buffer.get(20, 39) == CellKind.OBSTACLE_EDGE
        assert buffer.get(20, 40) == CellKind.EMPTY


@pytest.mark.unit
class TestClearAndAccess:
    """Band clearing, blitting and bounds checks."""

    def test_clear_band_defaults(self, buffer, viewport):
        buffer.set(viewport.sky_rows, 5, CellKind.PLAYER_HEAD)
        buffer.set(viewport.stand_row, 6, CellKind.OBSTACLE_EDGE)
        sky_before = buffer.cells[:viewport.sky_rows].copy()

        buffer.clear_band()

        assert buffer.get(viewport.sky_rows, 5) == CellKind.EMPTY
        assert buffer.get(viewport.stand_row, 6) == CellKind.EMPTY
        assert np.array_equal(buffer.cells[:viewport.sky_rows], sky_before)
        assert np.all(buffer.cells[viewport.surface_row] == CellKind.SURFACE)

    def test_band_bounds(self, buffer, viewport):
        assert buffer.band == (viewport.sky_rows, viewport.stand_row)
        assert buffer.surface_row == viewport.surface_row

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (32, 0), (0, 80)])
    def test_out_of_range_fails_loudly(self, buffer, row, col):
        with pytest.raises(IndexError):
            buffer.set(row, col, CellKind.STAR)
        with pytest.raises(IndexError):
            buffer.get(row, col)

    def test_cells_view_is_read_only(self, buffer):
        with pytest.raises(ValueError):
            buffer.cells[0, 0] = CellKind.STAR

    def test_blit_skips_transparent_cells(self, buffer):
        buffer.set(23, 10, CellKind.STAR)
        buffer.blit(23, 10, OBSTACLE_KINDS, OBSTACLE_MASK)

        # Top-left of the obstacle art is transparent
        assert buffer.get(23, 10) == CellKind.STAR
        assert buffer.get(23, 14) == CellKind.OBSTACLE_EDGE
        assert buffer.get(28, 10) == CellKind.OBSTACLE_EDGE

    def test_blit_outside_buffer_raises(self, buffer):
        with pytest.raises(IndexError):
            buffer.blit(23, 75, OBSTACLE_KINDS, OBSTACLE_MASK)

    def test_row_text(self, buffer, viewport):
        assert buffer.row_text(viewport.surface_row) == "=" * 80
