"""Tests for game/obstacle.py - travel, clipping and spawn scheduling."""
import random

import numpy as np
import pytest

from asciirunner.core.errors import ConfigurationError
from asciirunner.game.obstacle import Obstacle, ObstaclePhase, spawn_gap_bounds
from asciirunner.graphics.glyphs import (
    CellKind,
    OBSTACLE_HALF_WIDTH,
    OBSTACLE_HEIGHT,
    OBSTACLE_KINDS,
    OBSTACLE_MASK,
)

HALF = OBSTACLE_HALF_WIDTH


def make_obstacle(viewport, min_gap=5, max_gap=5, first_gap=0, seed=3):
    return Obstacle(viewport, min_gap, max_gap, random.Random(seed), first_gap=first_gap)


def painted_columns(buffer, viewport):
    """Columns of the band holding any obstacle cell."""
    band = buffer.cells[viewport.sky_rows:viewport.surface_row]
    hits = np.isin(band, [CellKind.OBSTACLE_EDGE, CellKind.OBSTACLE_STUD])
    return sorted(set(np.nonzero(hits)[1].tolist()))


@pytest.mark.unit
class TestTravel:
    """Column movement and wrap-around."""

    def test_spawns_off_screen_right(self, viewport):
        obstacle = make_obstacle(viewport)
        assert obstacle.center == viewport.width + HALF

    def test_decrements_one_column_per_active_frame(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        for _ in range(40):
            before = obstacle.center
            outcome = obstacle.step(buffer, 0)
            assert outcome.painted
            assert obstacle.center == before - 1

    def test_wraps_after_crossing_left_edge(self, viewport, buffer):
        obstacle = make_obstacle(viewport, first_gap=0)
        obstacle.step(buffer, 0)
        obstacle.center = -HALF

        outcome = obstacle.step(buffer, 0)

        assert outcome.painted and outcome.cleared
        assert obstacle.center == viewport.width + HALF
        assert obstacle.countdown == 5
        assert outcome.next_gap == 5
        assert obstacle.phase is ObstaclePhase.PENDING

    def test_full_pass_length(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        frames = 0
        while True:
            frames += 1
            if obstacle.step(buffer, 0).cleared:
                break
        # From W + half down to -half inclusive
        assert frames == viewport.width + 2 * HALF + 1


@pytest.mark.unit
class TestClipping:
    """Exact clipping at both viewport edges."""

    def test_fully_off_screen_paints_nothing(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        assert obstacle.paint(buffer) == 0
        assert painted_columns(buffer, viewport) == []

    def test_entry_paints_half_width_at_right_edge(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        obstacle.center = viewport.width

        assert obstacle.paint(buffer) == HALF

        width = viewport.width
        top = viewport.stand_row - OBSTACLE_HEIGHT + 1
        assert painted_columns(buffer, viewport) == list(range(width - HALF, width))
        for y in range(OBSTACLE_HEIGHT):
            for x in range(HALF):
                expected = OBSTACLE_KINDS[y, x] if OBSTACLE_MASK[y, x] else CellKind.EMPTY
                assert buffer.get(top + y, width - HALF + x) == expected

    @pytest.mark.parametrize("offset", range(1, 2 * HALF + 1))
    def test_entry_column_count_is_exact(self, viewport, offset):
        obstacle = make_obstacle(viewport)
        obstacle.center = viewport.width + HALF - offset
        first, pattern_col, count = obstacle.visible_span()
        assert count == offset
        assert first == viewport.width - offset
        assert pattern_col == 0

    def test_exit_uses_rightmost_pattern_columns(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        obstacle.center = 2

        first, pattern_col, count = obstacle.visible_span()
        assert (first, pattern_col, count) == (0, HALF - 2, 2 + HALF + 1)

        obstacle.paint(buffer)
        top = viewport.stand_row - OBSTACLE_HEIGHT + 1
        for y in range(OBSTACLE_HEIGHT):
            for x in range(count):
                source = pattern_col + x
                expected = OBSTACLE_KINDS[y, source] if OBSTACLE_MASK[y, source] else CellKind.EMPTY
                assert buffer.get(top + y, x) == expected

    def test_last_visible_frame(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        obstacle.center = -HALF
        assert obstacle.paint(buffer) == 1
        assert painted_columns(buffer, viewport) == [0]

    def test_centered_when_fully_inside(self, viewport, buffer):
        obstacle = make_obstacle(viewport)
        obstacle.center = 40
        assert obstacle.paint(buffer) == 2 * HALF + 1
        assert painted_columns(buffer, viewport) == list(range(40 - HALF, 40 + HALF + 1))
        # Bottom row sits on the stand row
        assert buffer.get(viewport.stand_row, 40) == CellKind.OBSTACLE_EDGE
        assert buffer.get(viewport.surface_row, 40) == CellKind.SURFACE

    @pytest.mark.parametrize(
        "center,phase",
        [(85, ObstaclePhase.ENTERING), (75, ObstaclePhase.ENTERING),
         (74, ObstaclePhase.FULL), (5, ObstaclePhase.FULL), (4, ObstaclePhase.EXITING)],
    )
    def test_phase_by_position(self, viewport, center, phase):
        obstacle = make_obstacle(viewport, first_gap=0)
        obstacle.center = center
        assert obstacle.phase is phase


@pytest.mark.unit
class TestSpawnSchedule:
    """Countdown and spawn-gap draws."""

    def test_countdown_before_first_paint(self, viewport, buffer):
        obstacle = make_obstacle(viewport, first_gap=3)
        for expected in (2, 1, 0):
            outcome = obstacle.step(buffer, 0)
            assert not outcome.painted
            assert obstacle.countdown == expected
            assert obstacle.center == viewport.width + HALF

        outcome = obstacle.step(buffer, 0)
        assert outcome.painted and outcome.spawned

        outcome = obstacle.step(buffer, 0)
        assert outcome.painted and not outcome.spawned

    def test_first_gap_drawn_when_not_given(self, viewport):
        obstacle = Obstacle(viewport, 20, 60, random.Random(5))
        assert 20 <= obstacle.countdown <= 60
        assert obstacle.phase is ObstaclePhase.PENDING

    @pytest.mark.parametrize("difficulty", [0, 5, 39, 40, 41, 1000])
    def test_bounds_never_empty(self, difficulty):
        low, high = spawn_gap_bounds(20, 60, difficulty)
        assert low == 20
        assert high >= low
        assert high == max(20, 60 - difficulty)

    def test_gap_draws_respect_difficulty(self, viewport):
        obstacle = Obstacle(viewport, 20, 60, random.Random(11))
        gaps = [obstacle.draw_gap(30) for _ in range(300)]
        assert min(gaps) >= 20
        assert max(gaps) <= 30

        assert {obstacle.draw_gap(500) for _ in range(20)} == {20}

    @pytest.mark.parametrize("min_gap,max_gap", [(10, 5), (-1, 5)])
    def test_invalid_range_rejected(self, viewport, min_gap, max_gap):
        with pytest.raises(ConfigurationError):
            Obstacle(viewport, min_gap, max_gap, random.Random(0))
