"""Graphics module: cell kinds, sprites and the scrolling frame buffer."""

from .glyphs import (
    CellKind,
    GLYPHS,
    COLLISION_KINDS,
    PLAYER_KINDS,
    OBSTACLE_KINDS,
    OBSTACLE_MASK,
    OBSTACLE_WIDTH,
    OBSTACLE_HEIGHT,
    OBSTACLE_HALF_WIDTH,
    is_collision,
    parse_sprite,
)
from .framebuffer import FrameBuffer

__all__ = [
    "CellKind",
    "GLYPHS",
    "COLLISION_KINDS",
    "PLAYER_KINDS",
    "OBSTACLE_KINDS",
    "OBSTACLE_MASK",
    "OBSTACLE_WIDTH",
    "OBSTACLE_HEIGHT",
    "OBSTACLE_HALF_WIDTH",
    "is_collision",
    "parse_sprite",
    "FrameBuffer",
]
