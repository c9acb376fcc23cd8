"""Cell kinds, their glyphs, and the sprite art built from them."""

from enum import IntEnum

import numpy as np
from numpy.typing import NDArray


class CellKind(IntEnum):
    """What occupies a grid cell. Stored as uint8 in the frame buffer."""

    EMPTY = 0
    STAR = 1
    SURFACE = 2
    GRAVEL = 3
    DIRT = 4
    OBSTACLE_EDGE = 5
    OBSTACLE_STUD = 6
    PLAYER_LEGS = 7
    PLAYER_LEGS_ALT = 8
    PLAYER_BODY = 9
    PLAYER_ARM_LEFT = 10
    PLAYER_ARM_RIGHT = 11
    PLAYER_ARM_UP_LEFT = 12
    PLAYER_ARM_UP_RIGHT = 13
    PLAYER_HEAD = 14


GLYPHS: dict[CellKind, str] = {
    CellKind.EMPTY: " ",
    CellKind.STAR: "*",
    CellKind.SURFACE: "=",
    CellKind.GRAVEL: ",",
    CellKind.DIRT: ".",
    CellKind.OBSTACLE_EDGE: "#",
    CellKind.OBSTACLE_STUD: "o",
    CellKind.PLAYER_LEGS: "M",
    CellKind.PLAYER_LEGS_ALT: "A",
    CellKind.PLAYER_BODY: "O",
    CellKind.PLAYER_ARM_LEFT: "/",
    CellKind.PLAYER_ARM_RIGHT: "\\",
    CellKind.PLAYER_ARM_UP_LEFT: "\\",
    CellKind.PLAYER_ARM_UP_RIGHT: "/",
    CellKind.PLAYER_HEAD: "@",
}

# Lookup table indexed by cell kind value
GLYPH_TABLE: NDArray[np.str_] = np.array(
    [GLYPHS[kind] for kind in sorted(GLYPHS)], dtype="<U1"
)

# Kinds a player must never overlap
COLLISION_KINDS: frozenset[CellKind] = frozenset({
    CellKind.OBSTACLE_EDGE,
    CellKind.OBSTACLE_STUD,
})

PLAYER_KINDS: frozenset[CellKind] = frozenset({
    CellKind.PLAYER_LEGS,
    CellKind.PLAYER_LEGS_ALT,
    CellKind.PLAYER_BODY,
    CellKind.PLAYER_ARM_LEFT,
    CellKind.PLAYER_ARM_RIGHT,
    CellKind.PLAYER_ARM_UP_LEFT,
    CellKind.PLAYER_ARM_UP_RIGHT,
    CellKind.PLAYER_HEAD,
})


def is_collision(kind: int) -> bool:
    """True if the cell kind is an obstacle-edge kind."""
    return kind in COLLISION_KINDS


# Obstacle art, bottom row sits on the stand row. Blanks are transparent.
OBSTACLE_ART = (
    "    ###    ",
    "   #ooo#   ",
    "  #ooooo#  ",
    " #ooooooo# ",
    "#ooooooooo#",
    "###########",
)

_ART_KINDS = {
    "#": CellKind.OBSTACLE_EDGE,
    "o": CellKind.OBSTACLE_STUD,
    " ": CellKind.EMPTY,
}


def parse_sprite(art: tuple[str, ...]) -> tuple[NDArray[np.uint8], NDArray[np.bool_]]:
    """
    Convert ASCII art rows into a kind grid and an opacity mask.

    Raises:
        ValueError: if rows differ in width or use an unknown character
    """
    width = len(art[0])
    if any(len(row) != width for row in art):
        raise ValueError("Sprite rows must all have the same width")

    kinds = np.zeros((len(art), width), dtype=np.uint8)
    for y, row in enumerate(art):
        for x, char in enumerate(row):
            if char not in _ART_KINDS:
                raise ValueError(f"Unknown sprite character: {char!r}")
            kinds[y, x] = _ART_KINDS[char]

    return kinds, kinds != CellKind.EMPTY


OBSTACLE_KINDS, OBSTACLE_MASK = parse_sprite(OBSTACLE_ART)
OBSTACLE_HEIGHT, OBSTACLE_WIDTH = OBSTACLE_KINDS.shape
OBSTACLE_HALF_WIDTH = OBSTACLE_WIDTH // 2
