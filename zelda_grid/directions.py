"""Direction enumeration and constant lookup tables.

``MOVE_DIRECTIONS`` is the canonical ordered list of real directions; code
that enumerates directions (e.g. the wandering policy) iterates it in this
order so that seeded runs are reproducible. ``Direction.NONE`` means "no
movement requested" and maps to a zero offset.
"""

from enum import StrEnum, auto
from typing import Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from zelda_grid.components import Position


class Direction(StrEnum):
    """Closed set of movement requests."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    NONE = auto()


MOVE_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

DIRECTION_DELTAS: PMap[Direction, Tuple[int, int]] = pmap(
    {
        Direction.UP: (0, -1),
        Direction.DOWN: (0, 1),
        Direction.LEFT: (-1, 0),
        Direction.RIGHT: (1, 0),
        Direction.NONE: (0, 0),
    }
)

OPPOSITE_DIRECTIONS: PMap[Direction, Direction] = pmap(
    {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
        Direction.NONE: Direction.NONE,
    }
)


def delta_for(direction: Direction) -> Tuple[int, int]:
    """Return the ``(dx, dy)`` offset of ``direction``."""
    return DIRECTION_DELTAS[direction]


def opposite_of(direction: Direction) -> Direction:
    return OPPOSITE_DIRECTIONS[direction]


def step_from(pos: Position, direction: Direction) -> Position:
    """Return the cell adjacent to ``pos`` in ``direction`` (may be out of bounds)."""
    dx, dy = DIRECTION_DELTAS[direction]
    return pos.offset(dx, dy)


def is_in_bounds(pos: Position, size: int) -> bool:
    """Return True if ``pos`` lies within the ``size`` x ``size`` square."""
    return 0 <= pos.x < size and 0 <= pos.y < size
