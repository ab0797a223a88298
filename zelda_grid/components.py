"""Value components shared by the grid, entities and controllers.

``Position`` is the immutable coordinate returned by every position query.
``Capability`` enumerates the tags an entity kind can carry; the grid and the
controllers consult capabilities instead of probing entity types.
"""

from dataclasses import dataclass
from enum import StrEnum, auto

from zelda_grid.types import Coordinate


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by ``(dx, dy)`` (no bounds check)."""
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> Coordinate:
        return (self.x, self.y)


class Capability(StrEnum):
    """Capability tags.

    Members:
        MOVABLE: May be the subject of a self-initiated grid move.
        PUSHABLE: May be displaced as a side effect of another entity's move.
    """

    MOVABLE = auto()
    PUSHABLE = auto()
