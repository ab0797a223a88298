"""Link movement controller.

Turns an externally supplied direction request into at most one grid move per
tick. Pushing is resolved as two sequential single-cell moves:

1. If the cell ahead holds a pushable entity, try to push it one cell on.
2. Unconditionally try to move Link into the cell ahead.

Step 2 succeeds exactly when the cell ahead is empty at that point, either
because it already was or because step 1 vacated it. No rollback is needed:
grid moves are atomic and leave the grid untouched on failure.

The request slot holds one direction; a later request before the next tick
overwrites an earlier one.
"""

import logging

from zelda_grid.directions import Direction, step_from
from zelda_grid.entity import Link
from zelda_grid.grid import Grid
from zelda_grid.utils.contracts import require_direction, require_instance

logger = logging.getLogger(__name__)


class LinkController:
    """Applies Link's pending direction request on ``update``.

    Attributes:
        grid: Grid Link lives on.
        link: The controlled entity; its ``pushed`` flag is written here.
    """

    def __init__(self, grid: Grid, link: Link) -> None:
        require_instance(grid, Grid, "grid")
        require_instance(link, Link, "link")
        self.grid = grid
        self.link = link
        self._pending = Direction.NONE

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    def request_direction(self, direction: Direction) -> None:
        """Store ``direction`` for the next ``update`` (last write wins).

        ``Direction.NONE`` cancels any pending request.
        """
        self._pending = require_direction(direction)

    def update(self) -> bool:
        """Process the pending request.

        With no pending request nothing changes, including ``link.pushed``,
        which keeps reporting the outcome of the last processed request.

        Returns:
            bool: True if Link moved this tick.
        """
        direction = self._pending
        if direction is Direction.NONE:
            return False

        pushed = False
        moved = False
        pos = self.grid.position_of(self.link)
        if pos is not None:
            occupant = self.grid.occupant_at(step_from(pos, direction))
            if occupant is not None and occupant.pushable:
                pushed = self.grid.push(occupant, direction)
                logger.debug("Push of %r %s: %s", occupant, direction, pushed)
            moved = self.grid.move(self.link, direction)

        self.link.pushed = pushed
        self._pending = Direction.NONE
        return moved
