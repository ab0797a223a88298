"""Wandering controller (biased random walk).

Each tick the controller picks a new heading for its entity and moves one
cell along it:

1. *Legal* directions are those whose adjacent cell is in bounds and empty.
2. The direction opposite the current heading is removed. If that leaves
   nothing (a dead end), the full legal set is used, which is the only time
   the walker reverses.
3. If the current heading survives step 2 it is weighted so that it is drawn
   with probability 2/3 however many alternatives remain. Otherwise the
   candidates are drawn uniformly.

A fully enclosed walker has no candidates; the tick is a no-op and the
heading is left as it was.

The random source is injected (anything with a ``choice`` method, normally a
seeded :class:`random.Random`) so runs can be reproduced.
"""

import logging
import random
from typing import List, Optional, Sequence

from zelda_grid.directions import MOVE_DIRECTIONS, Direction, opposite_of, step_from
from zelda_grid.entity import Wanderer
from zelda_grid.grid import Grid
from zelda_grid.utils.contracts import require_direction, require_instance

logger = logging.getLogger(__name__)


def candidate_directions(
    legal: Sequence[Direction], heading: Optional[Direction]
) -> List[Direction]:
    """Drop the reversal of ``heading`` unless nothing else is legal."""
    if heading is None:
        return list(legal)
    reverse = opposite_of(heading)
    forward = [d for d in legal if d is not reverse]
    return forward if forward else list(legal)


def build_pool(
    candidates: Sequence[Direction], heading: Optional[Direction]
) -> List[Direction]:
    """Return the sampling pool for ``candidates``.

    When ``heading`` is a candidate it is repeated twice as often as all the
    other candidates combined, e.g. ``[other, heading, heading]`` for two
    candidates and ``[a, b, heading x 4]`` for three. A lone candidate is
    returned as-is.
    """
    if heading is None or heading not in candidates:
        return list(candidates)
    others = [d for d in candidates if d is not heading]
    return others + [heading] * max(1, 2 * len(others))


class WanderingController:
    """Drives one :class:`Wanderer` with the biased random walk.

    Args:
        grid: Grid the wanderer lives on.
        wanderer: The controlled entity.
        rng: Random source; a fresh unseeded ``random.Random`` by default.
        heading: Initial heading (None means no heading yet).
    """

    def __init__(
        self,
        grid: Grid,
        wanderer: Wanderer,
        rng: Optional[random.Random] = None,
        heading: Optional[Direction] = None,
    ) -> None:
        require_instance(grid, Grid, "grid")
        require_instance(wanderer, Wanderer, "wanderer")
        self.grid = grid
        self.wanderer = wanderer
        self.rng = rng if rng is not None else random.Random()
        if heading is not None:
            heading = require_direction(heading)
        self._heading: Optional[Direction] = (
            None if heading is Direction.NONE else heading
        )
        self._paused = False

    @property
    def heading(self) -> Optional[Direction]:
        """Direction chosen on the last active tick (None before the first)."""
        return self._heading

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"paused must be a bool, got {value!r}")
        if value != self._paused:
            logger.debug("%r %s", self.wanderer, "paused" if value else "resumed")
        self._paused = value

    def legal_directions(self) -> List[Direction]:
        """Directions whose adjacent cell is in bounds and currently empty."""
        pos = self.grid.position_of(self.wanderer)
        if pos is None:
            return []
        return [d for d in MOVE_DIRECTIONS if self.grid.is_free(step_from(pos, d))]

    def update(self) -> bool:
        """Choose a heading and move along it.

        Returns:
            bool: True if the wanderer moved. False while paused or when
            enclosed on all four sides.
        """
        if self._paused:
            return False

        candidates = candidate_directions(self.legal_directions(), self._heading)
        if not candidates:
            logger.debug("%r is enclosed; staying put", self.wanderer)
            return False

        pool = build_pool(candidates, self._heading)
        self._heading = self.rng.choice(pool)
        logger.debug("%r heading %s (pool=%s)", self.wanderer, self._heading, pool)
        return self.grid.move(self.wanderer, self._heading)
