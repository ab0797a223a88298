"""Fixed-size square occupancy grid.

The :class:`Grid` is the sole owner of spatial truth: which entity, if any,
occupies each cell. A cell holds at most one entity and a placed entity
occupies exactly one cell.

Storage design:

* ``_cells`` maps ``Position -> Entity`` for occupied cells only.
* ``_index`` maps ``Entity -> Position`` (reverse index, keyed by identity)
  so ``position_of`` is O(1) instead of a full scan.

Both are persistent maps (``pyrsistent.PMap``). A successful move computes
both replacement maps first and then swaps them in, so a failed move leaves
the grid exactly as it was and a successful one empties exactly one cell and
fills exactly one cell.

Capability gates:

* :meth:`Grid.move` refuses entities without ``movable``.
* :meth:`Grid.push` refuses entities without ``pushable``; it is the
  primitive used when another entity displaces an obstacle.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Type

from pyrsistent import pmap
from pyrsistent.typing import PMap

from zelda_grid.components import Position
from zelda_grid.directions import Direction, is_in_bounds, step_from
from zelda_grid.entity import Entity
from zelda_grid.types import EntityID
from zelda_grid.utils.contracts import (
    require_direction,
    require_in_range,
    require_instance,
)

logger = logging.getLogger(__name__)

GRID_SIZE = 10


class Grid:
    """Square occupancy map of ``size`` x ``size`` cells."""

    def __init__(self, size: int = GRID_SIZE) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Grid size must be a positive int, got {size!r}")
        self._size = size
        self._cells: PMap[Position, Entity] = pmap()
        self._index: PMap[Entity, Position] = pmap()

    @property
    def size(self) -> int:
        return self._size

    # -------- Placement --------

    def create(self, entity: Entity, x: int, y: int) -> None:
        """Place ``entity`` at ``(x, y)``.

        Any previous occupant of the cell is dropped from the grid. If
        ``entity`` is already placed elsewhere it is relocated, so it never
        occupies two cells.

        Raises:
            TypeError: If ``entity`` is None or not an :class:`Entity`.
            IndexError: If ``(x, y)`` lies outside the grid.
        """
        require_instance(entity, Entity, "entity")
        require_in_range(x, self._size, "x")
        require_in_range(y, self._size, "y")

        pos = Position(x, y)
        cells, index = self._cells, self._index

        previous = cells.get(pos)
        if previous is not None and previous is not entity:
            logger.debug("Overwriting %r at %s with %r", previous, pos, entity)
            index = index.discard(previous)

        old_pos = index.get(entity)
        if old_pos is not None:
            cells = cells.discard(old_pos)

        self._cells = cells.set(pos, entity)
        self._index = index.set(entity, pos)

    # -------- Movement --------

    def move(self, entity: Entity, direction: Direction) -> bool:
        """Move a movable entity one cell in ``direction``.

        Returns:
            bool: True if the entity moved. False for ``Direction.NONE``, a
            non-movable or unplaced entity, an out-of-bounds target, or an
            occupied target.

        Raises:
            TypeError: If ``entity`` is None or not an :class:`Entity`.
            ValueError: If ``direction`` is not a direction.
        """
        direction = require_direction(direction)
        require_instance(entity, Entity, "entity")
        if direction is Direction.NONE:
            return False
        if not entity.movable:
            logger.debug("%r is not movable", entity)
            return False
        return self._shift(entity, direction)

    def push(self, entity: Entity, direction: Direction) -> bool:
        """Displace a pushable entity one cell in ``direction``.

        Identical to :meth:`move` except the gate is the ``pushable``
        capability. The destination only has to be empty; an occupant there
        is never pushed further, so pushes do not chain.
        """
        direction = require_direction(direction)
        require_instance(entity, Entity, "entity")
        if direction is Direction.NONE:
            return False
        if not entity.pushable:
            logger.debug("%r is not pushable", entity)
            return False
        return self._shift(entity, direction)

    def _shift(self, entity: Entity, direction: Direction) -> bool:
        source = self._index.get(entity)
        if source is None:
            logger.debug("%r is not on the grid", entity)
            return False

        target = step_from(source, direction)
        if not is_in_bounds(target, self._size):
            logger.debug("Blocked %r: %s is out of bounds", entity, target)
            return False
        if target in self._cells:
            logger.debug(
                "Blocked %r: %s is occupied by %r", entity, target, self._cells[target]
            )
            return False

        cells = self._cells.discard(source).set(target, entity)
        index = self._index.set(entity, target)
        self._cells, self._index = cells, index
        logger.debug("%r moved %s from %s to %s", entity, direction, source, target)
        return True

    # -------- Queries --------

    def position_of(self, entity: Entity) -> Optional[Position]:
        """Return the cell occupied by ``entity`` or None if it is not placed."""
        require_instance(entity, Entity, "entity")
        return self._index.get(entity)

    def occupant_at(self, pos: Position) -> Optional[Entity]:
        """Return the entity at ``pos``; None when empty or out of bounds."""
        return self._cells.get(pos)

    def is_free(self, pos: Position) -> bool:
        """Return True if ``pos`` is in bounds and empty."""
        return is_in_bounds(pos, self._size) and pos not in self._cells

    def entities(self) -> Iterator[Tuple[Entity, Position]]:
        """Yield ``(entity, position)`` pairs in row-major scan order."""
        for pos in sorted(self._cells, key=lambda p: (p.y, p.x)):
            yield self._cells[pos], pos

    def position_of_all(self, kind: Type[Entity]) -> List[Position]:
        """Positions of every occupant that is an instance of ``kind``.

        Ordered by row-major scan (top row first, left to right), not by
        placement order.
        """
        require_instance(kind, type, "kind")
        return [pos for entity, pos in self.entities() if isinstance(entity, kind)]

    def positions_hash(self, kind: Type[Entity]) -> PMap[EntityID, Position]:
        """Map ``entity_id -> position`` for occupants that are ``kind``.

        Lets a caller follow one specific entity across ticks without relying
        on the order of :meth:`position_of_all`.
        """
        require_instance(kind, type, "kind")
        found: Dict[EntityID, Position] = {
            entity.entity_id: pos
            for entity, pos in self._index.items()
            if isinstance(entity, kind)
        }
        return pmap(found)

    positions_by_id = positions_hash

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, occupied={len(self._cells)})"
