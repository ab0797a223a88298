"""Game composition root.

:class:`Game` builds the grid and its entities from a :class:`GameConfig`,
registers one controller per controllable entity and exposes a single
``update`` tick plus read-only queries for a polling presenter.

Tick ordering: controllers run in registration order, Link's first and the
Wanderer's second. The Link controller sees the grid as it was at the start
of the tick; the Wanderer controller sees it after Link's move (and any push)
has been applied. There is no simultaneous resolution beyond this fixed
precedence.

Example::

    game = Game(GameConfig(link_position=(1, 1), pushable_block_positions=[(2, 1)]))
    game.request_link_direction(Direction.RIGHT)
    game.update()
    assert game.link_pushed()
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from pyrsistent.typing import PMap

from zelda_grid.components import Position
from zelda_grid.config import GameConfig
from zelda_grid.controllers import Controller, LinkController, WanderingController
from zelda_grid.directions import Direction
from zelda_grid.entity import Block, Entity, Link, PushableBlock, Wanderer
from zelda_grid.grid import Grid
from zelda_grid.types import EntityID
from zelda_grid.utils.render import render_lines

logger = logging.getLogger(__name__)


class Game:
    """One simulation instance. Drive it from a single thread.

    Args:
        config: Initial layout; an empty 10x10 grid when omitted.
        rng: Random source for the Wanderer. Defaults to
            ``random.Random(config.seed)``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.size)
        self._turn = 0
        self._link: Optional[Link] = None
        self._wanderer: Optional[Wanderer] = None
        self._link_controller: Optional[LinkController] = None
        self._wanderer_controller: Optional[WanderingController] = None
        self._entities: List[Entity] = []

        for kind, pos in self.config.placements():
            entity = kind()
            self.grid.create(entity, pos.x, pos.y)
            self._entities.append(entity)
            if isinstance(entity, Link):
                self._link = entity
            elif isinstance(entity, Wanderer):
                self._wanderer = entity

        self._controllers: List[Controller] = []
        if self._link is not None:
            self._link_controller = LinkController(self.grid, self._link)
            self._controllers.append(self._link_controller)
        if self._wanderer is not None:
            self._wanderer_controller = WanderingController(
                self.grid,
                self._wanderer,
                rng if rng is not None else random.Random(self.config.seed),
            )
            self._controllers.append(self._wanderer_controller)

        logger.info(
            "Game created: %dx%d grid, %d entities, %d controllers",
            self.config.size,
            self.config.size,
            len(self._entities),
            len(self._controllers),
        )

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Game":
        """Build a game from an ASCII layout (see :meth:`GameConfig.from_lines`)."""
        return cls(GameConfig.from_lines(lines, seed=seed), rng=rng)

    # -------- Commands --------

    def request_link_direction(self, direction: Direction) -> None:
        """Queue Link's move for the next tick, replacing any earlier request."""
        self._require_link_controller().request_direction(direction)

    def set_wanderer_paused(self, paused: bool) -> None:
        self._require_wanderer_controller().paused = paused

    def update(self) -> None:
        """Advance the simulation by one tick."""
        for controller in self._controllers:
            controller.update()
        self._turn += 1

    # -------- Queries --------

    @property
    def turn(self) -> int:
        """Number of completed ticks."""
        return self._turn

    @property
    def controllers(self) -> Tuple[Controller, ...]:
        """Registered controllers in update order."""
        return tuple(self._controllers)

    @property
    def wanderer_paused(self) -> bool:
        return self._require_wanderer_controller().paused

    @wanderer_paused.setter
    def wanderer_paused(self, paused: bool) -> None:
        self.set_wanderer_paused(paused)

    def link_position(self) -> Optional[Position]:
        if self._link is None:
            return None
        return self.grid.position_of(self._link)

    def wanderer_position(self) -> Optional[Position]:
        if self._wanderer is None:
            return None
        return self.grid.position_of(self._wanderer)

    def wanderer_heading(self) -> Optional[Direction]:
        if self._wanderer_controller is None:
            return None
        return self._wanderer_controller.heading

    def link_pushed(self) -> bool:
        """Whether Link's last processed request pushed something."""
        return self._link is not None and self._link.pushed

    def block_positions(self) -> List[Position]:
        return self.grid.position_of_all(Block)

    def pushable_block_positions(self) -> List[Position]:
        return self.grid.position_of_all(PushableBlock)

    def pushable_block_positions_by_id(self) -> PMap[EntityID, Position]:
        return self.grid.positions_by_id(PushableBlock)

    def render_lines(self) -> List[str]:
        return render_lines(self.grid)

    # -------- Internal helpers --------

    def _require_link_controller(self) -> LinkController:
        if self._link_controller is None:
            raise ValueError("Game has no Link")
        return self._link_controller

    def _require_wanderer_controller(self) -> WanderingController:
        if self._wanderer_controller is None:
            raise ValueError("Game has no Wanderer")
        return self._wanderer_controller
