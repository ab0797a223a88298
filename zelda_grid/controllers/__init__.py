"""zelda_grid.controllers
=========================

Per-entity tick logic. Each controller implements the
:class:`~zelda_grid.controllers.base.Controller` protocol and is driven by
:class:`zelda_grid.game.Game` once per tick, in registration order::

    from zelda_grid.controllers import LinkController, WanderingController
"""

from .base import Controller
from .link import LinkController
from .wanderer import WanderingController, build_pool, candidate_directions

__all__ = [
    "Controller",
    "LinkController",
    "WanderingController",
    "build_pool",
    "candidate_directions",
]
