"""Controller protocol.

A controller owns the per-tick decision logic for one entity and applies it
through the :class:`~zelda_grid.grid.Grid`. The game calls ``update`` on each
registered controller once per tick, in registration order.
"""

from typing import Protocol


class Controller(Protocol):
    def update(self) -> object: ...
