"""Common type aliases.

``EntityID`` is the stable identity handed to presentation code that needs to
correlate a specific entity across ticks (see
:meth:`zelda_grid.grid.Grid.positions_hash`). ``Coordinate`` is the plain
``(x, y)`` pair accepted by configuration surfaces.
"""

from typing import Tuple

EntityID = int

Coordinate = Tuple[int, int]
