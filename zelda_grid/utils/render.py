"""Snapshot helpers for presentation code.

A presenter polls the simulation once per frame; these helpers turn the
current grid into plain data it can diff or draw. Neither mutates the grid.
"""

from typing import List

import numpy as np

from zelda_grid.grid import Grid

EMPTY_CODE = 0
EMPTY_GLYPH = "."


def occupancy_array(grid: Grid) -> np.ndarray:
    """Return a ``size x size`` int8 array of entity codes, indexed ``[y, x]``.

    Empty cells are ``EMPTY_CODE``; occupied cells hold the occupant's
    ``code`` class attribute.
    """
    out = np.full((grid.size, grid.size), EMPTY_CODE, dtype=np.int8)
    for entity, pos in grid.entities():
        out[pos.y, pos.x] = entity.code
    return out


def render_lines(grid: Grid) -> List[str]:
    """ASCII snapshot, one string per row, using entity glyphs.

    The output is accepted by :meth:`zelda_grid.config.GameConfig.from_lines`.
    """
    rows = [[EMPTY_GLYPH] * grid.size for _ in range(grid.size)]
    for entity, pos in grid.entities():
        rows[pos.y][pos.x] = entity.glyph
    return ["".join(row) for row in rows]
