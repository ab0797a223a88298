"""Game configuration.

:class:`GameConfig` describes the initial layout of a game: where Link, the
Wanderer, the plain blocks and the pushable blocks start. Every group is
optional. Coordinates may be given as :class:`Position` values or plain
``(x, y)`` pairs; they are normalised to ``Position`` on construction.

Layouts can also be authored as ASCII art with :meth:`GameConfig.from_lines`::

    config = GameConfig.from_lines(
        [
            "L.B.",
            "....",
            "..#.",
            "Z...",
        ]
    )

Legend: ``L`` Link, ``Z`` Wanderer, ``#`` Block, ``B`` PushableBlock and
``.`` (or a space) for an empty cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Type

from zelda_grid.components import Position
from zelda_grid.entity import ENTITY_KINDS, Block, Entity, Link, PushableBlock, Wanderer
from zelda_grid.grid import GRID_SIZE
from zelda_grid.utils.contracts import require_in_range

EMPTY_GLYPHS = frozenset(". ")


def _to_position(value: Any, size: int, name: str) -> Position:
    if isinstance(value, Position):
        x, y = value.x, value.y
    else:
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"{name} must be an (x, y) pair, got {value!r}") from None
    require_in_range(x, size, f"{name}.x")
    require_in_range(y, size, f"{name}.y")
    return Position(x, y)


def _to_positions(values: Any, size: int, name: str) -> Tuple[Position, ...]:
    """Normalise a group of coordinates; None means an empty group."""
    if values is None:
        return ()
    try:
        items = list(values)
    except TypeError:
        raise TypeError(f"{name} must be a sequence of (x, y) pairs, got {values!r}") from None
    return tuple(_to_position(p, size, f"{name}[{i}]") for i, p in enumerate(items))


@dataclass(frozen=True)
class GameConfig:
    """Initial layout of a game.

    Attributes:
        link_position: Link's start cell, or None for no Link.
        wanderer_position: Wanderer's start cell, or None for no Wanderer.
        block_positions: Cells holding plain blocks.
        pushable_block_positions: Cells holding pushable blocks.
        size: Side length of the square grid.
        seed: Seed for the Wanderer's random source when the game is not
            given one explicitly.
    """

    link_position: Optional[Position] = None
    wanderer_position: Optional[Position] = None
    block_positions: Tuple[Position, ...] = ()
    pushable_block_positions: Tuple[Position, ...] = ()
    size: int = GRID_SIZE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f"size must be a positive int, got {self.size!r}")

        # Frozen dataclass: normalise through object.__setattr__
        if self.link_position is not None:
            object.__setattr__(
                self,
                "link_position",
                _to_position(self.link_position, self.size, "link_position"),
            )
        if self.wanderer_position is not None:
            object.__setattr__(
                self,
                "wanderer_position",
                _to_position(self.wanderer_position, self.size, "wanderer_position"),
            )
        for name in ("block_positions", "pushable_block_positions"):
            object.__setattr__(
                self, name, _to_positions(getattr(self, name), self.size, name)
            )

        seen: set[Position] = set()
        for _, pos in self.placements():
            if pos in seen:
                raise ValueError(f"More than one entity configured at {pos}")
            seen.add(pos)

    def placements(self) -> Iterator[Tuple[Type[Entity], Position]]:
        """Yield ``(kind, position)`` in placement order."""
        if self.link_position is not None:
            yield Link, self.link_position
        if self.wanderer_position is not None:
            yield Wanderer, self.wanderer_position
        for pos in self.block_positions:
            yield Block, pos
        for pos in self.pushable_block_positions:
            yield PushableBlock, pos

    @classmethod
    def from_lines(cls, lines: Sequence[str], seed: Optional[int] = None) -> GameConfig:
        """Build a config from a square ASCII layout.

        Args:
            lines: One string per row, top row first. All rows must have the
                same length as the number of rows.
            seed: Optional seed for the Wanderer.

        Raises:
            ValueError: On a ragged or non-square layout, an unknown glyph, or
                more than one Link or Wanderer.
        """
        if not lines:
            raise ValueError("lines must not be empty")
        size = len(lines)
        for i, row in enumerate(lines):
            if len(row) != size:
                raise ValueError(
                    f"Layout must be square ({size}x{size}); row {i} has {len(row)} cells"
                )

        found: dict[Type[Entity], List[Position]] = {kind: [] for kind in ENTITY_KINDS.values()}
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                if ch in EMPTY_GLYPHS:
                    continue
                kind = ENTITY_KINDS.get(ch)
                if kind is None:
                    raise ValueError(f"Unknown glyph {ch!r} at ({x}, {y})")
                found[kind].append(Position(x, y))

        for kind in (Link, Wanderer):
            if len(found[kind]) > 1:
                raise ValueError(f"Layout has {len(found[kind])} {kind.__name__} cells")

        return cls(
            link_position=next(iter(found[Link]), None),
            wanderer_position=next(iter(found[Wanderer]), None),
            block_positions=tuple(found[Block]),
            pushable_block_positions=tuple(found[PushableBlock]),
            size=size,
            seed=seed,
        )
