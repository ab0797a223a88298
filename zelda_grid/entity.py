"""Placeable entities & ID generation.

Every object that can occupy a grid cell is an :class:`Entity`. Entities are
compared by *identity*: two structurally identical blocks are still two
distinct occupants. Each instance receives a process-local, monotonically
increasing ``entity_id`` at construction, which presentation code can use to
track one specific entity across ticks.

Capabilities are fixed per kind and resolved once, at class definition:

============== ======== ========
kind           movable  pushable
============== ======== ========
Link           yes      no
Wanderer       yes      no
Block          no       no
PushableBlock  yes      yes
============== ======== ========

Examples
--------
>>> from zelda_grid.entity import Link, PushableBlock
>>> link = Link()
>>> link.movable, link.pushable
(True, False)
>>> PushableBlock().pushable
True
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, Type

from pyrsistent import pset
from pyrsistent.typing import PSet

from zelda_grid.components import Capability
from zelda_grid.types import EntityID


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)


@dataclass(eq=False)
class Entity:
    """Base class for grid occupants.

    Attributes:
        entity_id: Stable identity, unique within the process.
        capabilities: Capability tags of the kind (class level, immutable).
        glyph: Character used by ASCII layouts and snapshots.
        code: Integer used by array snapshots (0 is reserved for "empty").
    """

    capabilities: ClassVar[PSet[Capability]] = pset()
    glyph: ClassVar[str] = "?"
    code: ClassVar[int] = -1

    entity_id: EntityID = field(default_factory=new_entity_id)

    @property
    def movable(self) -> bool:
        return Capability.MOVABLE in self.capabilities

    @property
    def pushable(self) -> bool:
        return Capability.PUSHABLE in self.capabilities

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entity_id={self.entity_id})"


@dataclass(eq=False, repr=False)
class Link(Entity):
    """The player character.

    ``pushed`` records whether the last processed direction request displaced
    a pushable entity. It is written by the Link controller only.
    """

    capabilities: ClassVar[PSet[Capability]] = pset([Capability.MOVABLE])
    glyph: ClassVar[str] = "L"
    code: ClassVar[int] = 1

    pushed: bool = False


@dataclass(eq=False, repr=False)
class Wanderer(Entity):
    """Autonomous wandering enemy (a Zol)."""

    capabilities: ClassVar[PSet[Capability]] = pset([Capability.MOVABLE])
    glyph: ClassVar[str] = "Z"
    code: ClassVar[int] = 2


@dataclass(eq=False, repr=False)
class Block(Entity):
    """Solid terrain block. Neither movable nor pushable."""

    glyph: ClassVar[str] = "#"
    code: ClassVar[int] = 3


@dataclass(eq=False, repr=False)
class PushableBlock(Entity):
    """Terrain block that Link can push one cell at a time."""

    capabilities: ClassVar[PSet[Capability]] = pset(
        [Capability.MOVABLE, Capability.PUSHABLE]
    )
    glyph: ClassVar[str] = "B"
    code: ClassVar[int] = 4


# Layout glyph -> entity kind (used by ``GameConfig.from_lines``)
ENTITY_KINDS: Dict[str, Type[Entity]] = {
    kind.glyph: kind for kind in (Link, Wanderer, Block, PushableBlock)
}
