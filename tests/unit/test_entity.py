from zelda_grid.components import Capability
from zelda_grid.entity import (
    ENTITY_KINDS,
    Block,
    Link,
    PushableBlock,
    Wanderer,
    new_entity_id,
)


def test_capabilities_per_kind() -> None:
    assert (Link().movable, Link().pushable) == (True, False)
    assert (Wanderer().movable, Wanderer().pushable) == (True, False)
    assert (Block().movable, Block().pushable) == (False, False)
    assert (PushableBlock().movable, PushableBlock().pushable) == (True, True)
    assert PushableBlock.capabilities == {Capability.MOVABLE, Capability.PUSHABLE}


def test_entities_compare_by_identity() -> None:
    a, b = Block(), Block()
    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_entity_ids_are_unique_and_increasing() -> None:
    first = new_entity_id()
    second = new_entity_id()
    assert second == first + 1
    assert Block().entity_id != Block().entity_id


def test_link_pushed_defaults_false() -> None:
    assert Link().pushed is False


def test_glyph_registry() -> None:
    assert ENTITY_KINDS == {
        "L": Link,
        "Z": Wanderer,
        "#": Block,
        "B": PushableBlock,
    }
    codes = {kind.code for kind in ENTITY_KINDS.values()}
    assert len(codes) == 4 and 0 not in codes
