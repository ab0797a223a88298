from zelda_grid.components import Position
from zelda_grid.config import GameConfig
from zelda_grid.directions import Direction
from zelda_grid.game import Game


def make_game(**kwargs: object) -> Game:
    return Game(GameConfig(**kwargs))  # type: ignore[arg-type]


def test_link_moves_within_bounds() -> None:
    game = make_game(link_position=(0, 0))
    game.request_link_direction(Direction.RIGHT)
    game.update()
    assert game.link_position() == Position(1, 0)


def test_second_update_does_not_move() -> None:
    game = make_game(link_position=(0, 0))
    game.request_link_direction(Direction.RIGHT)
    game.update()
    game.update()
    assert game.link_position() == Position(1, 0)


def test_link_cant_move_outside_bounds() -> None:
    game = make_game(link_position=(0, 0))
    game.request_link_direction(Direction.LEFT)
    game.update()
    assert game.link_position() == Position(0, 0)
    game.request_link_direction(Direction.UP)
    game.update()
    assert game.link_position() == Position(0, 0)


def test_link_cant_leave_far_corner() -> None:
    game = make_game(link_position=(9, 9))
    for direction in (Direction.RIGHT, Direction.DOWN):
        game.request_link_direction(direction)
        game.update()
        assert game.link_position() == Position(9, 9)


def test_link_multiple_movements() -> None:
    game = make_game(link_position=(0, 0))
    for direction in ("right", "down", "left", "down", "up"):
        game.request_link_direction(direction)  # type: ignore[arg-type]
        game.update()
    assert game.link_position() == Position(0, 1)


def test_link_cant_move_into_block() -> None:
    game = make_game(link_position=(1, 1), block_positions=[(2, 1)])
    game.request_link_direction(Direction.RIGHT)
    game.update()
    assert game.link_position() == Position(1, 1)
    assert game.block_positions() == [Position(2, 1)]


def test_link_cant_move_through_block() -> None:
    game = make_game(link_position=(1, 1), block_positions=[(2, 1)])
    for _ in range(2):
        game.request_link_direction(Direction.RIGHT)
        game.update()
    assert game.link_position() == Position(1, 1)
    assert game.block_positions() == [Position(2, 1)]


def test_link_walks_around_block() -> None:
    game = make_game(link_position=(1, 1), block_positions=[(2, 1)])
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.RIGHT, Direction.UP):
        game.request_link_direction(direction)
        game.update()
    assert game.link_position() == Position(3, 1)
    assert game.block_positions() == [Position(2, 1)]
