import random

from zelda_grid.components import Position
from zelda_grid.config import GameConfig
from zelda_grid.controllers import WanderingController
from zelda_grid.directions import Direction, opposite_of
from zelda_grid.entity import Block, Wanderer
from zelda_grid.game import Game
from zelda_grid.grid import Grid
from tests.test_utils import assert_occupancy_invariant, place


def wanderer_game(seed: int = 0, **kwargs: object) -> Game:
    return Game(GameConfig(seed=seed, **kwargs))  # type: ignore[arg-type]


def test_doesnt_move_out_of_bounds_or_into_walls() -> None:
    game = wanderer_game(
        wanderer_position=(0, 0),
        block_positions=[(2, 2), (3, 2), (4, 2), (2, 5), (6, 2), (7, 1)],
    )
    blocks = set(game.block_positions())
    previous = game.wanderer_position()
    for _ in range(1000):
        game.update()
        current = game.wanderer_position()
        assert current is not None and previous is not None
        assert current != previous
        assert abs(current.x - previous.x) + abs(current.y - previous.y) == 1
        assert 0 <= current.x < 10 and 0 <= current.y < 10
        assert current not in blocks
        previous = current
    assert set(game.block_positions()) == blocks


def test_follows_only_available_path() -> None:
    game = wanderer_game(
        wanderer_position=(0, 0),
        block_positions=[(x, 1) for x in range(10)],
    )
    for x in range(1, 10):
        game.update()
        assert game.wanderer_position() == Position(x, 0)
        assert game.wanderer_heading() is Direction.RIGHT


def test_turns_180_only_when_necessary() -> None:
    game = wanderer_game(
        wanderer_position=(0, 0),
        block_positions=[(0, 1), (1, 1), (2, 0)],
    )
    game.update()
    assert game.wanderer_position() == Position(1, 0)
    game.update()
    assert game.wanderer_position() == Position(0, 0)
    assert game.wanderer_heading() is Direction.LEFT


def test_corridor_never_reverses_while_ahead_is_open() -> None:
    # Horizontal corridor along y=1, walled above and below
    walls = [(x, 0) for x in range(10)] + [(x, 2) for x in range(10)]
    grid = Grid()
    for pos in walls:
        place(grid, Block, pos)
    wanderer = place(grid, Wanderer, (5, 1))
    controller = WanderingController(grid, wanderer, random.Random(99))

    reversals = 0
    for _ in range(1000):
        heading = controller.heading
        legal = controller.legal_directions()
        controller.update()
        if heading is not None and heading in legal:
            assert controller.heading is heading
        elif heading is not None and controller.heading is opposite_of(heading):
            reversals += 1
    # Bounces off both ends of the corridor
    assert reversals > 0


def test_never_enters_occupied_cells() -> None:
    game = wanderer_game(
        seed=5,
        wanderer_position=(4, 4),
        link_position=(4, 5),
        block_positions=[(3, 3), (5, 3), (1, 7), (8, 8), (0, 4)],
        pushable_block_positions=[(6, 6), (2, 2)],
    )
    for _ in range(500):
        occupied_before = {pos for _, pos in game.grid.entities()}
        previous = game.wanderer_position()
        game.update()
        current = game.wanderer_position()
        if current != previous:
            assert current not in occupied_before
        assert_occupancy_invariant(game.grid)


def test_straight_bias_in_game() -> None:
    # At (0, 0) heading right, the legal moves are RIGHT and DOWN only
    rng = random.Random(2024)
    samples = 6000
    straight = 0
    for _ in range(samples):
        grid = Grid()
        wanderer = place(grid, Wanderer, (0, 0))
        controller = WanderingController(grid, wanderer, rng, heading=Direction.RIGHT)
        controller.update()
        if controller.heading is Direction.RIGHT:
            straight += 1
    assert abs(straight / samples - 2 / 3) < 0.03


def test_paused_wanderer_in_game() -> None:
    game = wanderer_game(wanderer_position=(5, 5))
    game.set_wanderer_paused(True)
    assert game.wanderer_paused
    for _ in range(10):
        game.update()
    assert game.wanderer_position() == Position(5, 5)
    assert game.wanderer_heading() is None
    game.wanderer_paused = False
    game.update()
    assert game.wanderer_position() != Position(5, 5)
