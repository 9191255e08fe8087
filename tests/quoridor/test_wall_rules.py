"""Unit tests for /src/quoridor/wall_rules.py"""

from dataclasses import replace

import pytest

from src.core.shared_types import Orientation, Violation
from src.quoridor.pathfinding import has_path_to_goal
from src.quoridor.position import BOARD_SIZE, Position
from src.quoridor.state import GameState
from src.quoridor.wall_rules import check_wall_placement, is_valid_wall_placement
from src.quoridor.walls import Wall

PLAYER_1 = "player_1"
PLAYER_2 = "player_2"
H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def with_walls(state: GameState, *walls: Wall) -> GameState:
    return replace(state, walls=(*state.walls, *walls))


def test_free_spot(active_game: GameState) -> None:
    candidate = Wall(Position(3, 3), H)
    assert check_wall_placement(active_game, PLAYER_1, candidate) is None
    assert is_valid_wall_placement(active_game, PLAYER_1, candidate)


def test_validation_does_not_pay_for_the_wall(active_game: GameState) -> None:
    is_valid_wall_placement(active_game, PLAYER_1, Wall(Position(3, 3), H))
    assert active_game.player1.walls_left == 10
    assert active_game.walls == ()


def test_unknown_player(active_game: GameState) -> None:
    assert (
        check_wall_placement(active_game, "nobody", Wall(Position(3, 3), H))
        == Violation.UNKNOWN_PLAYER
    )


def test_no_walls_left(active_game: GameState) -> None:
    game = active_game.with_player(replace(active_game.player1, walls_left=0))
    assert (
        check_wall_placement(game, PLAYER_1, Wall(Position(3, 3), H))
        == Violation.NO_WALLS_REMAINING
    )
    # the opponent still has all of theirs
    assert is_valid_wall_placement(game, PLAYER_2, Wall(Position(3, 3), H))


def test_no_walls_left_is_reported_first(active_game: GameState) -> None:
    game = active_game.with_player(replace(active_game.player1, walls_left=0))
    assert (
        check_wall_placement(game, PLAYER_1, Wall(Position(8, 8), H))
        == Violation.NO_WALLS_REMAINING
    )


@pytest.mark.parametrize(
    "candidate",
    [
        Wall(Position(8, 8), H),
        Wall(Position(9, 0), H),
        Wall(Position(0, -1), H),
        Wall(Position(8, 0), V),
        Wall(Position(0, 9), V),
    ],
)
def test_out_of_bounds(active_game: GameState, candidate: Wall) -> None:
    assert check_wall_placement(active_game, PLAYER_1, candidate) == Violation.OUT_OF_BOUNDS


def test_duplicate(active_game: GameState) -> None:
    game = with_walls(active_game, Wall(Position(3, 3), H, id="already there"))
    assert (
        check_wall_placement(game, PLAYER_2, Wall(Position(3, 3), H))
        == Violation.DUPLICATE_WALL
    )
    # same anchor, other orientation is a different wall
    assert check_wall_placement(game, PLAYER_2, Wall(Position(3, 3), V)) is None


def test_crossing_wall(active_game: GameState) -> None:
    """Vertical wall at (0,4) crosses the horizontal wall already at (0,3)."""
    game = with_walls(active_game, Wall(Position(0, 3), H))
    assert (
        check_wall_placement(game, PLAYER_1, Wall(Position(0, 4), V))
        == Violation.INTERSECTING_WALL
    )


def test_crossing_wall_other_way_around(active_game: GameState) -> None:
    game = with_walls(active_game, Wall(Position(3, 6), V))
    assert (
        check_wall_placement(game, PLAYER_1, Wall(Position(4, 5), H))
        == Violation.INTERSECTING_WALL
    )
    assert check_wall_placement(game, PLAYER_1, Wall(Position(6, 5), H)) is None


def test_enclosing_the_opponent(active_game: GameState) -> None:
    """
    A barrier along the top of row 8 with one gap in the last column.
    Every wall on its own is fine, the one closing the gap is not.
    """
    game = active_game
    for col in (0, 2, 4, 6):
        candidate = Wall(Position(8, col), H)
        assert check_wall_placement(game, PLAYER_1, candidate) is None
        game = with_walls(game, candidate)

    closing_wall = Wall(Position(7, 8), V)
    assert check_wall_placement(game, PLAYER_1, closing_wall) == Violation.PATH_BLOCKED
    assert not is_valid_wall_placement(game, PLAYER_1, closing_wall)


def test_enclosing_yourself(active_game: GameState) -> None:
    game = with_walls(
        active_game,
        Wall(Position(1, 0), H),
        Wall(Position(1, 2), H),
        Wall(Position(1, 4), H),
        Wall(Position(1, 6), H),
    )
    assert (
        check_wall_placement(game, PLAYER_1, Wall(Position(0, 8), V))
        == Violation.PATH_BLOCKED
    )


def test_path_check_ignores_pawns(active_game: GameState) -> None:
    """The opponent standing in the only gap does not count as a wall."""
    assert active_game.player2 is not None
    game = with_walls(
        active_game.with_player(active_game.player2.moved_to(Position(1, 8))),
        Wall(Position(1, 0), H),
        Wall(Position(1, 2), H),
        Wall(Position(1, 4), H),
        Wall(Position(1, 6), H),
    )
    # player 1 can only leave row 0 through (1, 8), where player 2 is standing
    assert check_wall_placement(game, PLAYER_1, Wall(Position(5, 0), H)) is None


def test_no_player_ever_gets_sealed_off(active_game: GameState) -> None:
    """Greedily try to put a wall on every spot of the board: whatever gets accepted, both players keep a route."""
    game = active_game.with_player(replace(active_game.player1, walls_left=1000))
    rejected_for_path = 0
    for orientation in (H, V):
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                candidate = Wall(Position(row, col), orientation)
                violation = check_wall_placement(game, PLAYER_1, candidate)
                if violation == Violation.PATH_BLOCKED:
                    rejected_for_path += 1
                if violation is not None:
                    continue

                game = with_walls(game, candidate)
                for player in game.players:
                    assert has_path_to_goal(game.walls, player.position, player.goal_row)

    assert rejected_for_path > 0
