"""
Wall placement rules

A wall may be placed when

* the player still has walls left
* the anchor lies within the range allowed for its orientation
* the exact same wall is not on the board yet
* it does not cross an existing perpendicular wall
* afterwards, every player can still reach their goal row

Placing the wall (and paying for it) is done by the dispatcher in game.py
"""

from typing import Optional

from src.core.shared_types import Violation
from src.quoridor.pathfinding import has_path_to_goal
from src.quoridor.state import GameState
from src.quoridor.walls import Wall


def check_wall_placement(
    state: GameState, player_id: str, wall: Wall
) -> Optional[Violation]:
    """Find the first rule the placement breaks. Returns None when the wall can be placed."""
    player = state.player(player_id)
    if player is None:
        return Violation.UNKNOWN_PLAYER

    if player.walls_left <= 0:
        return Violation.NO_WALLS_REMAINING

    if not wall.is_within_bounds():
        return Violation.OUT_OF_BOUNDS

    if any(existing.key() == wall.key() for existing in state.walls):
        return Violation.DUPLICATE_WALL

    if any(wall.intersects(existing) for existing in state.walls):
        return Violation.INTERSECTING_WALL

    if not _every_player_can_reach_goal(state, wall):
        return Violation.PATH_BLOCKED

    return None


def is_valid_wall_placement(state: GameState, player_id: str, wall: Wall) -> bool:
    return check_wall_placement(state, player_id, wall) is None


def _every_player_can_reach_goal(state: GameState, new_wall: Wall) -> bool:
    """Tentatively add the wall and search a route to the goal row for each pawn on the board."""
    walls = (*state.walls, new_wall)
    return all(
        has_path_to_goal(walls, player.position, player.goal_row)
        for player in state.players
    )
