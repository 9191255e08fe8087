"""
Pawn movement rules

A pawn moves a single cell up, down, left or right. It can not enter the opponent's cell and can not cross a wall.
(No jumping over the opponent.)

Whose turn it is gets checked later by the dispatcher in game.py
"""

from typing import Optional

from src.core.shared_types import Violation
from src.quoridor.position import Position
from src.quoridor.state import GameState, occupied_by_opponent
from src.quoridor.walls import wall_blocks


def check_move(state: GameState, player_id: str, target: Position) -> Optional[Violation]:
    """
    Find the first rule the move breaks
    ----

    1. the player must be part of the game
    2. target must be on the board
    3. target must not hold the opponent's pawn
    4. target must be exactly one orthogonal step away
    5. no wall on the edge being crossed

    Returns None when the move is legal.
    """
    player = state.player(player_id)
    if player is None:
        return Violation.UNKNOWN_PLAYER

    if not target.is_within_bounds():
        return Violation.OUT_OF_BOUNDS

    if occupied_by_opponent(state, player_id, target):
        return Violation.OCCUPIED

    if not player.position.is_single_step_to(target):
        return Violation.ILLEGAL_STEP

    if wall_blocks(state.walls, player.position, target):
        return Violation.BLOCKED

    return None


def is_valid_move(state: GameState, player_id: str, target: Position) -> bool:
    return check_move(state, player_id, target) is None


def valid_moves(state: GameState, player_id: str) -> list[Position]:
    """Adjacent cells the player could move to. Meant for highlighting in a UI, the dispatcher re-checks anyway."""
    player = state.player(player_id)
    if player is None:
        return []
    return [
        target
        for target in player.position.neighbours()
        if is_valid_move(state, player_id, target)
    ]
