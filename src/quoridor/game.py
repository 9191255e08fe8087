"""
The dispatcher is the entrypoint into the domain layer for the service layer.
It validates an action against a snapshot of the game and produces the next snapshot -->
passes this on to the service layer, which takes care of storing it.

Every transition is pure: the GameState handed in is never modified, a rejected action raises and leaves nothing half applied.
"""

from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    IllegalWallError,
    NotYourTurnError,
    UnknownPlayerError,
)
from src.core.models import GameModel, PlayerRecord, WallRecord
from src.core.shared_types import Orientation, Status, Violation
from src.quoridor.actions import Action, EndTurn, GameOver, Join, MovePawn, PlaceWall
from src.quoridor.moves import check_move
from src.quoridor.notation import position_to_algebraic, wall_to_notation
from src.quoridor.player import Player
from src.quoridor.position import Position
from src.quoridor.state import GameState
from src.quoridor.wall_rules import check_wall_placement
from src.quoridor.walls import Wall

# Used when a Join arrives before any game exists (the host gets filled in later by the caller)
PLACEHOLDER_HOST_ID = "host-id"
PLACEHOLDER_HOST_NAME = "Host Player"


# --- INITIALIZATION ---
def new_game(player_id: str, username: str) -> GameState:
    """To start a new game. The creator becomes player 1 and waits for an opponent."""
    return GameState(
        id=str(uuid4()),
        status=Status.WAITING,
        player1=Player.first(player_id, username),
    )


def join(state: GameState, player_id: str, username: str) -> GameState:
    """Registering the 2nd player to an open game. Player 1 gets the first turn."""
    if state.player2 is not None:
        raise GameStateError(
            "Cannot join this game. It already has two players.",
            Violation.GAME_ALREADY_FULL,
        )
    if state.status != Status.WAITING:
        raise GameStateError(
            f"Cannot join this game. Game is not accepting new players. status: {state.status}",
            Violation.GAME_NOT_JOINABLE,
        )
    if player_id == state.player1.id:
        raise GameStateError(
            "Cannot join your own game.", Violation.GAME_NOT_JOINABLE
        )

    return replace(
        state,
        status=Status.ACTIVE,
        player2=Player.second(player_id, username),
        current_turn=state.player1.id,
    )


# --- TURNS ---
def move_pawn(state: GameState, player_id: str, position: Position) -> GameState:
    """
    Attempt to move a pawn
    -----

    1. game must be active and it must be your turn
    2. the move validator must accept the move
    3. move the pawn + record the move
    4. reaching your goal row ends the game, otherwise the opponent is up
    """
    _assert_can_act(state, player_id)

    violation = check_move(state, player_id, position)
    if violation is not None:
        raise IllegalMoveError(
            f"Move not allowed: ({position.row}, {position.col}) ({violation})",
            violation,
        )

    player = _require_player(state, player_id)
    moved = player.moved_to(position)
    after_move = replace(
        state.with_player(moved),
        moves=(*state.moves, position_to_algebraic(position)),
    )

    if moved.has_reached_goal():
        return _finish(after_move, winner_id=moved.id)
    return _pass_turn(after_move, player_id)


def place_wall(state: GameState, player_id: str, wall: Wall) -> GameState:
    """
    Attempt to place a wall
    -----

    1. game must be active and it must be your turn
    2. the wall validator must accept the wall (this includes the check that nobody gets locked in)
    3. pay one wall, put it on the board, record it
    4. the opponent is up
    """
    _assert_can_act(state, player_id)

    violation = check_wall_placement(state, player_id, wall)
    if violation is not None:
        raise IllegalWallError(
            f"Wall not allowed: {wall.orientation} at ({wall.position.row}, {wall.position.col}) ({violation})",
            violation,
        )

    player = _require_player(state, player_id)
    after_wall = replace(
        state.with_player(player.with_one_wall_less()),
        walls=(*state.walls, wall),
        moves=(*state.moves, wall_to_notation(wall)),
    )
    return _pass_turn(after_wall, player_id)


def end_turn(state: GameState) -> GameState:
    """Hand the turn to the other player without doing anything. Ignored unless the game is active."""
    if state.status != Status.ACTIVE or state.current_turn is None:
        return state
    return _pass_turn(state, state.current_turn)


def game_over(state: GameState, winner_id: str) -> GameState:
    """Force the end of the game (resignation / timeout are decided outside the rules engine).

    A finished game stays finished: its winner can not be replaced afterwards.
    """
    if state.status == Status.FINISHED:
        raise GameStateError(
            f"Game already finished. winner: {state.winner}", Violation.GAME_NOT_ACTIVE
        )
    if not state.is_player(winner_id):
        raise UnknownPlayerError(f"Cannot declare {winner_id!r} the winner. Not a player in this game.")
    return _finish(state, winner_id)


# --- DISPATCH ---
Transition = Callable[[GameState, Action], GameState]
TRANSITIONS: dict[type, Transition] = {
    Join: lambda state, action: join(state, action.player_id, action.username),
    MovePawn: lambda state, action: move_pawn(state, action.player_id, action.position),
    PlaceWall: lambda state, action: place_wall(state, action.player_id, action.wall),
    EndTurn: lambda state, action: end_turn(state),
    GameOver: lambda state, action: game_over(state, action.winner_id),
}


def apply_action(state: Optional[GameState], action: Action) -> GameState:
    """
    Single entrypoint: snapshot + action in, new snapshot out.

    Without a snapshot, only a Join makes sense: a waiting game for a placeholder host gets created first.
    """
    if state is None:
        if not isinstance(action, Join):
            raise GameStateError(f"No game to apply {type(action).__name__} to.")
        state = new_game(PLACEHOLDER_HOST_ID, PLACEHOLDER_HOST_NAME)

    transition = TRANSITIONS.get(type(action))
    if transition is None:
        raise GameStateError(f"Unknown action: {action!r}")
    return transition(state, action)


def winner_of(state: GameState) -> Optional[str]:
    """Whoever stands on their goal row. Independent of the status, handy to double check a stored game."""
    return next((p.id for p in state.players if p.has_reached_goal()), None)


# -- PRIVATE HELPERS ---
def _require_player(state: GameState, player_id: str) -> Player:
    player = state.player(player_id)
    if player is None:
        raise UnknownPlayerError(f"Player {player_id!r} is not part of this game.")
    return player


def _assert_can_act(state: GameState, player_id: str) -> None:
    """You can only move / place a wall in an active game, during your own turn."""
    if state.status != Status.ACTIVE:
        raise GameStateError(f"Game is not active. status: {state.status}")

    _require_player(state, player_id)

    if state.current_turn != player_id:
        raise NotYourTurnError(
            f"It is not your turn. Waiting for player {state.current_turn} to make a move first."
        )


def _pass_turn(state: GameState, player_id: str) -> GameState:
    opponent = state.opponent(player_id)
    return replace(state, current_turn=opponent.id if opponent else None)


def _finish(state: GameState, winner_id: str) -> GameState:
    return replace(state, status=Status.FINISHED, winner=winner_id, current_turn=None)


# --- CONVERSION FROM / TO THE BOUNDARY MODEL ---
def to_model(state: GameState, version: int = 0) -> GameModel:
    """Encode into a format the Service layer uses"""
    return GameModel(
        game_id=state.id,
        status=str(state.status),
        created_at=state.created_at.isoformat(),
        player1=_player_to_record(state.player1),
        player2=_player_to_record(state.player2) if state.player2 else None,
        current_turn=state.current_turn,
        winner=state.winner,
        walls=[_wall_to_record(wall) for wall in state.walls],
        moves=list(state.moves),
        version=version,
    )


def from_model(model: GameModel) -> GameState:
    """Define how to construct a GameState from the information the Service layer actually has"""

    # Validation
    if model.status not in [status.value for status in Status]:
        raise GameStateError(
            f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
        )

    return GameState(
        id=model.game_id,
        status=Status(model.status),
        created_at=datetime.fromisoformat(model.created_at),
        player1=_player_from_record(model.player1),
        player2=_player_from_record(model.player2) if model.player2 else None,
        current_turn=model.current_turn,
        winner=model.winner,
        walls=tuple(_wall_from_record(record) for record in model.walls),
        moves=tuple(model.moves),
    )


def _player_to_record(player: Player) -> PlayerRecord:
    return {
        "id": player.id,
        "username": player.username,
        "walls_left": player.walls_left,
        "position": {"row": player.position.row, "col": player.position.col},
        "goal_row": player.goal_row,
    }


def _player_from_record(record: PlayerRecord) -> Player:
    return Player(
        id=record["id"],
        username=record["username"],
        walls_left=record["walls_left"],
        position=Position(record["position"]["row"], record["position"]["col"]),
        goal_row=record["goal_row"],
    )


def _wall_to_record(wall: Wall) -> WallRecord:
    return {
        "id": wall.id,
        "row": wall.position.row,
        "col": wall.position.col,
        "orientation": str(wall.orientation),
    }


def _wall_from_record(record: WallRecord) -> Wall:
    return Wall(
        position=Position(record["row"], record["col"]),
        orientation=Orientation(record["orientation"]),
        id=record["id"],
    )
