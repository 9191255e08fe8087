"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status
from src.quoridor.notation import is_algebraic_cell, is_wall_notation

PlayerId = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_id: PlayerId
    player_name: str

    @field_validator("player_id", "player_name")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player identity and name cannot be blank.")
        return value


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_id: PlayerId
    player_name: str

    @field_validator("player_id", "player_name")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player identity and name cannot be blank.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class ValidMovesRequest(BaseModel):
    game_id: UUID
    player_id: PlayerId


class MoveRequest(BaseModel):
    game_id: UUID
    player_id: PlayerId
    to_cell: str
    expected_version: Optional[int] = None

    @field_validator("to_cell")
    @classmethod
    def validate_cell(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_algebraic_cell(value):
            raise InvalidRequestError(
                f"Cannot interpret to_cell: {value!r} as a valid cell name."
            )
        return value


class WallRequest(BaseModel):
    game_id: UUID
    player_id: PlayerId
    wall: str
    expected_version: Optional[int] = None

    @field_validator("wall")
    @classmethod
    def validate_wall(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_wall_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret wall: {value!r}. Expected a cell followed by 'h' or 'v', ex. 'e3h'."
            )
        return value


class ResignRequest(BaseModel):
    game_id: UUID
    player_id: PlayerId
    expected_version: Optional[int] = None


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PlayerResponse(BaseModel):
    player_id: PlayerId
    username: str
    cell: str
    walls_left: int
    goal_row: int
    distance_to_goal: Optional[int]


class GameResponse(BaseModel):
    game_id: UUID
    status: Status
    players: list[PlayerResponse]
    current_turn: Optional[PlayerId]
    winner: Optional[PlayerId]
    walls: list[str]
    move_history: list[str]
    version: int


class ValidMovesResponse(BaseModel):
    game_id: UUID
    player_id: PlayerId
    valid_moves: list[str]
