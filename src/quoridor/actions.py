"""The five things a caller can ask the dispatcher to do with a game"""

from dataclasses import dataclass
from typing import Union

from src.quoridor.position import Position
from src.quoridor.walls import Wall


@dataclass(frozen=True)
class Join:
    player_id: str
    username: str


@dataclass(frozen=True)
class MovePawn:
    player_id: str
    position: Position


@dataclass(frozen=True)
class PlaceWall:
    player_id: str
    wall: Wall


@dataclass(frozen=True)
class EndTurn:
    pass


@dataclass(frozen=True)
class GameOver:
    """Out-of-band end of the game (resignation, timeout)"""

    winner_id: str


Action = Union[Join, MovePawn, PlaceWall, EndTurn, GameOver]
