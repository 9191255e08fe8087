"""
Contract for the Service layer.

Domain level data model of information representing a Game.
Only plain (JSON friendly) data in here, so the DB and API layers never have to import the rules engine.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

# Type aliases to make GameModel easier to read
PlayerRecord = dict[str, Any]
WallRecord = dict[str, Any]


@dataclass
class GameModel:
    """Quoridor specific data + game handling info (players, turn, etc.)"""

    game_id: str
    status: str
    created_at: str
    player1: PlayerRecord
    player2: Optional[PlayerRecord]
    current_turn: Optional[str]
    winner: Optional[str]
    walls: list[WallRecord] = field(default_factory=list)
    moves: list[str] = field(default_factory=list)
    version: int = 0
