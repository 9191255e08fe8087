"""
The immutable snapshot of a game.

Transitions (see game.py) never touch an existing GameState, they build a new one with `dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from src.core.shared_types import Status
from src.quoridor.player import Player
from src.quoridor.position import Position
from src.quoridor.walls import Wall


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class GameState:
    id: str
    status: Status
    player1: Player
    player2: Optional[Player] = None
    current_turn: Optional[str] = None
    winner: Optional[str] = None
    walls: tuple[Wall, ...] = ()
    moves: tuple[str, ...] = ()  # notation of every accepted move / wall, in order
    created_at: datetime = field(default_factory=utc_now)

    @property
    def players(self) -> list[Player]:
        return [player for player in (self.player1, self.player2) if player is not None]

    def player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def opponent(self, player_id: str) -> Optional[Player]:
        """The other player. None for an unknown identity, or while nobody joined yet."""
        if player_id == self.player1.id:
            return self.player2
        if self.player2 is not None and player_id == self.player2.id:
            return self.player1
        return None

    def is_player(self, player_id: str) -> bool:
        return self.player(player_id) is not None

    def with_player(self, player: Player) -> GameState:
        """Swap in an updated version of one of the two players (matched by id)."""
        if player.id == self.player1.id:
            return replace(self, player1=player)
        return replace(self, player2=player)


def occupied_by_opponent(state: GameState, player_id: str, position: Position) -> bool:
    opponent = state.opponent(player_id)
    return opponent is not None and opponent.position == position
