"""A pawn + the resources of the person playing it"""

from __future__ import annotations

from dataclasses import dataclass, replace

from src.quoridor.position import BOARD_SIZE, Position

WALLS_PER_PLAYER = 10

# Both pawns start on the middle column: player 1 on the top row, player 2 on the bottom row
START_COLUMN = BOARD_SIZE // 2
PLAYER1_START = Position(0, START_COLUMN)
PLAYER2_START = Position(BOARD_SIZE - 1, START_COLUMN)
PLAYER1_GOAL_ROW = BOARD_SIZE - 1
PLAYER2_GOAL_ROW = 0


@dataclass(frozen=True)
class Player:
    id: str
    username: str
    position: Position
    goal_row: int
    walls_left: int = WALLS_PER_PLAYER

    @classmethod
    def first(cls, player_id: str, username: str) -> Player:
        """The player creating the game. Starts on the top row, races to the bottom row."""
        return cls(player_id, username, PLAYER1_START, goal_row=PLAYER1_GOAL_ROW)

    @classmethod
    def second(cls, player_id: str, username: str) -> Player:
        """The player joining the game. Starts on the opposite edge."""
        return cls(player_id, username, PLAYER2_START, goal_row=PLAYER2_GOAL_ROW)

    def has_reached_goal(self) -> bool:
        return self.position.row == self.goal_row

    def moved_to(self, position: Position) -> Player:
        return replace(self, position=position)

    def with_one_wall_less(self) -> Player:
        return replace(self, walls_left=self.walls_left - 1)
