"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Quoridor is played on 9x9 cells. Rows and columns are both numbered 0-8.
BOARD_SIZE = 9

Vector = tuple[int, int]

# up, down, left, right (in that order, so generated moves come out in a predictable order)
ORTHOGONAL_STEPS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def step(self, vector: Vector) -> Position:
        dr, dc = vector
        return Position(self.row + dr, self.col + dc)

    def neighbours(self) -> list[Position]:
        """Orthogonally adjacent cells. NOTE: can fall off the board, callers filter on bounds."""
        return [self.step(vector) for vector in ORTHOGONAL_STEPS]

    def manhattan_distance(self, other: Position) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def is_single_step_to(self, other: Position) -> bool:
        """Exactly one unit up/down/left/right. Diagonal and zero-length steps do not count."""
        return self.manhattan_distance(other) == 1


def in_bounds(position: Position) -> bool:
    return position.is_within_bounds()
