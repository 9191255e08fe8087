"""
Walls and the edges they cover.

A wall sits on the grid lines between cells and is two cells long.
Its anchor (row, col) is interpreted differently per orientation:

* horizontal wall at (r, c): lies on the line above row r, blocks stepping between rows r-1 and r in columns c and c+1.
* vertical wall at (r, c): lies on the line left of column c, blocks stepping between columns c-1 and c in rows r and r+1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable
from uuid import uuid4

from src.core.shared_types import Orientation
from src.quoridor.position import BOARD_SIZE, Position

# (row_range, col_range) allowed for the anchor of a wall, inclusive on both ends
ANCHOR_BOUNDS: dict[Orientation, tuple[tuple[int, int], tuple[int, int]]] = {
    Orientation.HORIZONTAL: ((0, BOARD_SIZE - 1), (0, BOARD_SIZE - 2)),
    Orientation.VERTICAL: ((0, BOARD_SIZE - 2), (0, BOARD_SIZE - 1)),
}


def _new_wall_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Wall:
    position: Position
    orientation: Orientation
    # identity does not take part in equality: two walls on the same spot are the same wall for the rules
    id: str = field(default_factory=_new_wall_id, compare=False)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    def key(self) -> tuple[int, int, Orientation]:
        return (self.position.row, self.position.col, self.orientation)

    def is_within_bounds(self) -> bool:
        (min_row, max_row), (min_col, max_col) = ANCHOR_BOUNDS[self.orientation]
        return (min_row <= self.position.row <= max_row) and (
            min_col <= self.position.col <= max_col
        )

    def blocks(self, from_position: Position, to_position: Position) -> bool:
        """Does this wall lie on the edge between two orthogonally adjacent cells?"""
        row, col = self.position.row, self.position.col
        if self.is_horizontal:
            if from_position.col != to_position.col:
                return False
            upper_row = min(from_position.row, to_position.row)
            lower_row = max(from_position.row, to_position.row)
            return (
                upper_row == row - 1
                and lower_row == row
                and from_position.col in (col, col + 1)
            )

        if from_position.row != to_position.row:
            return False
        left_col = min(from_position.col, to_position.col)
        right_col = max(from_position.col, to_position.col)
        return (
            left_col == col - 1
            and right_col == col
            and from_position.row in (row, row + 1)
        )

    def intersects(self, other: Wall) -> bool:
        """
        Only perpendicular walls can intersect. The vertical wall crosses through the horizontal wall's midpoint when

        vertical.row <= horizontal.row <= vertical.row + 1  and  vertical.col == horizontal.col + 1
        """
        if self.orientation == other.orientation:
            return False
        horizontal, vertical = (self, other) if self.is_horizontal else (other, self)
        h_row, h_col = horizontal.position.row, horizontal.position.col
        v_row, v_col = vertical.position.row, vertical.position.col
        return (v_row <= h_row <= v_row + 1) and (v_col == h_col + 1)


def wall_blocks(
    walls: Iterable[Wall], from_position: Position, to_position: Position
) -> bool:
    """True if any placed wall sits on the edge crossed by the single orthogonal step."""
    return any(wall.blocks(from_position, to_position) for wall in walls)
