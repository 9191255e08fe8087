"""
Algebraic notation for Quoridor
---

Columns are lettered a-i (left to right), rows numbered 1-9 (top to bottom), so the cell (row=0, col=4) reads "e1".

* a pawn move is written as its target cell: "e2"
* a wall is written as its anchor cell followed by the orientation: "e3h", "d1v"
"""

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Orientation
from src.quoridor.position import BOARD_SIZE, Position
from src.quoridor.walls import Wall

COLUMN_LETTERS = "abcdefghi"[:BOARD_SIZE]
ORIENTATION_LETTERS: dict[str, Orientation] = {
    "h": Orientation.HORIZONTAL,
    "v": Orientation.VERTICAL,
}


def is_algebraic_cell(value: str) -> bool:
    if len(value) != 2:
        return False
    column, row = value[0], value[1]
    return column in COLUMN_LETTERS and row.isdigit() and 1 <= int(row) <= BOARD_SIZE


def position_from_algebraic(cell: str) -> Position:
    """'a1' - 'i9' get converted to (0,0) - (8,8)"""
    cell = cell.strip().lower()
    if not is_algebraic_cell(cell):
        raise InvalidRequestError(f"Cannot interpret {cell!r} as a cell on the board.")
    return Position(row=int(cell[1]) - 1, col=COLUMN_LETTERS.index(cell[0]))


def position_to_algebraic(position: Position) -> str:
    return f"{COLUMN_LETTERS[position.col]}{position.row + 1}"


def is_wall_notation(value: str) -> bool:
    return len(value) == 3 and is_algebraic_cell(value[:2]) and value[2] in ORIENTATION_LETTERS


def wall_from_notation(notation: str) -> Wall:
    """'e3h' -> horizontal wall anchored at (row=2, col=4)"""
    notation = notation.strip().lower()
    if not is_wall_notation(notation):
        raise InvalidRequestError(f"Cannot interpret {notation!r} as a wall.")
    return Wall(
        position=position_from_algebraic(notation[:2]),
        orientation=ORIENTATION_LETTERS[notation[2]],
    )


def wall_to_notation(wall: Wall) -> str:
    letter = "h" if wall.is_horizontal else "v"
    return f"{position_to_algebraic(wall.position)}{letter}"
