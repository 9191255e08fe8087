"""
Reachability on the board.

Breadth-first search over the open-edge graph: two orthogonally adjacent cells are connected unless a wall lies on the edge between them.
Pawns are ignored on purpose, they move out of the way eventually, walls never do.
"""

from collections import deque
from typing import Iterable, Optional

from src.quoridor.position import Position
from src.quoridor.walls import Wall, wall_blocks


def open_neighbours(position: Position, walls: Iterable[Wall]) -> list[Position]:
    """Cells reachable from the given position with a single step."""
    walls = tuple(walls)
    return [
        neighbour
        for neighbour in position.neighbours()
        if neighbour.is_within_bounds() and not wall_blocks(walls, position, neighbour)
    ]


def shortest_path(
    walls: Iterable[Wall], start: Position, goal_row: int
) -> Optional[list[Position]]:
    """
    BFS from `start` until any cell on `goal_row` is found.
    ---

    Returns the cells visited along the way (start and goal cell included), or None if the goal row cannot be reached.
    """
    walls = tuple(walls)
    came_from: dict[Position, Optional[Position]] = {start: None}
    queue: deque[Position] = deque([start])

    while queue:
        cell = queue.popleft()
        if cell.row == goal_row:
            return _walk_back(came_from, cell)

        for neighbour in open_neighbours(cell, walls):
            if neighbour in came_from:
                continue
            came_from[neighbour] = cell
            queue.append(neighbour)

    return None


def shortest_path_length(
    walls: Iterable[Wall], start: Position, goal_row: int
) -> Optional[int]:
    """Number of steps needed to reach the goal row (0 if already on it)."""
    path = shortest_path(walls, start, goal_row)
    if path is None:
        return None
    return len(path) - 1


def has_path_to_goal(walls: Iterable[Wall], start: Position, goal_row: int) -> bool:
    return shortest_path(walls, start, goal_row) is not None


def _walk_back(
    came_from: dict[Position, Optional[Position]], end: Position
) -> list[Position]:
    path: list[Position] = [end]
    previous = came_from[end]
    while previous is not None:
        path.append(previous)
        previous = came_from[previous]
    path.reverse()
    return path
