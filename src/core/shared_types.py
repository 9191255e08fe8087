"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Violation(StrEnum):
    """The rule a rejected action broke. Surfaced to the caller so it can explain the rejection to a user."""

    UNKNOWN_PLAYER = "unknown player"
    NOT_YOUR_TURN = "not your turn"
    GAME_NOT_ACTIVE = "game not active"
    OUT_OF_BOUNDS = "out of bounds"
    OCCUPIED = "occupied"
    ILLEGAL_STEP = "illegal step"
    BLOCKED = "blocked"
    NO_WALLS_REMAINING = "no walls remaining"
    DUPLICATE_WALL = "duplicate wall"
    INTERSECTING_WALL = "intersecting wall"
    PATH_BLOCKED = "path blocked"
    GAME_ALREADY_FULL = "game already full"
    GAME_NOT_JOINABLE = "game not joinable"
