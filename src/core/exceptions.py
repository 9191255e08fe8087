"""
Custom exceptions shared by all layers.

Every rules exception remembers which rule got violated, so a caller can show the reason instead of just "no".
"""

from typing import Optional

from src.core.shared_types import Violation


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game."""

    default_violation: Optional[Violation] = None

    def __init__(self, message: str, violation: Optional[Violation] = None) -> None:
        super().__init__(message)
        self.violation = violation if violation is not None else self.default_violation


class GameStateError(GameError):
    """The game is not in a status that allows the requested action."""

    default_violation = Violation.GAME_NOT_ACTIVE


class NotYourTurnError(GameError):
    default_violation = Violation.NOT_YOUR_TURN


class UnknownPlayerError(GameError):
    default_violation = Violation.UNKNOWN_PLAYER


class IllegalMoveError(GameError):
    """Pawn move rejected by the move validator. The violation tells which check failed."""


class IllegalWallError(GameError):
    """Wall placement rejected by the wall validator. The violation tells which check failed."""


class InvalidRequestError(GameError):
    """Malformed request data. Raised from pydantic validators as is (pydantic only wraps ValueError / AssertionError)."""


class RepositoryError(GameError):
    """Record could not be found / stored."""


class ConcurrentUpdateError(GameError):
    """The stored game changed since the caller last read it."""
