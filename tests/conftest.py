"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.quoridor.game import join, new_game
from src.quoridor.state import GameState

PLAYER_1 = "player_1"
PLAYER_2 = "player_2"

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def waiting_game() -> GameState:
    """Freshly created game: only player 1 registered."""
    return new_game(PLAYER_1, "Alice")


@pytest.fixture
def active_game(waiting_game: GameState) -> GameState:
    """Both players registered, pawns on their starting cells, player 1 to move."""
    return join(waiting_game, PLAYER_2, "Bob")


@pytest.fixture
def db_session_other(db_session_repo: Session) -> Generator[Session, None, None]:
    """A second connection to the same test database, e.g. a concurrent request."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
