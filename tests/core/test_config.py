"""Unit tests for src/core/config.py and src/db/database.py"""

import logging

import pytest
from sqlalchemy import StaticPool, create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import PACKAGE_LOGGER, configure_logging
from src.db import database
from src.db.database import get_db


def test_configure_logging_sets_package_level() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous = logger.level
    try:
        configure_logging("debug")
        assert logger.level == logging.DEBUG
        assert logging.getLogger("src.services.quoridor_service").getEffectiveLevel() == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_get_db_creates_tables_and_yields_a_session(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the module at a fresh in-memory database, so no database file gets touched."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=engine))
    assert not inspect(engine).has_table("games")

    sessions = get_db()
    db = next(sessions)
    assert isinstance(db, Session)
    assert inspect(engine).has_table("games")
    sessions.close()
