"""Implementation of (Game)Repository using SQLAlchemy"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from src.core.exceptions import ConcurrentUpdateError
from src.core.models import GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        logger.debug("No game stored with id %s", game_id)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + game ID (the id the rules engine generated)."""

        game_id = UUID(game.game_id)
        game_db = DBGame(
            id=game_id,
            status=game.status,
            player1=game.player1,
            player2=game.player2,
            current_turn=game.current_turn,
            winner=game.winner,
            walls=game.walls,
            moves=game.moves,
            version=0,
            created_at=datetime.fromisoformat(game.created_at),
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        logger.debug("Stored new game %s", game_id)
        return self._to_model(game_db), game_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the stored snapshot and bump its version.

        The model must carry the version it was read at: if somebody else wrote in between, the update is refused.
        """
        # compare and bump the version in the same statement, so two writers can never both pass the check
        query = (
            update(DBGame)
            .where(DBGame.id == game_id, DBGame.version == game.version)
            .values(
                status=game.status,
                player1=game.player1,
                player2=game.player2,
                current_turn=game.current_turn,
                winner=game.winner,
                walls=game.walls,
                moves=game.moves,
                version=DBGame.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(query)
        if result.rowcount == 0:
            self.db.rollback()
            game_db = self._fetch_game(game_id)
            if not game_db:
                return None
            raise ConcurrentUpdateError(
                f"Game {game_id} changed in the meantime (stored version {game_db.version}, update based on {game.version})."
            )
        self.db.commit()

        game_db = self._fetch_game(game_id)
        assert game_db is not None
        logger.debug("Updated game %s to version %d", game_id, game_db.version)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            game_id=str(game_db.id),
            status=game_db.status,
            created_at=self._as_utc(game_db.created_at).isoformat(),
            player1=game_db.player1,
            player2=game_db.player2,
            current_turn=game_db.current_turn,
            winner=game_db.winner,
            walls=list(game_db.walls),
            moves=list(game_db.moves),
            version=game_db.version,
        )

    @staticmethod
    def _as_utc(moment: datetime) -> datetime:
        """SQLite hands back naive datetimes. Everything gets stored in UTC, so just put the timezone back."""
        if moment.tzinfo is None:
            return moment.replace(tzinfo=timezone.utc)
        return moment
