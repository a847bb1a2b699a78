"""Implementation of (Outcome)Repository using SQLAlchemy"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import OutcomeRecord
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive timestamps. Stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLOutcomeRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save_game(self, winner: str) -> OutcomeRecord:
        """Append the outcome of a finished game and return the stored record."""
        game_db = DBGame(winner=winner)
        try:
            self.db.add(game_db)
            self.db.commit()
            self.db.refresh(game_db)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to store outcome %r.", winner)
            raise RepositoryError("Could not store game outcome.") from exc
        return self._to_model(game_db)

    def list_outcomes(self) -> list[OutcomeRecord]:
        """All outcomes ever recorded, in insertion order."""
        query = select(DBGame).order_by(DBGame.id)
        try:
            games_db = self.db.scalars(query).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to read stored outcomes.")
            raise RepositoryError("Could not read game outcomes.") from exc
        return [self._to_model(game_db) for game_db in games_db]

    def _to_model(self, game_db: DBGame) -> OutcomeRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return OutcomeRecord(
            winner=game_db.winner, created_at=_as_utc(game_db.created_at)
        )
