"""Protocol repository: the storage collaborator injected into the Service (SQLAlchemy implementation in sql_repository.py)"""

from typing import Protocol

from src.core.models import OutcomeRecord


class OutcomeRepository(Protocol):
    """Append-only store of finished game outcomes"""

    def save_game(self, winner: str) -> OutcomeRecord:
        """Append the outcome of a finished game and return the stored record."""
        ...

    def list_outcomes(self) -> list[OutcomeRecord]:
        """All outcomes ever recorded, in insertion order."""
        ...
