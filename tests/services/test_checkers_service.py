"""Unit tests for src/services/checkers_service.py"""

import logging
from datetime import datetime, timezone
from typing import Generator

import pytest

from src.core.exceptions import (
    AggregationUnavailableError,
    GameError,
    MoveNotImplementedError,
    RepositoryError,
)
from src.core.models import OutcomeRecord
from src.core.shared_types import Outcome, Turn
from src.services.checkers_service import (
    CheckersService,
    GameRecordResponse,
    GameStateResponse,
    MoveRequest,
    RecordGameRequest,
    WinRecordResponse,
)


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the OutcomeRepository using a list of records."""

    def __init__(self) -> None:
        self._records: list[OutcomeRecord] = []

    def save_game(self, winner: str) -> OutcomeRecord:
        record = OutcomeRecord(winner=winner, created_at=datetime.now(timezone.utc))
        self._records.append(record)
        return record

    def list_outcomes(self) -> list[OutcomeRecord]:
        return list(self._records)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._records.clear()


class BrokenRepository:
    """Storage that is unreachable."""

    def save_game(self, winner: str) -> OutcomeRecord:
        raise RepositoryError("connection refused")

    def list_outcomes(self) -> list[OutcomeRecord]:
        raise RepositoryError("connection refused")


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


# --- SERVICE - NEW GAME ----
def test_new_game(mock_repository: MockRepository) -> None:
    """Fresh board is returned and nothing is persisted."""
    service = CheckersService(mock_repository)
    response = service.new_game()

    assert isinstance(response, GameStateResponse)
    assert response.current_turn == Turn.PLAYER
    assert response.game_over is False
    assert response.winner is None
    assert len(response.board) == 8
    assert sum(row.count("r") for row in response.board) == 12
    assert sum(row.count("b") for row in response.board) == 12
    assert mock_repository.list_outcomes() == []


def test_new_game_logs_piece_counts(
    mock_repository: MockRepository, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="src.services.checkers_service"):
        CheckersService(mock_repository).new_game()
    assert "12 player and 12 bot pieces" in caplog.text


def test_new_game_json_shape(mock_repository: MockRepository) -> None:
    """camelCase keys on the wire; winner left out while unset."""
    response = CheckersService(mock_repository).new_game()
    payload = response.model_dump(by_alias=True, exclude_none=True)
    assert set(payload) == {"board", "currentTurn", "gameOver"}
    assert payload["currentTurn"] == "player"


# --- SERVICE - RECORD GAME ----
@pytest.mark.parametrize("winner", list(Outcome))
def test_record_game(mock_repository: MockRepository, winner: Outcome) -> None:
    service = CheckersService(mock_repository)
    response = service.record_game(RecordGameRequest(winner=winner))

    assert isinstance(response, GameRecordResponse)
    assert response.winner == winner
    [stored] = mock_repository.list_outcomes()
    assert stored.winner == winner.value


def test_record_game_propagates_storage_errors() -> None:
    service = CheckersService(BrokenRepository())
    with pytest.raises(RepositoryError):
        service.record_game(RecordGameRequest(winner=Outcome.PLAYER))


# --- SERVICE - WIN RECORD ----
def test_win_record_empty(mock_repository: MockRepository) -> None:
    response = CheckersService(mock_repository).win_record()
    assert response == WinRecordResponse(wins=0, losses=0, draws=0)


def test_win_record_after_games(mock_repository: MockRepository) -> None:
    service = CheckersService(mock_repository)
    for winner in [Outcome.PLAYER, Outcome.BOT, Outcome.DRAW, Outcome.PLAYER]:
        service.record_game(RecordGameRequest(winner=winner))

    assert service.win_record() == WinRecordResponse(wins=2, losses=1, draws=1)


def test_win_record_skips_unknown_rows(mock_repository: MockRepository) -> None:
    """Rows stored by another writer with junk values are ignored, not fatal."""
    mock_repository.save_game("player")
    mock_repository.save_game("unknown")
    mock_repository.save_game("bot")

    response = CheckersService(mock_repository).win_record()
    assert response == WinRecordResponse(wins=1, losses=1, draws=0)


def test_win_record_unavailable() -> None:
    """Storage failures surface as a distinct condition, chained to the original error."""
    service = CheckersService(BrokenRepository())
    with pytest.raises(AggregationUnavailableError) as exc_info:
        service.win_record()
    assert isinstance(exc_info.value.__cause__, RepositoryError)


# --- SERVICE - MAKE MOVE ----
def test_make_move_not_implemented(mock_repository: MockRepository) -> None:
    request = MoveRequest.model_validate(
        {"move": {"from": {"row": 2, "col": 1}, "to": {"row": 3, "col": 0}}}
    )
    service = CheckersService(mock_repository)

    # Test any top-level custom exception is raised
    with pytest.raises(GameError):
        service.make_move(request)
    with pytest.raises(MoveNotImplementedError):
        service.make_move(request)
    assert mock_repository.list_outcomes() == []
