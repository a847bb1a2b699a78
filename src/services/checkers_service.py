"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging

from src.api.models import (
    GameRecordResponse,
    GameStateResponse,
    MoveRequest,
    MoveResponse,
    RecordGameRequest,
    WinRecordResponse,
)
from src.checkers.game import initialize_board
from src.checkers.outcomes import compute_win_record
from src.checkers.pieces import Side
from src.core.exceptions import (
    AggregationUnavailableError,
    MoveNotImplementedError,
    RepositoryError,
)
from src.core.models import GameStateModel
from src.db.repository import OutcomeRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for checkers game."""

    def __init__(self, repository: OutcomeRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def new_game(self) -> GameStateResponse:
        """Player requested a fresh board. Nothing is persisted until the game is finished."""
        game = initialize_board()
        counts = game.board.count_pieces()
        logger.info(
            "New game started: %d player and %d bot pieces.",
            counts[Side.PLAYER],
            counts[Side.BOT],
        )
        game_model = game.to_model()
        return self._create_game_state_response(game_model)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Move validation and the bot opponent do not exist yet: refuse explicitly rather than guess the rules."""
        logger.info(
            "Rejected move %s -> %s: no rules engine.",
            request.move.from_square,
            request.move.to_square,
        )
        raise MoveNotImplementedError("Move validation is not implemented")

    def record_game(self, request: RecordGameRequest) -> GameRecordResponse:
        """Store the outcome of a finished game."""
        stored = self.repo.save_game(str(request.winner))
        logger.info("Recorded finished game, winner=%s.", stored.winner)
        return GameRecordResponse(winner=stored.winner, created_at=stored.created_at)

    def win_record(self) -> WinRecordResponse:
        """Aggregate all recorded outcomes into wins / losses / draws."""
        try:
            records = self.repo.list_outcomes()
        except RepositoryError as exc:
            raise AggregationUnavailableError("Win record unavailable") from exc

        record = compute_win_record(records)
        return WinRecordResponse(
            wins=record.wins, losses=record.losses, draws=record.draws
        )

    # -- Internal helpers --
    def _create_game_state_response(self, model: GameStateModel) -> GameStateResponse:
        """Convert info in GameStateModel to a GameStateResponse."""
        return GameStateResponse(
            board=model.board,
            current_turn=model.current_turn,
            game_over=model.game_over,
            winner=model.winner,
        )
