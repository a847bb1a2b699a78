"""
The GameState is the entrypoint into the domain layer for the service layer.

Only the starting state is produced here. There is no rules engine: legality of moves,
captures, promotion and the bot's reply are not implemented.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.board import Board
from src.core.models import GameStateModel
from src.core.shared_types import Outcome, Turn


@dataclass
class GameState:
    board: Board
    current_turn: Turn
    game_over: bool
    winner: Optional[Outcome] = None

    @classmethod
    def new_game(cls) -> Self:
        """Fresh game: starting position, player moves first."""
        return cls(
            board=Board.initial(),
            current_turn=Turn.PLAYER,
            game_over=False,
            winner=None,
        )

    def to_model(self) -> GameStateModel:
        """Convert to the transport model used by the Service layer."""
        return GameStateModel(
            board=self.board.to_rows(),
            current_turn=str(self.current_turn),
            game_over=self.game_over,
            winner=str(self.winner) if self.winner is not None else None,
        )


def initialize_board() -> GameState:
    """Deterministic, side-effect free: every call returns an identical new game."""
    return GameState.new_game()
