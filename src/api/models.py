"""Requests and Response models"""

from datetime import datetime
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Outcome, Turn


class CamelModel(BaseModel):
    """JSON field names are camelCase on the wire; python code may use either name."""

    model_config = ConfigDict(populate_by_name=True)


# --- REQUEST MODELS ---
class Position(BaseModel):
    row: int
    col: int

    @model_validator(mode="after")
    def validate_within_board(self) -> Self:
        if not Square(self.row, self.col).is_within_bounds():
            raise InvalidRequestError(
                f"Position (row={self.row}, col={self.col}) is off the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )
        return self


class Move(CamelModel):
    from_square: Position = Field(alias="from")
    to_square: Position = Field(alias="to")


class MoveRequest(BaseModel):
    move: Move


class RecordGameRequest(BaseModel):
    winner: Outcome

    @field_validator("winner", mode="before")
    @classmethod
    def validate_winner(cls, value: Any) -> Any:
        known = {outcome.value for outcome in Outcome}
        if not isinstance(value, str) or value not in known:
            raise InvalidRequestError(
                f"Cannot interpret winner: {value!r}. Pick one from {', '.join(Outcome)}."
            )
        return value


# --- RESPONSE MODELS ---
class GameStateResponse(CamelModel):
    board: list[list[str]]
    current_turn: Turn = Field(alias="currentTurn")
    game_over: bool = Field(alias="gameOver")
    winner: Optional[Outcome] = None


class MoveResponse(CamelModel):
    """Declared shape of a move reply. The endpoint currently answers 501 instead."""

    game_state: GameStateResponse = Field(alias="gameState")
    bot_move: Optional[Move] = Field(default=None, alias="botMove")


class WinRecordResponse(BaseModel):
    wins: int
    losses: int
    draws: int


class GameRecordResponse(CamelModel):
    winner: Outcome
    created_at: datetime = Field(alias="createdAt")
