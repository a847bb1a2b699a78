"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Type aliases to make the models easier to read
CellCode = str
WinnerName = str


@dataclass
class GameStateModel:
    """Transport-safe representation of a checkers game state."""

    board: list[list[CellCode]]
    current_turn: str
    game_over: bool
    winner: Optional[WinnerName] = None


@dataclass(frozen=True)
class OutcomeRecord:
    """A persisted outcome of a finished game. Winner is None if the stored value was NULL."""

    winner: Optional[WinnerName]
    created_at: datetime


@dataclass(frozen=True)
class WinRecord:
    wins: int = 0
    losses: int = 0
    draws: int = 0
