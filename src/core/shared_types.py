"""
Type definitions used across layers
"""

from enum import StrEnum


class Turn(StrEnum):
    PLAYER = "player"
    BOT = "bot"


class Outcome(StrEnum):
    """Values stored in the `winner` column of a finished game."""

    PLAYER = "player"
    BOT = "bot"
    DRAW = "draw"


# --- Wire codes of the board cells. The domain layer has its own PieceType / Side enums in src/checkers/pieces.py
class PieceCode(StrEnum):
    EMPTY = ""
    PLAYER = "r"
    BOT = "b"
    PLAYER_KING = "R"
    BOT_KING = "B"
