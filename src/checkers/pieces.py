"""Defines the pieces of checkers and their wire codes"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.shared_types import PieceCode


class PieceType(Enum):
    EMPTY = auto()
    MAN = auto()
    KING = auto()


class Side(Enum):
    NONE = auto()
    PLAYER = auto()
    BOT = auto()


# lower case: men, upper case: kings
PIECE_TO_CODE: dict[tuple[PieceType, Side], PieceCode] = {
    (PieceType.EMPTY, Side.NONE): PieceCode.EMPTY,
    (PieceType.MAN, Side.PLAYER): PieceCode.PLAYER,
    (PieceType.MAN, Side.BOT): PieceCode.BOT,
    (PieceType.KING, Side.PLAYER): PieceCode.PLAYER_KING,
    (PieceType.KING, Side.BOT): PieceCode.BOT_KING,
}


@dataclass
class Piece:
    type: PieceType
    side: Side

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Side.NONE)

    def to_code(self) -> str:
        return str(PIECE_TO_CODE[(self.type, self.side)])

    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY
