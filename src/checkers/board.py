"""The Game board: the configuration of pieces on the 8x8 grid."""

from collections import Counter
from dataclasses import dataclass
from typing import Self

from src.checkers.pieces import Piece, PieceType, Side
from src.checkers.square import BOARD_DIMENSIONS, Square, all_squares

# Rows holding each side's men at the start of the game: [start, stop)
PLAYER_START_ROWS = range(0, 3)
BOT_START_ROWS = range(5, 8)


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def initial(cls) -> Self:
        """Standard starting position.

        Player men fill the dark squares of rows 0-2, bot men those of rows 5-7.
        Rows 3 and 4, and every light square, stay empty.
        """
        position: dict[Square, Piece] = {}
        for square in all_squares():
            if square.is_playable() and square.row in PLAYER_START_ROWS:
                position[square] = Piece(PieceType.MAN, Side.PLAYER)
            elif square.is_playable() and square.row in BOT_START_ROWS:
                position[square] = Piece(PieceType.MAN, Side.BOT)
            else:
                position[square] = Piece.empty()
        return cls(position)

    def to_rows(self) -> list[list[str]]:
        """Row-major grid of cell codes, as sent on the wire."""
        return [
            [self.piece(Square(row, col)).to_code() for col in range(BOARD_DIMENSIONS[1])]
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def count_pieces(self) -> dict[Side, int]:
        """Tally the pieces (men and kings) each side has on the board"""
        counts = Counter(
            piece.side for piece in self.position.values() if not piece.is_empty()
        )
        return {side: counts[side] for side in Side if side != Side.NONE}
