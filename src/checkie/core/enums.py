"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a man moving forward: White up the board, Black down."""
        return 1 if self is Color.WHITE else -1

    @property
    def promotion_rank(self) -> int:
        """Far row on which a man of this color is crowned."""
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank."""

    MAN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NO_PIECES = auto()
    NO_LEGAL_MOVES = auto()
    RESIGNATION = auto()


class RejectionReason(IntEnum):
    """Why a submitted move was refused."""

    MALFORMED_SQUARE = auto()
    NOT_A_DARK_SQUARE = auto()
    NOT_YOUR_PIECE = auto()
    DESTINATION_OCCUPIED = auto()
    ILLEGAL_MOVE = auto()
    CHAIN_VIOLATION = auto()
    GAME_OVER = auto()
