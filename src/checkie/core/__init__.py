"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Color, Rules, parse_square

    board = Rules.new_game()
    for move in Rules.legal_moves(board, Color.WHITE):
        print(move)
    outcome = Rules.submit_move(
        board, Color.WHITE, parse_square("b3"), parse_square("a4")
    )
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GameEndReason, GameResult, Rank, RejectionReason
from checkie.core.errors import (
    ChainViolation,
    DestinationOccupied,
    GameFinished,
    IllegalMove,
    MalformedSquare,
    MoveRejected,
    NotADarkSquare,
    NotYourPiece,
)
from checkie.core.geometry import (
    are_enemies,
    belongs_to,
    diagonal_directions,
    forward_direction,
    in_bounds,
    is_dark_square,
)
from checkie.core.move import Move, MoveOutcome
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    board_from_diagram,
    board_to_diagram,
    parse_move_text,
    parse_square_token,
    split_move_text,
)
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "Rank",
    "RejectionReason",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Geometry
    "are_enemies",
    "belongs_to",
    "diagonal_directions",
    "forward_direction",
    "in_bounds",
    "is_dark_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Rules",
    # Rejections
    "ChainViolation",
    "DestinationOccupied",
    "GameFinished",
    "IllegalMove",
    "MalformedSquare",
    "MoveRejected",
    "NotADarkSquare",
    "NotYourPiece",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
    "parse_move_text",
    "parse_square_token",
    "split_move_text",
]
