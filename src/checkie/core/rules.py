"""Checkers rules: move application, promotion, game status, turn steps.

All functions are stateless over a :class:`Board`; turn bookkeeping
(whose move it is, which piece is mid-chain) lives in
:class:`checkie.game.state.GameState`.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color, GameEndReason, GameResult
from checkie.core.errors import (
    ChainViolation,
    DestinationOccupied,
    IllegalMove,
    MalformedSquare,
    NotADarkSquare,
    NotYourPiece,
)
from checkie.core.geometry import belongs_to, is_dark_square
from checkie.core.move import Move, MoveOutcome
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import Square, is_valid_square, rank_of, square_name


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def new_game() -> Board:
        return Board.initial()

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves(color)

    # ── Move applier ─────────────────────────────────────────────────────

    @staticmethod
    def apply_move(board: Board, move: Move) -> None:
        """Apply a generated move. Legality is the caller's responsibility."""
        board.relocate(move.from_sq, move.to_sq, move.captured_sq)

    @staticmethod
    def maybe_promote(board: Board, sq: Square) -> bool:
        """Crown a man standing on its far row. Returns True if crowned."""
        piece = board[sq]
        if piece is None or piece.is_king:
            return False
        if rank_of(sq) != piece.color.promotion_rank:
            return False
        board[sq] = piece.crowned()
        return True

    # ── Game status ──────────────────────────────────────────────────────

    @staticmethod
    def end_reason(board: Board, color: Color) -> GameEndReason | None:
        """Why the game is over with *color* to move, or None if it is not."""
        if board.count(Color.WHITE) == 0 or board.count(Color.BLACK) == 0:
            return GameEndReason.NO_PIECES
        if not MoveGenerator(board).has_legal_moves(color):
            return GameEndReason.NO_LEGAL_MOVES
        return None

    @staticmethod
    def game_status(board: Board, color: Color) -> GameResult:
        """Current result with *color* to move."""
        if board.count(Color.WHITE) == 0:
            return GameResult.BLACK_WINS
        if board.count(Color.BLACK) == 0:
            return GameResult.WHITE_WINS
        if not MoveGenerator(board).has_legal_moves(color):
            return GameResult.win_for(color.opposite)
        return GameResult.IN_PROGRESS

    # ── Turn steps ───────────────────────────────────────────────────────

    @staticmethod
    def validate_move(
        board: Board, color: Color, from_sq: Square, to_sq: Square
    ) -> Move:
        """Return the generated move matching *from_sq* → *to_sq*.

        Raises a :class:`~checkie.core.errors.MoveRejected` subclass naming
        the first failed check.
        """
        _require_square(from_sq)
        _require_square(to_sq)
        if not is_dark_square(to_sq):
            raise NotADarkSquare(
                f"{square_name(to_sq)} is a light square; move to dark squares only"
            )
        if not belongs_to(board[from_sq], color):
            raise NotYourPiece(f"The piece on {square_name(from_sq)} is not yours")
        if not board.is_empty(to_sq):
            raise DestinationOccupied(f"{square_name(to_sq)} is not empty")

        legal = MoveGenerator(board).generate_legal_moves(color)
        for move in legal:
            if move.matches(from_sq, to_sq):
                return move

        attempted = f"{square_name(from_sq)}-{square_name(to_sq)}"
        if legal and legal[0].is_capture:
            raise IllegalMove(f"Illegal move {attempted}: a capture is mandatory")
        raise IllegalMove(f"Illegal move {attempted}")

    @staticmethod
    def submit_move(
        board: Board, color: Color, from_sq: Square, to_sq: Square
    ) -> MoveOutcome:
        """Validate and apply the first move of a turn."""
        move = Rules.validate_move(board, color, from_sq, to_sq)
        Rules.apply_move(board, move)
        return Rules._settle(board, color, move)

    @staticmethod
    def continue_capture(
        board: Board, color: Color, active_sq: Square, to_sq: Square
    ) -> MoveOutcome:
        """Apply a forced follow-up jump by the piece on *active_sq*."""
        _require_square(active_sq)
        _require_square(to_sq)
        candidates = MoveGenerator(board).capture_moves_from(active_sq, color)
        if not candidates:
            raise IllegalMove(f"No capture continues from {square_name(active_sq)}")

        for move in candidates:
            if move.to_sq == to_sq:
                Rules.apply_move(board, move)
                return Rules._settle(board, color, move)

        options = ", ".join(square_name(m.to_sq) for m in candidates)
        raise ChainViolation(
            f"You must continue capturing from {square_name(active_sq)}: {options}"
        )

    @staticmethod
    def _settle(board: Board, color: Color, move: Move) -> MoveOutcome:
        # Only the piece that just jumped may continue; other pieces of
        # the side are not re-examined mid-chain.
        if move.is_capture:
            follow_ups = MoveGenerator(board).capture_moves_from(move.to_sq, color)
            if follow_ups:
                return MoveOutcome(
                    move=move,
                    turn_complete=False,
                    active_square=move.to_sq,
                    continuations=tuple(m.to_sq for m in follow_ups),
                )
        promoted = Rules.maybe_promote(board, move.to_sq)
        return MoveOutcome(move=move, turn_complete=True, promoted=promoted)


def _require_square(sq: Square) -> None:
    if not isinstance(sq, int) or not is_valid_square(sq):
        raise MalformedSquare(f"Not a board square: {sq!r}")
