"""Simple-move and capture generation under the mandatory-capture rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.geometry import (
    KING_DIRS,
    are_enemies,
    belongs_to,
    diagonal_directions,
    in_bounds,
)
from checkie.core.move import Move
from checkie.core.types import Square, make_square

if TYPE_CHECKING:
    from checkie.core.board import Board

Direction = tuple[int, int]


# -- Precomputed lookup tables ---------------------------------------------


def _build_steps() -> tuple[dict[Direction, Square], ...]:
    steps: list[dict[Direction, Square]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        targets: dict[Direction, Square] = {}
        for dr, df in KING_DIRS:
            af = file_idx + df
            ar = rank_idx + dr
            if in_bounds(af, ar):
                targets[(dr, df)] = make_square(af, ar)
        steps.append(targets)
    return tuple(steps)


def _build_jumps() -> tuple[dict[Direction, tuple[Square, Square]], ...]:
    jumps: list[dict[Direction, tuple[Square, Square]]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        targets: dict[Direction, tuple[Square, Square]] = {}
        for dr, df in KING_DIRS:
            lf = file_idx + 2 * df
            lr = rank_idx + 2 * dr
            if in_bounds(lf, lr):
                over = make_square(file_idx + df, rank_idx + dr)
                targets[(dr, df)] = (over, make_square(lf, lr))
        jumps.append(targets)
    return tuple(jumps)


_STEPS = _build_steps()
_JUMPS = _build_jumps()


class MoveGenerator:
    """Generates moves for one side on a :class:`Board`.

    Output order is deterministic: pieces in board scan order, then each
    piece's directions in the order given by ``diagonal_directions``.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """Captures if any piece of *color* can capture, else all simple moves.

        Capture detection scans the whole side, not a single piece, because
        mandatory capture binds every piece of the side to move.
        """
        captures = self.all_captures(color)
        if captures:
            return captures

        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.simple_moves_from(sq, color))
        return moves

    def all_captures(self, color: Color) -> list[Move]:
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.capture_moves_from(sq, color))
        return moves

    def has_legal_moves(self, color: Color) -> bool:
        return bool(self.generate_legal_moves(color))

    def capture_moves_from(self, sq: Square, color: Color) -> list[Move]:
        """Jumps available to the piece on *sq*; empty unless *color* owns it."""
        board = self._board
        piece = board[sq]
        if piece is None or not belongs_to(piece, color):
            return []

        moves: list[Move] = []
        jumps = _JUMPS[sq]
        for direction in diagonal_directions(piece):
            jump = jumps.get(direction)
            if jump is None:
                continue
            over, landing = jump
            if board.is_empty(landing) and are_enemies(piece, board[over]):
                moves.append(Move(sq, landing, over))
        return moves

    def simple_moves_from(self, sq: Square, color: Color) -> list[Move]:
        """One-step diagonal moves for the piece on *sq* into empty squares."""
        board = self._board
        piece = board[sq]
        if piece is None or not belongs_to(piece, color):
            return []

        moves: list[Move] = []
        steps = _STEPS[sq]
        for direction in diagonal_directions(piece):
            to_sq = steps.get(direction)
            if to_sq is not None and board.is_empty(to_sq):
                moves.append(Move(sq, to_sq))
        return moves
