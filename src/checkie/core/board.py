"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

from checkie.core.enums import Color
from checkie.core.geometry import is_dark_square
from checkie.core.piece import Piece
from checkie.core.types import Square, make_square, square_name

_COLOR_COUNT = 2


class Board:
    """Mutable 64-square board with an incremental per-color occupancy index.

    The board trusts its caller: it checks only that pieces sit on dark
    squares, never whether a move is legal.
    """

    __slots__ = ("_squares", "_color_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> bitboard of all occupied squares for that color.
        self._color_bitboards: list[int] = [0] * _COLOR_COUNT

    @staticmethod
    def _squares_from_bitboard(bitboard: int) -> list[Square]:
        squares: list[Square] = []
        while bitboard:
            lsb = bitboard & -bitboard
            squares.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and not is_dark_square(sq):
            raise ValueError(
                f"Pieces may only stand on dark squares, not {square_name(sq)}"
            )

        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        mask = 1 << sq
        if old_piece is not None:
            self._color_bitboards[int(old_piece.color)] &= ~mask

        self._squares[sq] = piece

        if piece is not None:
            self._color_bitboards[int(piece.color)] |= mask

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, in ascending (board scan) order."""
        return self._squares_from_bitboard(self._color_bitboards[int(color)])

    def count(self, color: Color) -> int:
        return self._color_bitboards[int(color)].bit_count()

    # -- Mutation / copying -------------------------------------------------

    def relocate(
        self, from_sq: Square, to_sq: Square, cleared: Square | None = None
    ) -> None:
        """Move the piece on *from_sq* to *to_sq*, optionally emptying *cleared*."""
        piece = self._squares[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_sq)}")
        self[from_sq] = None
        self[to_sq] = piece
        if cleared is not None:
            self[cleared] = None

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._color_bitboards = self._color_bitboards.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: three rows of men per side."""
        b = cls()
        for rank, color in (
            (0, Color.WHITE),
            (1, Color.WHITE),
            (2, Color.WHITE),
            (5, Color.BLACK),
            (6, Color.BLACK),
            (7, Color.BLACK),
        ):
            for file in range(8):
                sq = make_square(file, rank)
                if is_dark_square(sq):
                    b[sq] = Piece(color)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
