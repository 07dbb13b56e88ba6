"""Stateless board geometry and ownership predicates."""

from __future__ import annotations

from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import Square, file_of, rank_of

# (row step, column step); kings use all four, men the two with a forward row step.
KING_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_MAN_DIRS: tuple[tuple[tuple[int, int], ...], tuple[tuple[int, int], ...]] = (
    ((1, 1), (1, -1)),
    ((-1, 1), (-1, -1)),
)


def in_bounds(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def is_dark_square(sq: Square) -> bool:
    """Playable squares are those where row + column is odd."""
    return (file_of(sq) + rank_of(sq)) % 2 == 1


def belongs_to(piece: Piece | None, color: Color) -> bool:
    return piece is not None and piece.color == color


def are_enemies(a: Piece | None, b: Piece | None) -> bool:
    return a is not None and b is not None and a.color != b.color


def forward_direction(color: Color) -> int:
    return color.forward


def diagonal_directions(piece: Piece) -> tuple[tuple[int, int], ...]:
    """Unit diagonal steps available to *piece*."""
    if piece.is_king:
        return KING_DIRS
    return _MAN_DIRS[int(piece.color)]
