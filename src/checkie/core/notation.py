"""Text notation: square tokens, move text and board diagrams.

Squares are written as a column letter ``a``–``h`` followed by a row digit
``1``–``8``, e.g. ``b6``.

A board diagram is eight rows of eight cells, row 8 first, with ``.`` for
an empty square, ``w``/``b`` for men and ``W``/``B`` for kings.  Cells may
be run together (``.w.w.w.w``) or space separated, and the rank labels and
file footer printed by ``repr(board)`` are accepted::

    8 . b . b . b . b
    ...
      a b c d e f g h
"""

from __future__ import annotations

import re

from checkie.core.board import Board
from checkie.core.errors import MalformedSquare
from checkie.core.piece import Piece
from checkie.core.types import Square, make_square, parse_square

_MOVE_SEPARATORS = re.compile(r"[\s\-xX]+")
_FILES = "abcdefgh"
_RANKS = "12345678"


def parse_square_token(token: str, lenient: bool = True) -> Square:
    """Parse a square typed by a player.

    In lenient mode the first letter and the first digit anywhere in the
    token are used, case-insensitively, so ``"B6,"`` reads as ``b6``.
    """
    if not lenient:
        try:
            return parse_square(token)
        except ValueError:
            raise MalformedSquare(f"Invalid square {token!r}; use e.g. b6") from None

    if len(token) < 2:
        raise MalformedSquare(f"Invalid square {token!r}; use e.g. b6")
    file = next((ch.lower() for ch in token if ch.isalpha()), "")
    rank = next((ch for ch in token if ch.isdigit()), "")
    if not file or file not in _FILES or not rank or rank not in _RANKS:
        raise MalformedSquare(f"Invalid square {token!r}; use e.g. b6")
    return make_square(_FILES.index(file), _RANKS.index(rank))


def split_move_text(text: str) -> list[str]:
    """Square tokens of typed input, separated by spaces, ``-`` or ``x``."""
    return [t for t in _MOVE_SEPARATORS.split(text.strip()) if t]


def parse_move_text(text: str, lenient: bool = True) -> tuple[Square, Square]:
    """Parse ``"b6 a5"``, ``"b6-a5"`` or ``"b6xd4"`` into a square pair."""
    tokens = split_move_text(text)
    if len(tokens) != 2:
        raise MalformedSquare(f"Invalid move {text!r}; use e.g. b6 a5")
    return (
        parse_square_token(tokens[0], lenient),
        parse_square_token(tokens[1], lenient),
    )


# ── Board diagrams ───────────────────────────────────────────────────────────


def board_from_diagram(diagram: str) -> Board:
    """Build a :class:`Board` from an eight-row diagram."""
    rows: list[list[str]] = []
    for line in diagram.splitlines():
        tokens = line.split()
        if not tokens or tokens == list(_FILES):
            continue
        if tokens[0].isdigit():
            tokens = tokens[1:]
        cells = list(tokens[0]) if len(tokens) == 1 else tokens
        if len(cells) != 8:
            raise ValueError(f"Diagram row must have 8 cells: {line!r}")
        rows.append(cells)

    if len(rows) != 8:
        raise ValueError(f"Diagram must have 8 rows, got {len(rows)}")

    board = Board()
    for row_idx, cells in enumerate(rows):
        rank = 7 - row_idx
        for file, cell in enumerate(cells):
            if cell == ".":
                continue
            board[make_square(file, rank)] = Piece.from_char(cell)
    return board


def board_to_diagram(board: Board) -> str:
    """Compact diagram, one line of eight characters per row, row 8 first."""
    lines: list[str] = []
    for rank in range(7, -1, -1):
        line = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            line += str(piece) if piece else "."
        lines.append(line)
    return "\n".join(lines)
