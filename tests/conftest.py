"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from checkie.core.board import Board
from checkie.core.piece import Piece
from checkie.core.types import parse_square

BoardFactory = Callable[..., Board]


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from keyword placements, e.g. ``make_board(b3="w")``.

    Values are diagram characters: ``w``/``b`` for men, ``W``/``B`` for kings.
    """

    def _make(**placements: str) -> Board:
        board = Board()
        for name, char in placements.items():
            board[parse_square(name)] = Piece.from_char(char)
        return board

    return _make


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
