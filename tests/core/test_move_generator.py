"""Move generation tests, ending with perft counts from the opening.

Perft counts full turns: a capture chain is one move, and each distinct
jump sequence is a separate leaf.
"""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.core.types import (
    A2, A4, A6, B3, B5, C4, C6, D3, D5, E4, E6, F3, G4, G6, H3, H5,
)


class TestSimpleMoves:
    def test_opening_white_moves(self, initial_board: Board) -> None:
        moves = MoveGenerator(initial_board).generate_legal_moves(Color.WHITE)
        assert len(moves) == 7
        assert not any(m.is_capture for m in moves)
        assert Move(B3, A4) in moves

    def test_opening_black_moves(self, initial_board: Board) -> None:
        moves = MoveGenerator(initial_board).generate_legal_moves(Color.BLACK)
        assert len(moves) == 7
        assert Move(A6, B5) in moves

    def test_man_moves_forward_only(self, make_board) -> None:
        board = make_board(c4="w")
        moves = MoveGenerator(board).simple_moves_from(C4, Color.WHITE)
        assert moves == [Move(C4, D5), Move(C4, B5)]

    def test_black_man_moves_down(self, make_board) -> None:
        board = make_board(c4="b")
        moves = MoveGenerator(board).simple_moves_from(C4, Color.BLACK)
        assert {m.to_sq for m in moves} == {D3, B3}

    def test_king_moves_all_ways(self, make_board) -> None:
        board = make_board(d5="W")
        moves = MoveGenerator(board).simple_moves_from(D5, Color.WHITE)
        assert {m.to_sq for m in moves} == {E6, C6, E4, C4}

    def test_edge_man_has_one_move(self, make_board) -> None:
        board = make_board(a2="w")
        moves = MoveGenerator(board).simple_moves_from(A2, Color.WHITE)
        assert moves == [Move(A2, B3)]

    def test_blocked_destination(self, make_board) -> None:
        board = make_board(h3="w", g4="w")
        moves = MoveGenerator(board).simple_moves_from(H3, Color.WHITE)
        assert moves == []

    def test_wrong_owner_yields_nothing(self, make_board) -> None:
        board = make_board(c4="w")
        gen = MoveGenerator(board)
        assert gen.simple_moves_from(C4, Color.BLACK) == []
        assert gen.simple_moves_from(D5, Color.WHITE) == []


class TestCaptures:
    def test_single_capture(self, make_board) -> None:
        board = make_board(b3="w", c4="b")
        caps = MoveGenerator(board).capture_moves_from(B3, Color.WHITE)
        assert caps == [Move(B3, D5, C4)]
        assert caps[0].is_capture

    def test_captured_square_is_midpoint(self, make_board) -> None:
        board = make_board(e4="W", d3="b", f5="b")
        for move in MoveGenerator(board).capture_moves_from(E4, Color.WHITE):
            assert move.captured_sq is not None
            assert 2 * move.captured_sq == move.from_sq + move.to_sq

    def test_man_cannot_capture_backward(self, make_board) -> None:
        board = make_board(c4="w", b3="b")
        assert MoveGenerator(board).capture_moves_from(C4, Color.WHITE) == []

    def test_king_captures_backward(self, make_board) -> None:
        board = make_board(c4="W", b3="b")
        caps = MoveGenerator(board).capture_moves_from(C4, Color.WHITE)
        assert caps == [Move(C4, A2, B3)]

    def test_landing_must_be_empty(self, make_board) -> None:
        board = make_board(b3="w", c4="b", d5="b")
        assert MoveGenerator(board).capture_moves_from(B3, Color.WHITE) == []

    def test_landing_must_be_on_board(self, make_board) -> None:
        board = make_board(g6="w", h7="b")
        assert MoveGenerator(board).capture_moves_from(G6, Color.WHITE) == []

    def test_cannot_jump_own_piece(self, make_board) -> None:
        board = make_board(b3="w", c4="w")
        assert MoveGenerator(board).capture_moves_from(B3, Color.WHITE) == []

    def test_capture_for_other_side_ignored(self, make_board) -> None:
        board = make_board(b3="w", c4="b")
        assert MoveGenerator(board).capture_moves_from(B3, Color.BLACK) == []


class TestMandatoryCapture:
    def test_capture_excludes_simple_moves(self, make_board) -> None:
        board = make_board(b3="w", c4="b", g2="w")
        gen = MoveGenerator(board)
        legal = gen.generate_legal_moves(Color.WHITE)
        assert legal == [Move(B3, D5, C4)]
        assert legal == gen.all_captures(Color.WHITE)

    def test_capture_scanned_across_whole_side(self, make_board) -> None:
        board = make_board(a2="w", f3="w", g4="b")
        legal = MoveGenerator(board).generate_legal_moves(Color.WHITE)
        assert legal == [Move(F3, H5, G4)]
        assert Move(A2, B3) not in legal

    def test_all_captures_in_scan_order(self, make_board) -> None:
        board = make_board(f3="w", g4="b", b3="w", c4="b")
        caps = MoveGenerator(board).all_captures(Color.WHITE)
        assert caps == [Move(B3, D5, C4), Move(F3, H5, G4)]

    def test_generation_is_idempotent(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert gen.generate_legal_moves(Color.WHITE) == gen.generate_legal_moves(
            Color.WHITE
        )

    def test_no_legal_moves(self, make_board) -> None:
        board = make_board(a4="b", b3="w", c2="w")
        assert not MoveGenerator(board).has_legal_moves(Color.BLACK)
        assert MoveGenerator(board).has_legal_moves(Color.WHITE)


# ── Perft ────────────────────────────────────────────────────────────────────


def perft(board: Board, color: Color, depth: int) -> int:
    """Count leaf positions after *depth* full turns."""
    if depth == 0:
        return 1
    return sum(
        _perft_turn(board.copy(), color, move, depth)
        for move in Rules.legal_moves(board, color)
    )


def _perft_turn(board: Board, color: Color, move: Move, depth: int) -> int:
    Rules.apply_move(board, move)
    if move.is_capture:
        follow_ups = MoveGenerator(board).capture_moves_from(move.to_sq, color)
        if follow_ups:
            return sum(
                _perft_turn(board.copy(), color, m, depth) for m in follow_ups
            )
    Rules.maybe_promote(board, move.to_sq)
    return perft(board, color.opposite, depth - 1)


class TestPerftOpening:
    def test_depth_1(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 1) == 7

    def test_depth_2(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 2) == 49

    def test_depth_3(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 3) == 302

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 4) == 1_469

    def test_black_first_is_symmetric(self) -> None:
        assert perft(Board.initial(), Color.BLACK, 3) == 302

    def test_perft_leaves_board_untouched(self) -> None:
        board = Board.initial()
        perft(board, Color.WHITE, 2)
        assert board == Board.initial()
