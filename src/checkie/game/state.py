"""Game state machine: drives turns, capture chains and game over."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameEndReason, GameResult
from checkie.core.errors import ChainViolation, GameFinished, IllegalMove
from checkie.core.move import Move, MoveOutcome
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.core.types import Square, square_name
from checkie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single applied step (a simple move or one jump of a chain)."""

    move: Move
    color: Color
    turn: int
    promoted: bool = False


@dataclass
class GameState:
    """Owns one game's board and turn, and enforces the turn/chain rules.

    Phases: ``AWAITING_MOVE`` → (capture with a follow-up)
    ``AWAITING_CONTINUATION`` → ... → turn complete → ``AWAITING_MOVE`` for
    the opponent, or ``GAME_OVER`` when the side to move has no pieces or
    no legal moves.

    This is a pure data/logic class — no I/O, no threading.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason | None = field(default=None, init=False)
    active_square: Square | None = field(default=None, init=False)
    continuations: tuple[Square, ...] = field(default=(), init=False)
    turns_completed: int = field(default=0, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, first: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game. A given *board* is copied."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = first
        self.result = GameResult.IN_PROGRESS
        self.end_reason = None
        self.active_square = None
        self.continuations = ()
        self.turns_completed = 0
        self.move_history.clear()
        self._begin_turn()

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Play *from_sq* → *to_sq* for the side to move.

        While a chain is pending, only a jump by the active piece is
        accepted; it is handled as :meth:`continue_capture`.
        """
        self._require_in_play()
        if self.phase == GamePhase.AWAITING_CONTINUATION:
            if from_sq == self.active_square:
                return self.continue_capture(to_sq)
            assert self.active_square is not None
            raise ChainViolation(
                f"You must continue capturing with the piece on "
                f"{square_name(self.active_square)}"
            )

        outcome = Rules.submit_move(self.board, self.side_to_move, from_sq, to_sq)
        return self._record(outcome)

    def continue_capture(self, to_sq: Square) -> MoveOutcome:
        """Play the next jump of the pending chain."""
        self._require_in_play()
        if self.phase != GamePhase.AWAITING_CONTINUATION:
            raise IllegalMove("No capture chain is pending")
        assert self.active_square is not None

        outcome = Rules.continue_capture(
            self.board, self.side_to_move, self.active_square, to_sq
        )
        return self._record(outcome)

    def resign(self, color: Color) -> None:
        if self.is_game_over:
            return
        self._end(GameResult.win_for(color.opposite), GameEndReason.RESIGNATION)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        return self.result.winner

    @property
    def ply_count(self) -> int:
        """Number of applied steps, counting every jump of a chain."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Moves acceptable right now: the chain's jumps while one is pending."""
        if self.phase == GamePhase.AWAITING_MOVE:
            return Rules.legal_moves(self.board, self.side_to_move)
        if self.phase == GamePhase.AWAITING_CONTINUATION:
            assert self.active_square is not None
            gen = MoveGenerator(self.board)
            return gen.capture_moves_from(self.active_square, self.side_to_move)
        return []

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_in_play(self) -> None:
        if self.phase == GamePhase.NOT_STARTED:
            raise RuntimeError("Game has not been set up")
        if self.phase == GamePhase.GAME_OVER:
            raise GameFinished("The game is over")

    def _record(self, outcome: MoveOutcome) -> MoveOutcome:
        self.move_history.append(
            MoveRecord(
                move=outcome.move,
                color=self.side_to_move,
                turn=self.turns_completed + 1,
                promoted=outcome.promoted,
            )
        )
        if outcome.turn_complete:
            self._finish_turn()
        else:
            self.phase = GamePhase.AWAITING_CONTINUATION
            self.active_square = outcome.active_square
            self.continuations = outcome.continuations
        return outcome

    def _finish_turn(self) -> None:
        self.active_square = None
        self.continuations = ()
        self.turns_completed += 1
        self.side_to_move = self.side_to_move.opposite
        self._begin_turn()

    def _begin_turn(self) -> None:
        reason = Rules.end_reason(self.board, self.side_to_move)
        if reason is None:
            self.phase = GamePhase.AWAITING_MOVE
            return
        self._end(Rules.game_status(self.board, self.side_to_move), reason)

    def _end(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
        self.active_square = None
        self.continuations = ()
        _LOGGER.debug("Game over: %s (%s)", result.name, reason.name)
