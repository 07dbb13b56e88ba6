"""GameController — the central orchestrator of a checkers game.

Coordinates: GameState, notation parsing, settings.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameEndReason, GameResult
from checkie.core.errors import MoveRejected
from checkie.core.move import MoveOutcome
from checkie.core.notation import (
    parse_move_text,
    parse_square_token,
    split_move_text,
)
from checkie.core.types import Square
from checkie.game.interfaces import GamePhase, IGameController
from checkie.game.settings import GameSettings
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, "GameState"], None]
TurnCallback = Callable[[Color], None]  # side that just finished its turn
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]
RejectionCallback = Callable[[MoveRejected], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_complete: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, runs capture chains,
    switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread.
    A rejected move leaves the game untouched; the reason is kept in
    :attr:`last_rejection` and sent to ``on_rejected`` handlers.
    """

    __slots__ = ("_state", "_settings", "_last_rejection", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState()
        self._last_rejection: MoveRejected | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def last_rejection(self) -> MoveRejected | None:
        return self._last_rejection

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, board: Board | None = None, first: Color | None = None) -> None:
        self._state = GameState()
        if first is None:
            first = self._settings.first_player
        self._state.setup(board, first)
        self._last_rejection = None
        _LOGGER.debug("New game, %s to move", self._state.side_to_move)

        if self._state.is_game_over:
            self._emit_game_over()
        else:
            self._emit_phase(self._state.phase)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        return self._play(lambda: self._state.submit_move(from_sq, to_sq))

    def continue_capture(self, to_sq: Square) -> bool:
        return self._play(lambda: self._state.continue_capture(to_sq))

    def submit_text(self, text: str) -> bool:
        """Play typed input: ``"b6 a5"``, or a lone ``"c3"`` mid-chain."""
        lenient = self._settings.lenient_squares

        def action() -> MoveOutcome:
            tokens = split_move_text(text)
            chain_pending = self._state.phase == GamePhase.AWAITING_CONTINUATION
            if chain_pending and len(tokens) == 1:
                to_sq = parse_square_token(tokens[0], lenient)
                return self._state.continue_capture(to_sq)
            from_sq, to_sq = parse_move_text(text, lenient)
            return self._state.submit_move(from_sq, to_sq)

        return self._play(action)

    def resign(self, color: Color) -> None:
        if self._state.is_game_over or self._state.phase == GamePhase.NOT_STARTED:
            return
        self._state.resign(color)
        _LOGGER.info("%s resigned", color)
        self._emit_game_over()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, action: Callable[[], MoveOutcome]) -> bool:
        if self._state.phase == GamePhase.NOT_STARTED:
            return False

        color = self._state.side_to_move
        try:
            outcome = action()
        except MoveRejected as exc:
            self._last_rejection = exc
            _LOGGER.debug("Rejected %s move: %s", color, exc.message)
            for cb in self.events.on_rejected:
                cb(exc)
            return False

        self._last_rejection = None
        _LOGGER.debug("%s played %s", color, outcome.move)
        for cb in self.events.on_move:
            cb(outcome, self._state)

        if outcome.turn_complete:
            for turn_cb in self.events.on_turn_complete:
                turn_cb(color)

        if self._state.is_game_over:
            self._emit_game_over()
        else:
            self._emit_phase(self._state.phase)
        return True

    def _emit_game_over(self) -> None:
        result = self._state.result
        reason = self._state.end_reason
        assert reason is not None
        _LOGGER.info("Game over: %s (%s)", result.name, reason.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result, reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
