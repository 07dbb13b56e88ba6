"""Abstract interfaces for the game layer.

A presentation layer depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_CONTINUATION = auto()  # a capture chain must go on
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, board: Board | None = None, first: Color | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def continue_capture(self, to_sq: Square) -> bool:
        """Submit the next jump of a pending chain. Returns True if applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""
