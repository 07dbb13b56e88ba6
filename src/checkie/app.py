"""Console entry point: a two-player game over stdin/stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from checkie.core.board import Board
from checkie.core.enums import Color, GameEndReason, GameResult
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import square_name
from checkie.game.controller import GameController
from checkie.game.interfaces import GamePhase
from checkie.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

_END_TEXT: dict[GameEndReason, str] = {
    GameEndReason.NO_PIECES: "{loser} has no pieces",
    GameEndReason.NO_LEGAL_MOVES: "{loser} has no legal moves",
    GameEndReason.RESIGNATION: "{loser} resigned",
}


def _prompt(ctrl: GameController, out: TextIO) -> None:
    state = ctrl.state
    print(repr(state.board), file=out)
    if state.phase == GamePhase.AWAITING_CONTINUATION:
        assert state.active_square is not None
        landings = " ".join(square_name(sq) for sq in state.continuations)
        print(
            f"\nMulti-capture required from {square_name(state.active_square)}",
            file=out,
        )
        print(f"Possible next landings: {landings}", file=out)
        print("Enter next destination (e.g. c3):", file=out)
        return

    side = state.side_to_move
    print(f"\nTurn: {side.name}", file=out)
    if MoveGenerator(state.board).all_captures(side):
        print("Rule: a capture is available, you must capture.", file=out)
    print("Enter move like: b6 a5 (from to)", file=out)


def run(
    stdin: TextIO,
    stdout: TextIO,
    settings: GameSettings | None = None,
    board: Board | None = None,
) -> GameResult:
    """Play until the game ends or input runs out; return the result."""
    ctrl = GameController(settings)
    ctrl.events.on_rejected.append(lambda exc: print(exc.message, file=stdout))
    ctrl.new_game(board)

    while not ctrl.state.is_game_over:
        _prompt(ctrl, stdout)
        line = stdin.readline()
        if not line:
            _LOGGER.info("Input closed before the game ended")
            break
        ctrl.submit_text(line)

    state = ctrl.state
    winner = state.winner
    if winner is not None and state.end_reason is not None:
        loser: Color = winner.opposite
        detail = _END_TEXT[state.end_reason].format(loser=loser.name)
        print(f"GAME OVER! {winner.name} wins ({detail}).", file=stdout)
    return state.result


def main() -> None:
    """Launch a console game."""
    settings = GameSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(sys.stdin, sys.stdout, settings)


if __name__ == "__main__":
    main()
