"""Game management layer — state machine, controller, settings.

Quick start::

    from checkie.core import parse_square
    from checkie.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(parse_square("b3"), parse_square("a4"))
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController
from checkie.game.settings import GameSettings
from checkie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
]
