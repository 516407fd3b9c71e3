"""Game management layer: state and the click-driven controller.

Quick start::

    from hotseat.game import GameController

    ctrl = GameController()
    ctrl.handle_square_click(6, 4)   # select the e2 pawn
    ctrl.handle_square_click(4, 4)   # play e2-e4
"""

from hotseat.game.controller import GameController, GameEvents
from hotseat.game.interfaces import ClickResult, GamePhase, IGameController
from hotseat.game.state import GameState

__all__ = [
    # Interfaces
    "ClickResult",
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
