"""Game layer: the command/query boundary used by presentation code.

Quick start::

    from chesslaw.game import GameController
    from chesslaw.core import parse_square

    ctrl = GameController()
    ctrl.events.on_game_over.append(print)
    ctrl.select(parse_square("e2"))          # legal targets for highlighting
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
"""

from chesslaw.game.controller import GameController, GameEvents
from chesslaw.game.interfaces import IGameController
from chesslaw.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
