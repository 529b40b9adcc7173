"""Game management layer: controller, players, state machine.

Quick start::

    from chesslet.core import Color
    from chesslet.engine import MinimaxEngine
    from chesslet.game import AIPlayer, GameController

    ctrl = GameController()
    ctrl.new_game(
        white=AIPlayer(Color.WHITE, MinimaxEngine()),
        black=AIPlayer(Color.BLACK, MinimaxEngine()),
    )
    ctrl.run(max_plies=20)
"""

from chesslet.game.controller import GameController, GameEvents
from chesslet.game.interfaces import (
    GameEndReason,
    GamePhase,
    IGameController,
    IPlayer,
)
from chesslet.game.player import AIPlayer, HumanPlayer
from chesslet.game.state import GameState

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
]
