"""Game management layer — players, turn order, narration.

Quick start::

    from kingfall.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.submit_move(6, 4, 4, 4)
"""

from kingfall.game.controller import GameController, GameEvents, MoveRecord
from kingfall.game.interfaces import GamePhase, IGameController, IPlayer
from kingfall.game.narration import describe_capture, describe_move
from kingfall.game.player import HumanPlayer

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "MoveRecord",
    # Narration
    "describe_capture",
    "describe_move",
]
