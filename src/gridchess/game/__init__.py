"""Game management layer: click-driven controller over the core state.

Quick start::

    from gridchess.core import parse_square
    from gridchess.game import GameController

    ctrl = GameController()
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))
"""

from gridchess.game.controller import GameController, GameEvents
from gridchess.game.interfaces import IGameController

__all__ = [
    # Interfaces
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
]
