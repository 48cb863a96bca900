"""Game management layer — configuration, selection, castling, controller.

Quick start::

    from fogchess.game import GameConfig, GameController

    ctrl = GameController(GameConfig(fog=True))
    ctrl.click((4, 1))  # select the e2 pawn
    ctrl.click((4, 3))  # push it two cells
"""

from fogchess.game.castling import castle_targets, try_castle
from fogchess.game.config import GameConfig
from fogchess.game.controller import GameController, GameEvents
from fogchess.game.interfaces import ClickOutcome, GamePhase
from fogchess.game.selection import Selection
from fogchess.game.state import GameState

__all__ = [
    # Enums
    "ClickOutcome",
    "GamePhase",
    # Concrete
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameState",
    "Selection",
    # Castling
    "castle_targets",
    "try_castle",
]
