"""Game state — board, turn ownership, selection and mode flags."""

from __future__ import annotations

from dataclasses import dataclass, field

from fogchess.core.board import Board
from fogchess.core.enums import Player
from fogchess.core.scenarios import board_for_scenario
from fogchess.game.config import GameConfig
from fogchess.game.interfaces import GamePhase
from fogchess.game.selection import Selection


@dataclass
class GameState:
    """Mutable session state.

    This is a pure data/logic class — no threading, no UI.  ``reset`` puts
    the board back to the snapshot taken at construction.
    """

    board: Board
    turn: Player = Player.WHITE
    selected: Selection = field(default_factory=Selection)
    fog: bool = True
    single_player: bool = False
    _initial_board: Board = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._initial_board = self.board.copy()

    @classmethod
    def from_config(cls, config: GameConfig) -> GameState:
        return cls(
            board=board_for_scenario(config.scenario),
            fog=config.fog,
            single_player=config.single_player,
        )

    # ── Transitions ──────────────────────────────────────────────────────

    def advance_turn(self) -> bool:
        """Hand the move to the opponent.  Returns False in single-player mode."""
        if self.single_player:
            return False
        self.turn = self.turn.opposite
        return True

    def reset(self) -> None:
        """Restore the initial board, White to move, nothing selected."""
        self.board = self._initial_board.copy()
        self.turn = Player.WHITE
        self.selected.clear()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        return GamePhase.SELECTING if len(self.selected) else GamePhase.IDLE
