"""GameController — turns target-cell events into moves, attacks and castles.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from fogchess.core.enums import Player
from fogchess.core.move_generator import MoveGenerator
from fogchess.core.piece import Piece
from fogchess.core.types import Coord, coord_name, in_bounds
from fogchess.core.visibility import visible_cells
from fogchess.game.castling import try_castle
from fogchess.game.config import GameConfig
from fogchess.game.interfaces import ClickOutcome, GamePhase
from fogchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[ClickOutcome, "GameState"], None]
TurnCallback = Callable[[Player], None]
SelectionCallback = Callable[[frozenset[Coord]], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Selection/turn state machine over a single :class:`GameState`.

    Every illegal event is ignored: state is left exactly as it was and
    :attr:`ClickOutcome.IGNORED` is returned.  Methods are meant to be
    called from one thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._state = GameState.from_config(config or GameConfig())
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turn(self) -> Player:
        return self._state.turn

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def selected(self) -> frozenset[Coord]:
        return self._state.selected.as_set()

    @property
    def fog(self) -> bool:
        return self._state.fog

    @property
    def single_player(self) -> bool:
        return self._state.single_player

    def generator(self) -> MoveGenerator:
        return MoveGenerator(self._state.board, self._state.turn)

    # ── Read-only queries for renderers ──────────────────────────────────

    def cells(self) -> Iterator[tuple[int, int, Piece | None]]:
        return self._state.board.cells()

    def piece_at(self, pos: Coord) -> Piece | None:
        return self._state.board.get(pos)

    def legal_targets(self, pos: Coord) -> frozenset[Coord]:
        """On-board targets of the piece at *pos* for the player to move."""
        return frozenset(c for c in self.generator().moves(pos) if in_bounds(c))

    def visible_cells(self) -> frozenset[Coord]:
        return visible_cells(self._state.board, self._state.turn)

    def is_visible(self, pos: Coord) -> bool:
        """Whether *pos* is shown; everything is visible with fog off."""
        if not self._state.fog:
            return in_bounds(pos)
        return pos in self.visible_cells()

    # ── Mode flags ───────────────────────────────────────────────────────

    def set_fog(self, enabled: bool) -> None:
        self._state.fog = enabled

    def set_single_player(self, enabled: bool) -> None:
        self._state.single_player = enabled

    def reset(self) -> None:
        self._state.reset()
        self._emit_selection()
        self._emit_turn()

    # ── Input ────────────────────────────────────────────────────────────

    def click(self, target: Coord, multi_select: bool = False) -> ClickOutcome:
        """Handle "target cell chosen", optionally with the multi-select modifier."""
        if not in_bounds(target):
            return ClickOutcome.IGNORED

        state = self._state
        gen = self.generator()

        if multi_select:
            if gen.contains_ally(target) and state.selected.add(target):
                self._emit_selection()
                return ClickOutcome.SELECTED
            return ClickOutcome.IGNORED

        target_piece = state.board.get(target)

        if target_piece is None:
            if len(state.selected) > 1:
                return self._castle()
            return self._move_selected(gen, target, ClickOutcome.MOVED)

        if target_piece.player != state.turn and len(state.selected) == 1:
            return self._move_selected(gen, target, ClickOutcome.ATTACKED)

        if gen.contains_ally(target):
            if state.selected.as_set() == {target}:
                return ClickOutcome.IGNORED
            state.selected.replace(target)
            self._emit_selection()
            return ClickOutcome.RESELECTED

        return ClickOutcome.IGNORED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _move_selected(
        self, gen: MoveGenerator, target: Coord, outcome: ClickOutcome
    ) -> ClickOutcome:
        state = self._state
        origin = state.selected.first()
        if len(state.selected) != 1 or origin is None:
            return ClickOutcome.IGNORED
        if not gen.contains_ally(origin) or target not in gen.moves(origin):
            return ClickOutcome.IGNORED

        state.board.move_piece(origin, target)
        _LOGGER.debug(
            "%s %s: %s -> %s",
            state.turn,
            outcome.name.lower(),
            coord_name(origin),
            coord_name(target),
        )
        state.selected.clear()
        self._finish_turn(outcome)
        return outcome

    def _castle(self) -> ClickOutcome:
        state = self._state
        if not try_castle(state.board, state.selected):
            return ClickOutcome.IGNORED
        _LOGGER.debug("%s castled", state.turn)
        self._finish_turn(ClickOutcome.CASTLED)
        return ClickOutcome.CASTLED

    def _finish_turn(self, outcome: ClickOutcome) -> None:
        self._emit_selection()
        self._emit_move(outcome)
        if self._state.advance_turn():
            _LOGGER.debug("Turn passes to %s", self._state.turn)
            self._emit_turn()

    def _emit_move(self, outcome: ClickOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)

    def _emit_turn(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._state.turn)

    def _emit_selection(self) -> None:
        selected = self.selected
        for cb in self.events.on_selection_changed:
            cb(selected)
