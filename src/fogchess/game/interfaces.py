"""Enumerations shared by the game layer."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Selection state machine states."""

    IDLE = auto()  # nothing selected
    SELECTING = auto()  # one or more allied cells selected


class ClickOutcome(IntEnum):
    """What a single target-cell event did to the game."""

    IGNORED = 0
    SELECTED = auto()  # added to a multi-selection
    RESELECTED = auto()  # selection replaced by one allied cell
    MOVED = auto()
    ATTACKED = auto()
    CASTLED = auto()

    @property
    def ends_turn(self) -> bool:
        return self in (ClickOutcome.MOVED, ClickOutcome.ATTACKED, ClickOutcome.CASTLED)
