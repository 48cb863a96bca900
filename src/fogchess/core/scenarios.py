"""Named starting layouts.

``None`` selects the standard layout; any other name must be registered
here, otherwise :class:`UnknownScenarioError` is raised.
"""

from __future__ import annotations

from collections.abc import Callable

from fogchess.core.board import Board
from fogchess.core.notation import board_from_placement

# White Rook on a1, White King on d1.
CASTLE_PLACEMENT = "8/8/8/8/8/8/8/R2K4"


class UnknownScenarioError(ValueError):
    """Raised when a scenario name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        known = ", ".join(scenario_names())
        super().__init__(f"Unknown scenario {name!r} (known: {known})")


def _castle() -> Board:
    return board_from_placement(CASTLE_PLACEMENT)


_SCENARIOS: dict[str, Callable[[], Board]] = {
    "castle": _castle,
}


def scenario_names() -> list[str]:
    return sorted(_SCENARIOS)


def board_for_scenario(name: str | None) -> Board:
    """Fresh board for scenario *name*, or the standard layout for ``None``."""
    if name is None:
        return Board.initial()
    try:
        factory = _SCENARIOS[name]
    except KeyError:
        raise UnknownScenarioError(name) from None
    return factory()
