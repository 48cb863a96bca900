"""Ray casting: walk candidate cells until the first occupied one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from fogchess.core.types import BOARD_SIZE, Coord

if TYPE_CHECKING:
    from fogchess.core.board import Board


def ray(origin: Coord, direction: tuple[int, int]) -> Iterator[Coord]:
    """Cells at distance 1..7 from *origin* along *direction*.

    Not range-filtered: cells past the board edge are yielded as well.
    """
    x, y = origin
    dx, dy = direction
    for step in range(1, BOARD_SIZE):
        yield (x + dx * step, y + dy * step)


def line_of_sight(candidates: Iterable[Coord], board: Board) -> Iterator[Coord]:
    """Yield *candidates* in order, stopping after the first occupied cell.

    The blocking cell itself is yielded, since it may be a capture target.
    Off-board cells read as empty through :meth:`Board.get`.
    """
    for pos in candidates:
        yield pos
        if board.get(pos) is not None:
            return
