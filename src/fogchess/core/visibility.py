"""Fog of war: the union of every allied piece's line of sight."""

from __future__ import annotations

from fogchess.core.board import Board
from fogchess.core.enums import Player
from fogchess.core.move_generator import MoveGenerator
from fogchess.core.types import Coord, all_cells, in_bounds


def visible_cells(board: Board, player: Player) -> frozenset[Coord]:
    """Cells visible to *player*, recomputed from scratch on every call.

    Each of *player*'s pieces contributes its own cell plus its line of
    sight; off-board hits are discarded.
    """
    gen = MoveGenerator(board, player)
    visible: set[Coord] = set()
    for pos in board.pieces(player):
        visible.add(pos)
        visible.update(c for c in gen.line_of_sight(pos) if in_bounds(c))
    return frozenset(visible)


def fogged_cells(board: Board, player: Player) -> frozenset[Coord]:
    """Complement of :func:`visible_cells` over the whole board."""
    visible = visible_cells(board, player)
    return frozenset(c for c in all_cells() if c not in visible)
