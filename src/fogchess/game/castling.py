"""Castling — the one compound move, validated and applied atomically."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fogchess.core.enums import Unit
from fogchess.core.types import Coord, in_bounds

if TYPE_CHECKING:
    from fogchess.core.board import Board
    from fogchess.game.selection import Selection

_LOGGER = logging.getLogger(__name__)

# Column shift applied to each piece.  Fixed for the layout where the rook
# sits on the king's left: the king moves two columns left, the rook two right.
KING_SHIFT = -2
ROOK_SHIFT = 2


def _landing(pos: Coord, shift: int) -> Coord:
    return (pos[0] + shift, pos[1])


def castle_targets(board: Board, selection: Selection) -> dict[Coord, Coord] | None:
    """``{origin: landing}`` for a castle over the first two selected cells.

    Returns ``None`` when any precondition fails:

    * both cells hold a piece, one a King and the other a Rook;
    * neither piece has moved yet;
    * each landing cell is on the board and empty;
    * the two landing cells differ.
    """
    cells = selection.first_two()
    if len(cells) != 2:
        return None

    by_unit: dict[Unit, Coord] = {}
    for pos in cells:
        piece = board.get(pos)
        if piece is None or piece.moved != 0:
            return None
        by_unit[piece.unit] = pos
    if set(by_unit) != {Unit.KING, Unit.ROOK}:
        return None

    king_pos, rook_pos = by_unit[Unit.KING], by_unit[Unit.ROOK]
    plan = {
        king_pos: _landing(king_pos, KING_SHIFT),
        rook_pos: _landing(rook_pos, ROOK_SHIFT),
    }
    landings = list(plan.values())
    if landings[0] == landings[1]:
        return None
    for landing in landings:
        if not in_bounds(landing) or not board.is_empty(landing):
            return None
    return plan


def try_castle(board: Board, selection: Selection) -> bool:
    """Apply the castle if legal and clear *selection*.

    On failure neither *board* nor *selection* is touched.
    """
    plan = castle_targets(board, selection)
    if plan is None:
        _LOGGER.debug("Castle rejected for selection %r", selection)
        return False
    for origin, landing in plan.items():
        board.move_piece(origin, landing)
    selection.clear()
    return True
