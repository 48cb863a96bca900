"""Per-unit move generation and line-of-sight for a single perspective."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fogchess.core.enums import Player, Unit
from fogchess.core.line_of_sight import line_of_sight, ray
from fogchess.core.types import Coord, adjacent_cells, in_bounds

if TYPE_CHECKING:
    from fogchess.core.board import Board
    from fogchess.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, -1),
    (2, 1),
    (-2, -1),
    (-2, 1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (-1, 1), (1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDING_DIRS: dict[Unit, tuple[tuple[int, int], ...]] = {
    Unit.ROOK: ROOK_DIRS,
    Unit.BISHOP: BISHOP_DIRS,
    Unit.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Computes target cells for pieces on *board*.

    Ally and enemy are judged relative to *perspective*, the player to move.
    Knight, King and Pawn candidates are not range-checked here; callers
    that act on a target must test it with :func:`in_bounds` themselves.
    """

    __slots__ = ("_board", "_perspective")

    def __init__(self, board: Board, perspective: Player) -> None:
        self._board = board
        self._perspective = perspective

    @property
    def perspective(self) -> Player:
        return self._perspective

    # -- Occupancy tests ----------------------------------------------------

    def contains_ally(self, pos: Coord) -> bool:
        """Occupied by a piece of the player to move.  False off the board."""
        if not in_bounds(pos):
            return False
        piece = self._board.get(pos)
        return piece is not None and piece.player == self._perspective

    def contains_enemy(self, pos: Coord) -> bool:
        """Occupied by a piece of the opponent.  False off the board."""
        if not in_bounds(pos):
            return False
        piece = self._board.get(pos)
        return piece is not None and piece.player != self._perspective

    # -- Public API ---------------------------------------------------------

    def moves(self, pos: Coord) -> set[Coord]:
        """Legal target cells for the piece at *pos* (empty if none)."""
        piece = self._board.get(pos)
        if piece is None:
            return set()

        if piece.unit == Unit.PAWN:
            candidates = self._pawn_candidates(pos, piece)
        elif piece.unit == Unit.KNIGHT:
            candidates = self._offset_candidates(pos, KNIGHT_OFFSETS)
        elif piece.unit == Unit.KING:
            candidates = self._offset_candidates(pos, KING_OFFSETS)
        else:
            candidates = self._sliding_candidates(pos, _SLIDING_DIRS[piece.unit])

        return {c for c in candidates if not self.contains_ally(c)}

    def line_of_sight(self, pos: Coord) -> set[Coord]:
        """Cells seen from *pos*: its moves plus all eight neighbours.

        Neighbours are included regardless of occupancy, so a pawn sees its
        empty diagonals.  Not range-filtered.
        """
        return self.moves(pos) | set(adjacent_cells(pos))

    # -- Unit-specific candidates (private) ---------------------------------

    def _pawn_candidates(self, pos: Coord, piece: Piece) -> list[Coord]:
        board = self._board
        x, y = pos
        dy = piece.player.forward
        candidates: list[Coord] = []

        for dx in (-1, 1):
            attack = (x + dx, y + dy)
            if self.contains_enemy(attack):
                candidates.append(attack)

        one_step = (x, y + dy)
        if board.is_empty(one_step):
            candidates.append(one_step)
            two_step = (x, y + 2 * dy)
            if piece.moved == 0 and board.is_empty(two_step):
                candidates.append(two_step)
        return candidates

    @staticmethod
    def _offset_candidates(
        pos: Coord, offsets: tuple[tuple[int, int], ...]
    ) -> list[Coord]:
        x, y = pos
        return [(x + dx, y + dy) for dx, dy in offsets]

    def _sliding_candidates(
        self, pos: Coord, directions: tuple[tuple[int, int], ...]
    ) -> list[Coord]:
        candidates: list[Coord] = []
        for direction in directions:
            candidates.extend(line_of_sight(ray(pos, direction), self._board))
        return candidates
