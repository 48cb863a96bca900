"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from fogchess.core.enums import Player, Unit
from fogchess.core.piece import Piece
from fogchess.core.types import BOARD_SIZE, Coord, cell_index, in_bounds

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[Unit, ...] = (
    Unit.ROOK,
    Unit.KNIGHT,
    Unit.BISHOP,
    Unit.QUEEN,
    Unit.KING,
    Unit.BISHOP,
    Unit.KNIGHT,
    Unit.ROOK,
)


class Board:
    """Mutable 64-cell board; each slot holds at most one :class:`Piece`.

    Every accessor treats out-of-range coordinates as empty and every
    mutator ignores them.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * _CELL_COUNT

    # -- Element access -----------------------------------------------------

    def get(self, pos: Coord) -> Piece | None:
        """Piece at *pos*, or ``None`` if empty or off the board."""
        if not in_bounds(pos):
            return None
        return self._cells[cell_index(pos)]

    def set(self, pos: Coord, piece: Piece) -> None:
        """Overwrite the cell at *pos*.  No-op when *pos* is off the board."""
        if in_bounds(pos):
            self._cells[cell_index(pos)] = piece

    def clear_cell(self, pos: Coord) -> None:
        if in_bounds(pos):
            self._cells[cell_index(pos)] = None

    def is_empty(self, pos: Coord) -> bool:
        return self.get(pos) is None

    def move_piece(self, from_pos: Coord, to_pos: Coord) -> None:
        """Relocate the piece at *from_pos* onto *to_pos*.

        The piece's ``moved`` counter goes up by one and whatever stood on
        *to_pos* is discarded.  No-op if either coordinate is off the board
        or *from_pos* is empty.
        """
        if not (in_bounds(from_pos) and in_bounds(to_pos)):
            return
        src = cell_index(from_pos)
        piece = self._cells[src]
        if piece is None:
            return
        self._cells[src] = None
        self._cells[cell_index(to_pos)] = piece.moved_once()

    # -- Iteration ----------------------------------------------------------

    def cells(self) -> Iterator[tuple[int, int, Piece | None]]:
        """``(x, y, piece)`` for every cell, row 0 first, column 0 first."""
        for idx, piece in enumerate(self._cells):
            yield idx % BOARD_SIZE, idx // BOARD_SIZE, piece

    def __iter__(self) -> Iterator[tuple[int, int, Piece | None]]:
        return self.cells()

    def pieces(self, player: Player) -> list[Coord]:
        """Coordinates of every piece owned by *player*, row-major."""
        return [
            (x, y)
            for x, y, piece in self.cells()
            if piece is not None and piece.player == player
        ]

    def piece_count(self) -> int:
        return sum(piece is not None for piece in self._cells)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * _CELL_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout: White on rows 0-1, Black on rows 6-7."""
        b = cls()
        for x in range(BOARD_SIZE):
            b.set((x, 1), Piece(Unit.PAWN, Player.WHITE))
            b.set((x, 6), Piece(Unit.PAWN, Player.BLACK))
        for x, unit in enumerate(_BACK_RANK):
            b.set((x, 0), Piece(unit, Player.WHITE))
            b.set((x, 7), Piece(unit, Player.BLACK))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for x in range(BOARD_SIZE):
                p = self._cells[cell_index((x, y))]
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
