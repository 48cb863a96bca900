"""Placement strings: the board field of FEN, used for scenarios and tests."""

from __future__ import annotations

from fogchess.core.board import Board
from fogchess.core.piece import Piece
from fogchess.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a placement string (row 7 first) into a fresh :class:`Board`.

    Every piece starts with ``moved == 0``.
    """
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {placement!r}")
    board = Board()
    for row_idx, row_text in enumerate(rows):
        y = BOARD_SIZE - 1 - row_idx
        x = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                x += step
            else:
                if x >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
                board.set((x, y), Piece.from_char(ch))
                x += 1
            if x > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        if x != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a placement string.  Move counters are dropped."""
    rows: list[str] = []
    for y in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for x in range(BOARD_SIZE):
            piece = board.get((x, y))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
