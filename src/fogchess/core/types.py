"""Coordinate type alias and board geometry helpers.

Coordinates are ``(column, row)`` pairs.  Row 0 is White's back rank, so
``a1 == (0, 0)`` and ``h8 == (7, 7)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def in_bounds(pos: Coord) -> bool:
    """Whether both components lie in ``0..7``."""
    x, y = pos
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def cell_index(pos: Coord) -> int:
    """Flat index ``row * 8 + col``.  Caller guarantees *pos* is in bounds."""
    x, y = pos
    return y * BOARD_SIZE + x


def coord_name(pos: Coord) -> str:
    """Human-readable name, e.g. ``(4, 1)`` → ``'e2'``."""
    if not in_bounds(pos):
        return f"({pos[0]}, {pos[1]})"
    return _FILES[pos[0]] + _RANKS[pos[1]]


def parse_coord(name: str) -> Coord:
    """Parse a cell name, e.g. ``'e2'`` → ``(4, 1)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid cell name: {name!r}")
    return (_FILES.index(name[0]), _RANKS.index(name[1]))


def all_cells() -> Iterator[Coord]:
    """Every coordinate in row-major order."""
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            yield (x, y)


def adjacent_cells(pos: Coord) -> list[Coord]:
    """The eight unit-distance neighbours of *pos*, not range-filtered."""
    x, y = pos
    return [
        (x + 1, y + 1),
        (x - 1, y - 1),
        (x + 1, y - 1),
        (x - 1, y + 1),
        (x + 1, y),
        (x - 1, y),
        (x, y + 1),
        (x, y - 1),
    ]
