"""Selection — duplicate-free set of selected cells."""

from __future__ import annotations

from collections.abc import Iterator

from fogchess.core.types import Coord


class Selection:
    """Set of coordinates that remembers the order they were added in.

    Backed by a dict so a coordinate can never be held twice.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[Coord, None] = {}

    def add(self, pos: Coord) -> bool:
        """Add *pos*; returns False if it was already selected."""
        if pos in self._cells:
            return False
        self._cells[pos] = None
        return True

    def replace(self, pos: Coord) -> None:
        """Make *pos* the only selected cell."""
        self._cells = {pos: None}

    def clear(self) -> None:
        self._cells = {}

    def first(self) -> Coord | None:
        return next(iter(self._cells), None)

    def first_two(self) -> list[Coord]:
        return list(self._cells)[:2]

    def as_set(self) -> frozenset[Coord]:
        return frozenset(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(list(self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self.as_set() == other.as_set()

    def __repr__(self) -> str:
        return f"Selection({list(self._cells)!r})"
