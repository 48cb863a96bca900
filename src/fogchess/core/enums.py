"""Core enumerations for the fog-of-war chess domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side owning a piece."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction a pawn of this side advances in."""
        return 1 if self == Player.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class Unit(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
