"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fogchess.core.enums import Player, Unit

# Placement character ↔ (Player, Unit)
_CHAR_MAP: dict[str, tuple[Player, Unit]] = {
    "P": (Player.WHITE, Unit.PAWN),
    "N": (Player.WHITE, Unit.KNIGHT),
    "B": (Player.WHITE, Unit.BISHOP),
    "R": (Player.WHITE, Unit.ROOK),
    "Q": (Player.WHITE, Unit.QUEEN),
    "K": (Player.WHITE, Unit.KING),
    "p": (Player.BLACK, Unit.PAWN),
    "n": (Player.BLACK, Unit.KNIGHT),
    "b": (Player.BLACK, Unit.BISHOP),
    "r": (Player.BLACK, Unit.ROOK),
    "q": (Player.BLACK, Unit.QUEEN),
    "k": (Player.BLACK, Unit.KING),
}

_PLACEMENT_CHARS: dict[tuple[Player, Unit], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

# Solid glyphs for every unit; the renderer tints them by owner.
_GLYPHS: dict[Unit, str] = {
    Unit.PAWN: "♟",
    Unit.KNIGHT: "♞",
    Unit.BISHOP: "♝",
    Unit.ROOK: "♜",
    Unit.QUEEN: "♛",
    Unit.KING: "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A unit owned by a player, with the number of times it has relocated."""

    unit: Unit
    player: Player
    moved: int = 0

    def moved_once(self) -> Piece:
        """Copy of this piece with the relocation counter bumped by one."""
        return replace(self, moved=self.moved + 1)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _PLACEMENT_CHARS[(self.player, self.unit)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create an unmoved piece from a placement character, e.g. 'N'."""
        try:
            player, unit = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(unit, player)

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _GLYPHS[self.unit]
