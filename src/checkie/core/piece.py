"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Rank

# Diagram character ↔ (Color, Rank)
_CHAR_MAP: dict[str, tuple[Color, Rank]] = {
    "w": (Color.WHITE, Rank.MAN),
    "W": (Color.WHITE, Rank.KING),
    "b": (Color.BLACK, Rank.MAN),
    "B": (Color.BLACK, Rank.KING),
}

_DIAGRAM_CHARS: dict[tuple[Color, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece."""

    color: Color
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def crowned(self) -> Piece:
        """The king of the same color."""
        return Piece(self.color, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (lowercase = man, uppercase = king)."""
        return _DIAGRAM_CHARS[(self.color, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from diagram character, e.g. 'B' → black king."""
        try:
            color, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, rank)
