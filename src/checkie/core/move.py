"""Move and MoveOutcome value objects."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one step or one jump.

    ``captured_sq`` is only set for a jump; it is the square between
    ``from_sq`` and ``to_sq``.
    """

    from_sq: Square
    to_sq: Square
    captured_sq: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_sq is not None

    def matches(self, from_sq: Square, to_sq: Square) -> bool:
        return self.from_sq == from_sq and self.to_sq == to_sq

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of an accepted move.

    When ``turn_complete`` is false the same piece, now on
    ``active_square``, must jump again to one of ``continuations``.
    """

    move: Move
    turn_complete: bool
    active_square: Square | None = None
    continuations: tuple[Square, ...] = ()
    promoted: bool = False
