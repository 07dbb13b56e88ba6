"""Move rejections.

Every rejection is recoverable: the board is left untouched and the
caller re-prompts. ``reason`` lets a UI branch without matching on types.
"""

from __future__ import annotations

from checkie.core.enums import RejectionReason


class MoveRejected(Exception):
    """Base class for a refused move."""

    reason: RejectionReason = RejectionReason.ILLEGAL_MOVE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedSquare(MoveRejected, ValueError):
    reason = RejectionReason.MALFORMED_SQUARE


class NotADarkSquare(MoveRejected):
    reason = RejectionReason.NOT_A_DARK_SQUARE


class NotYourPiece(MoveRejected):
    reason = RejectionReason.NOT_YOUR_PIECE


class DestinationOccupied(MoveRejected):
    reason = RejectionReason.DESTINATION_OCCUPIED


class IllegalMove(MoveRejected):
    """Well-formed, but not in the current legal-move set."""

    reason = RejectionReason.ILLEGAL_MOVE


class ChainViolation(MoveRejected):
    """A forced continuation jump was not taken."""

    reason = RejectionReason.CHAIN_VIOLATION


class GameFinished(MoveRejected):
    reason = RejectionReason.GAME_OVER
