"""Exceptions raised by the core layer."""

from __future__ import annotations

from chessmaster.core.enums import RejectReason

_REASON_TEXT: dict[RejectReason, str] = {
    RejectReason.NO_PIECE: "no piece on the origin square",
    RejectReason.WRONG_TURN: "piece does not belong to the side to move",
    RejectReason.OFF_BOARD: "square is off the board",
    RejectReason.ILLEGAL_GEOMETRY: "piece cannot move that way",
    RejectReason.LEAVES_KING_IN_CHECK: "leaves own king in check",
    RejectReason.GAME_OVER: "the game is already over",
}


class IllegalMoveError(ValueError):
    """A move request was rejected; the position is unchanged."""

    def __init__(self, reason: RejectReason, detail: str = "") -> None:
        self.reason = reason
        message = _REASON_TEXT[reason]
        if detail:
            message = f"{detail}: {message}"
        super().__init__(message)


class NotationError(ValueError):
    """Move text could not be parsed."""


class SnapshotError(ValueError):
    """A saved game could not be decoded."""
