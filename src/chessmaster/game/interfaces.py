"""Abstract interfaces and state enums for the game layer.

The console depends on :class:`IGameSession`, not on the concrete session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmaster.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    CHECKMATE = auto()
    STALEMATE = auto()
    FIFTY_MOVE_RULE = auto()
    CHECK_LIMIT = auto()
    ABORTED = auto()


# ── Session interface ───────────────────────────────────────────────────────


class IGameSession(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self) -> None:
        """Reset to the standard starting position."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""

    @abstractmethod
    def save(self, path: str | Path | None = None) -> bool:
        """Write the current position to disk. Returns True on success."""

    @abstractmethod
    def load(self, path: str | Path | None = None) -> bool:
        """Replace the current position from disk. Returns True on success."""
