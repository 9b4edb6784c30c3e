"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmaster.core.enums import Color, GameResult
from chessmaster.core.move_engine import MoveEngine

if TYPE_CHECKING:
    from chessmaster.core.position import Position

# Plies without a capture or pawn move after which the game is drawn.
FIFTY_MOVE_HALFMOVES = 50


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy:
    # - The no-progress draw is automatic once the half-move clock reaches 50.
    # - No repetition or insufficient-material draws.

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return position.board.is_in_check(color)

    @staticmethod
    def has_legal_moves(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return MoveEngine(position).has_legal_moves(color)

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        if not Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_moves(position, color)

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        if Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_moves(position, color)

    @staticmethod
    def is_draw(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result for the side to move."""
        color = position.side_to_move
        if not Rules.has_legal_moves(position, color):
            if Rules.is_in_check(position, color):
                return GameResult.win_for(color.opposite)
            return GameResult.DRAW  # stalemate

        if Rules.is_draw(position):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
