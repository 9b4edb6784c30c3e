"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmaster.core import MoveEngine, Rules, parse_move

    engine = MoveEngine()
    outcome = engine.apply_move(parse_move("e2 e4"))
    print(engine.position.board)
    print(Rules.is_checkmate(engine.position))
"""

from chessmaster.core.board import Board
from chessmaster.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    MoveFlag,
    PieceType,
    RejectReason,
)
from chessmaster.core.errors import IllegalMoveError, NotationError, SnapshotError
from chessmaster.core.move import Move, MoveOutcome
from chessmaster.core.move_engine import MoveEngine, play_move
from chessmaster.core.notation import format_move, parse_move
from chessmaster.core.piece import Piece
from chessmaster.core.position import Position
from chessmaster.core.rules import Rules
from chessmaster.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    "RejectReason",
    # Errors
    "IllegalMoveError",
    "NotationError",
    "SnapshotError",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveEngine",
    "MoveOutcome",
    "Piece",
    "Position",
    "Rules",
    "play_move",
    # Notation
    "format_move",
    "parse_move",
]
