"""Position — complete game state (board + castling, clocks, captures)."""

from __future__ import annotations

from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color
from chessmaster.core.types import Square


class Position:
    """Full chess position: board + side to move + castling + last move + clocks.

    Positions are never rolled back in place.  The move engine copies a
    position, plays the move on the copy and keeps or discards the copy.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "last_move",
        "halfmove_clock",
        "fullmove_number",
        "captures",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        last_move: tuple[Square, Square] | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        captures: dict[Color, list[str]] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.last_move = last_move
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.captures: dict[Color, list[str]] = {
            Color.WHITE: [],
            Color.BLACK: [],
        }
        if captures is not None:
            for color, symbols in captures.items():
                self.captures[color] = list(symbols)

    # ── Castling rights ──────────────────────────────────────────────────

    def can_castle(self, color: Color, kingside: bool) -> bool:
        return bool(self.castling & CastlingRights.for_side(color, kingside))

    def revoke_castling(self, color: Color, kingside: bool | None = None) -> None:
        """Clear one wing's right, or both when *kingside* is ``None``.

        Rights are never granted back once revoked.
        """
        if kingside is None:
            self.castling &= ~CastlingRights.both(color)
        else:
            self.castling &= ~CastlingRights.for_side(color, kingside)

    # ── Read-only views ──────────────────────────────────────────────────

    def captured_by(self, color: Color) -> tuple[str, ...]:
        """Symbols of the pieces *color* has captured, oldest first."""
        return tuple(self.captures[color])

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent deep copy."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            last_move=self.last_move,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            captures=self.captures,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.last_move == other.last_move
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
            and self.captures == other.captures
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move!s}, "
            f"castling={self.castling!r}, halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})"
        )
