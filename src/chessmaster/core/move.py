"""Move request and move outcome value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmaster.core.enums import MoveFlag, PieceType
from chessmaster.core.types import Square, square_name

if TYPE_CHECKING:
    from chessmaster.core.board import Board
    from chessmaster.core.piece import Piece

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move request: two squares and an optional promotion choice.

    ``promotion`` is only consulted when a pawn reaches its last row; an
    unset or non-promotable choice means a queen.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)} {square_name(self.to_sq)}"
        if self.promotion is not None and self.promotion in _PROMO_CHARS:
            base += "=" + _PROMO_CHARS[self.promotion]
        return base


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Everything a committed move changed."""

    move: Move
    piece: Piece
    flag: MoveFlag
    captured: Piece | None
    promoted_to: PieceType | None
    changed_squares: tuple[Square, ...]
    board: Board
    gives_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    @property
    def is_promotion(self) -> bool:
        return self.promoted_to is not None
