"""Board - piece placement on an 8x8 grid plus attack queries."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.piece import EMPTY_CHAR, Piece
from chessmaster.core.types import BOARD_SIZE, FILES, Square, is_on_board

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 8x8 grid indexed by ``(row, col)`` squares."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @staticmethod
    def is_on_board(sq: Square) -> bool:
        return is_on_board(sq)

    def squares(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._grid[row][col]
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All of *color*'s pieces with their squares."""
        return [(sq, p) for sq, p in self.squares() if p.color == color]

    # -- Attack queries -----------------------------------------------------

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if there is none."""
        for sq, piece in self.squares():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between two aligned squares is empty.

        Callers must make sure the squares share a row, a column or a diagonal.
        """
        row_step = _sign(to_sq[0] - from_sq[0])
        col_step = _sign(to_sq[1] - from_sq[1])
        row, col = from_sq[0] + row_step, from_sq[1] + col_step
        while (row, col) != to_sq:
            if not is_on_board((row, col)) or self._grid[row][col] is not None:
                return False
            row += row_step
            col += col_step
        return True

    def can_attack(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Geometric attack test, ignoring turn order and self-check.

        Pawns only attack one square diagonally forward, and only when an
        enemy piece stands there.  Sliders need a clear path.
        """
        row_diff = to_sq[0] - from_sq[0]
        col_diff = to_sq[1] - from_sq[1]
        abs_row = abs(row_diff)
        abs_col = abs(col_diff)
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            target = self[to_sq]
            return (
                row_diff == piece.color.forward
                and abs_col == 1
                and target is not None
                and target.color != piece.color
            )
        if ptype == PieceType.KING:
            return abs_row <= 1 and abs_col <= 1
        if ptype == PieceType.KNIGHT:
            return (abs_row, abs_col) in ((2, 1), (1, 2))

        straight = row_diff == 0 or col_diff == 0
        diagonal = abs_row == abs_col
        if ptype == PieceType.ROOK:
            aligned = straight
        elif ptype == PieceType.BISHOP:
            aligned = diagonal
        else:
            aligned = straight or diagonal
        return aligned and self.is_path_clear(from_sq, to_sq)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return any(
            piece.color == by_color and from_sq != sq and self.can_attack(piece, from_sq, sq)
            for from_sq, piece in self.squares()
        )

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without that king is reported as not in check.
        """
        king_sq = self.find_king(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board; treating as not in check", color)
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Text helpers -------------------------------------------------------

    def rows(self) -> list[str]:
        """Eight 8-character strings, row 0 (rank 8) first, '.' for empty."""
        return [
            "".join(str(p) if p is not None else EMPTY_CHAR for p in row)
            for row in self._grid
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines = [
            f"{BOARD_SIZE - i} {' '.join(text)}" for i, text in enumerate(self.rows())
        ]
        lines.append(f"  {' '.join(FILES)}")
        return "\n".join(lines)
