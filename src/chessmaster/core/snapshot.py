"""Plain-text save format.

Layout::

    1 1 1 1 0 1        <- castling K-side/Q-side white, K-side/Q-side black,
    rnbqkbnr              half-move clock, full-move number
    pppppppp
    ........           <- eight rows of eight characters, row 0 (rank 8) first
    ...
    RNBQKBNR

Exactly eight rows of exactly eight characters must follow the header, and
each side must have exactly one king.  Blank lines after the board are
allowed.

Side to move, the last move and the capture lists are not stored, and
neither is ``has_moved``.  On load, kings and rooks standing on their home
squares are treated as unmoved only while the matching castling right is
still set; every other piece is marked as moved.
"""

from __future__ import annotations

from pathlib import Path

from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color, PieceType
from chessmaster.core.errors import SnapshotError
from chessmaster.core.piece import EMPTY_CHAR, Piece
from chessmaster.core.position import Position
from chessmaster.core.types import BOARD_SIZE, Square

# Header order of the four castling flags.
_FLAG_ORDER: tuple[CastlingRights, ...] = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)

_HOME_KING_COL = 4


def dumps(position: Position) -> str:
    """Serialise *position* to the save format (trailing newline included)."""
    flags = ["1" if position.castling & right else "0" for right in _FLAG_ORDER]
    header = " ".join(
        [*flags, str(position.halfmove_clock), str(position.fullmove_number)]
    )
    return "\n".join([header, *position.board.rows()]) + "\n"


def _parse_flag(field: str) -> bool:
    if field not in ("0", "1"):
        raise SnapshotError(f"Invalid castling flag: {field!r}")
    return field == "1"


def _parse_int(field: str, name: str, minimum: int) -> int:
    try:
        value = int(field)
    except ValueError:
        raise SnapshotError(f"Invalid {name}: {field!r}") from None
    if value < minimum:
        raise SnapshotError(f"Invalid {name}: {field!r}")
    return value


def _unmoved(piece: Piece, sq: Square, castling: CastlingRights) -> bool:
    """Best guess of ``has_moved`` from the castling rights alone."""
    home = piece.color.home_row
    if piece.piece_type == PieceType.KING:
        return sq == (home, _HOME_KING_COL) and bool(
            castling & CastlingRights.both(piece.color)
        )
    if piece.piece_type == PieceType.ROOK:
        if sq == (home, 7):
            return bool(castling & CastlingRights.for_side(piece.color, True))
        if sq == (home, 0):
            return bool(castling & CastlingRights.for_side(piece.color, False))
    return False


def loads(text: str, side_to_move: Color = Color.WHITE) -> Position:
    """Rebuild a :class:`Position` from save-format *text*.

    Raises:
        SnapshotError: the text does not follow the format.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) != 1 + BOARD_SIZE:
        raise SnapshotError(
            f"Snapshot needs a header and {BOARD_SIZE} board rows, got {len(lines)} lines"
        )

    fields = lines[0].split()
    if len(fields) != 6:
        raise SnapshotError(f"Snapshot header needs 6 fields: {lines[0]!r}")

    castling = CastlingRights.NONE
    for right, field in zip(_FLAG_ORDER, fields[:4]):
        if _parse_flag(field):
            castling |= right
    halfmove = _parse_int(fields[4], "half-move clock", 0)
    fullmove = _parse_int(fields[5], "full-move number", 1)

    board = Board()
    for row, line in enumerate(lines[1 : 1 + BOARD_SIZE]):
        if len(line) != BOARD_SIZE:
            raise SnapshotError(
                f"Board row {row} must have {BOARD_SIZE} squares: {line!r}"
            )
        for col, char in enumerate(line):
            if char == EMPTY_CHAR:
                continue
            try:
                piece = Piece.from_char(char)
            except ValueError as exc:
                raise SnapshotError(str(exc)) from None
            sq = (row, col)
            board[sq] = Piece.from_char(char, not _unmoved(piece, sq, castling))

    for color in Color:
        kings = sum(
            1
            for _, piece in board.pieces(color)
            if piece.piece_type == PieceType.KING
        )
        if kings != 1:
            raise SnapshotError(f"{color!s} must have exactly one king, found {kings}")

    return Position(
        board=board,
        side_to_move=side_to_move,
        castling=castling,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def save(path: str | Path, position: Position) -> None:
    """Write *position* to *path*; ``OSError`` propagates."""
    Path(path).write_text(dumps(position), encoding="utf-8")


def load(path: str | Path, side_to_move: Color = Color.WHITE) -> Position:
    """Read a position from *path*; ``OSError`` and :class:`SnapshotError` propagate."""
    return loads(Path(path).read_text(encoding="utf-8"), side_to_move)
