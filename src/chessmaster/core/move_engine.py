"""Move validation, speculative play and transactional commit."""

from __future__ import annotations

from dataclasses import dataclass

from chessmaster.core.enums import (
    PROMOTION_TYPES,
    Color,
    MoveFlag,
    PieceType,
    RejectReason,
)
from chessmaster.core.errors import IllegalMoveError
from chessmaster.core.move import Move, MoveOutcome
from chessmaster.core.piece import Piece
from chessmaster.core.position import Position
from chessmaster.core.types import BOARD_SIZE, Square, is_on_board, square_name

_KINGSIDE_ROOK_COL = 7
_QUEENSIDE_ROOK_COL = 0

_ALL_SQUARES: tuple[Square, ...] = tuple(
    (row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


@dataclass(frozen=True, slots=True)
class _Effects:
    """Side effects of playing a move, collected for :class:`MoveOutcome`."""

    flag: MoveFlag
    captured: Piece | None
    promoted_to: PieceType | None
    changed_squares: tuple[Square, ...]


def _classify(piece: Piece, move: Move, target: Piece | None) -> MoveFlag:
    row_diff = move.to_sq[0] - move.from_sq[0]
    col_diff = move.to_sq[1] - move.from_sq[1]
    if piece.piece_type == PieceType.KING and row_diff == 0 and abs(col_diff) == 2:
        return MoveFlag.CASTLE_KINGSIDE if col_diff > 0 else MoveFlag.CASTLE_QUEENSIDE
    if piece.piece_type != PieceType.PAWN:
        return MoveFlag.NORMAL
    if move.to_sq[0] == piece.color.opposite.home_row:
        return MoveFlag.PROMOTION
    if abs(col_diff) == 1 and target is None:
        return MoveFlag.EN_PASSANT
    if abs(row_diff) == 2:
        return MoveFlag.DOUBLE_PAWN
    return MoveFlag.NORMAL


def _promotion_choice(move: Move) -> PieceType:
    if move.promotion in PROMOTION_TYPES:
        return move.promotion
    return PieceType.QUEEN


def _home_corner_wing(color: Color, sq: Square) -> bool | None:
    """``True``/``False`` for *color*'s kingside/queenside rook corner, else ``None``."""
    if sq == (color.home_row, _KINGSIDE_ROOK_COL):
        return True
    if sq == (color.home_row, _QUEENSIDE_ROOK_COL):
        return False
    return None


def _play(position: Position, move: Move) -> tuple[Position, _Effects]:
    """Play *move* on a copy of *position*; the input is never touched.

    No legality checks happen here.  Secondary effects (rook relocation,
    en passant victim removal, promotion) and all bookkeeping (captures,
    castling rights, clocks, last move, side to move) are applied.
    """
    from_sq, to_sq = move.from_sq, move.to_sq
    pos = position.copy()
    board = pos.board
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")

    captured = board[to_sq]
    capture_sq = to_sq
    flag = _classify(piece, move, captured)
    changed: list[Square] = [from_sq, to_sq]

    if flag == MoveFlag.EN_PASSANT:
        capture_sq = (from_sq[0], to_sq[1])
        captured = board[capture_sq]
        board[capture_sq] = None
        changed.append(capture_sq)

    board[from_sq] = None
    promoted_to: PieceType | None = None
    if flag == MoveFlag.PROMOTION:
        promoted_to = _promotion_choice(move)
        board[to_sq] = piece.promoted(promoted_to)
    else:
        board[to_sq] = piece.moved()

    if flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE):
        row = from_sq[0]
        if flag == MoveFlag.CASTLE_KINGSIDE:
            rook_from, rook_to = (row, _KINGSIDE_ROOK_COL), (row, from_sq[1] + 1)
        else:
            rook_from, rook_to = (row, _QUEENSIDE_ROOK_COL), (row, from_sq[1] - 1)
        rook = board[rook_from]
        if rook is not None:
            board[rook_to] = rook.moved()
            board[rook_from] = None
        changed.extend((rook_from, rook_to))

    # Captures
    if captured is not None:
        pos.captures[piece.color].append(str(captured))

    # Castling rights
    if piece.piece_type == PieceType.KING:
        pos.revoke_castling(piece.color)
    elif piece.piece_type == PieceType.ROOK:
        wing = _home_corner_wing(piece.color, from_sq)
        if wing is not None:
            pos.revoke_castling(piece.color, wing)
    if captured is not None and captured.piece_type == PieceType.ROOK:
        wing = _home_corner_wing(captured.color, capture_sq)
        if wing is not None:
            pos.revoke_castling(captured.color, wing)

    # Clocks
    if piece.piece_type == PieceType.PAWN or captured is not None:
        pos.halfmove_clock = 0
    else:
        pos.halfmove_clock += 1
    if piece.color == Color.BLACK:
        pos.fullmove_number += 1

    pos.last_move = (from_sq, to_sq)
    pos.side_to_move = piece.color.opposite

    return pos, _Effects(flag, captured, promoted_to, tuple(changed))


def play_move(position: Position, move: Move) -> Position:
    """Pure speculative application: the position after *move*, legal or not."""
    return _play(position, move)[0]


class MoveEngine:
    """Validates and commits moves against one :class:`Position`.

    The wrapped position is replaced, never mutated, when a move is
    committed.  Rejected moves leave it exactly as it was.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position | None = None) -> None:
        self._pos = position if position is not None else Position()

    @property
    def position(self) -> Position:
        return self._pos

    # -- Validation ---------------------------------------------------------

    def validate_move(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Geometry and special-move rules only; self-check is not considered."""
        if not is_on_board(from_sq) or not is_on_board(to_sq):
            return False
        if from_sq == to_sq:
            return False

        board = self._pos.board
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        if piece.piece_type == PieceType.PAWN:
            return self._validate_pawn(piece, from_sq, to_sq, target)
        if piece.piece_type == PieceType.KING:
            row_diff = to_sq[0] - from_sq[0]
            col_diff = to_sq[1] - from_sq[1]
            if abs(row_diff) <= 1 and abs(col_diff) <= 1:
                return True
            if row_diff == 0 and abs(col_diff) == 2:
                return self._can_castle(piece, from_sq, to_sq)
            return False
        return board.can_attack(piece, from_sq, to_sq)

    def _validate_pawn(
        self, piece: Piece, from_sq: Square, to_sq: Square, target: Piece | None
    ) -> bool:
        board = self._pos.board
        forward = piece.color.forward
        row_diff = to_sq[0] - from_sq[0]
        col_diff = to_sq[1] - from_sq[1]

        if col_diff == 0 and target is None:
            if row_diff == forward:
                return True
            start_row = piece.color.home_row + forward
            if row_diff == 2 * forward and from_sq[0] == start_row:
                return board[(from_sq[0] + forward, from_sq[1])] is None
            return False

        if row_diff == forward and abs(col_diff) == 1:
            if target is not None:
                return True
            return self._is_en_passant(piece, from_sq, to_sq)
        return False

    def _is_en_passant(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Only on the ply right after the enemy pawn's two-row advance beside us."""
        victim_sq = (from_sq[0], to_sq[1])
        victim = self._pos.board[victim_sq]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == piece.color
        ):
            return False
        jump_from = (from_sq[0] + 2 * piece.color.forward, to_sq[1])
        return self._pos.last_move == (jump_from, victim_sq)

    def _can_castle(self, king: Piece, from_sq: Square, to_sq: Square) -> bool:
        if king.has_moved:
            return False
        kingside = to_sq[1] > from_sq[1]
        color = king.color
        if not self._pos.can_castle(color, kingside):
            return False

        board = self._pos.board
        row = from_sq[0]
        rook_col = _KINGSIDE_ROOK_COL if kingside else _QUEENSIDE_ROOK_COL
        rook = board[(row, rook_col)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
            or rook.has_moved
        ):
            return False

        step = 1 if kingside else -1
        for col in range(from_sq[1] + step, rook_col, step):
            if board[(row, col)] is not None:
                return False

        if board.is_in_check(color):
            return False

        # The king may neither pass through nor land on an attacked square.
        for distance in (1, 2):
            probe = board.copy()
            probe[from_sq] = None
            probe[(row, from_sq[1] + distance * step)] = king
            if probe.is_in_check(color):
                return False
        return True

    # -- Legality -----------------------------------------------------------

    def is_legal(self, move: Move, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) may play *move*."""
        color = self._pos.side_to_move if color is None else color
        if not is_on_board(move.from_sq) or not is_on_board(move.to_sq):
            return False
        piece = self._pos.board[move.from_sq]
        if piece is None or piece.color != color:
            return False
        if not self.validate_move(piece, move.from_sq, move.to_sq):
            return False
        return not play_move(self._pos, move).board.is_in_check(color)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Every legal (from, to) pair for *color*; promotions default to queen."""
        color = self._pos.side_to_move if color is None else color
        return [
            Move(from_sq, to_sq)
            for from_sq, piece in self._pos.board.pieces(color)
            for to_sq in _ALL_SQUARES
            if self._passes(piece, from_sq, to_sq, color)
        ]

    def has_legal_moves(self, color: Color) -> bool:
        return any(
            self._passes(piece, from_sq, to_sq, color)
            for from_sq, piece in self._pos.board.pieces(color)
            for to_sq in _ALL_SQUARES
        )

    def _passes(self, piece: Piece, from_sq: Square, to_sq: Square, color: Color) -> bool:
        if not self.validate_move(piece, from_sq, to_sq):
            return False
        after = play_move(self._pos, Move(from_sq, to_sq))
        return not after.board.is_in_check(color)

    # -- Commit -------------------------------------------------------------

    def apply_move(self, move: Move) -> MoveOutcome:
        """Validate, simulate and commit *move* for the side to move.

        Raises:
            IllegalMoveError: the move is rejected; nothing was changed.
        """
        pos = self._pos
        if not is_on_board(move.from_sq) or not is_on_board(move.to_sq):
            raise IllegalMoveError(RejectReason.OFF_BOARD, f"{move.from_sq}->{move.to_sq}")

        text = str(move)
        piece = pos.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(RejectReason.NO_PIECE, text)
        if piece.color != pos.side_to_move:
            raise IllegalMoveError(RejectReason.WRONG_TURN, text)
        if not self.validate_move(piece, move.from_sq, move.to_sq):
            raise IllegalMoveError(RejectReason.ILLEGAL_GEOMETRY, text)

        candidate, effects = _play(pos, move)
        if candidate.board.is_in_check(piece.color):
            raise IllegalMoveError(RejectReason.LEAVES_KING_IN_CHECK, text)

        opponent = piece.color.opposite
        gives_check = candidate.board.is_in_check(opponent)
        stuck = not MoveEngine(candidate).has_legal_moves(opponent)

        self._pos = candidate
        return MoveOutcome(
            move=move,
            piece=piece,
            flag=effects.flag,
            captured=effects.captured,
            promoted_to=effects.promoted_to,
            changed_squares=effects.changed_squares,
            board=candidate.board.copy(),
            gives_check=gives_check,
            is_checkmate=gives_check and stuck,
            is_stalemate=not gives_check and stuck,
        )
