"""Tests for Position bookkeeping."""

from chessmaster.core.enums import CastlingRights, Color
from chessmaster.core.position import Position
from chessmaster.core.types import E2, E4


class TestDefaults:
    def test_starting_values(self) -> None:
        pos = Position()
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.last_move is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1
        assert pos.captured_by(Color.WHITE) == ()
        assert pos.captured_by(Color.BLACK) == ()


class TestCastlingRights:
    def test_revoke_one_wing(self) -> None:
        pos = Position()
        pos.revoke_castling(Color.WHITE, kingside=True)
        assert not pos.can_castle(Color.WHITE, kingside=True)
        assert pos.can_castle(Color.WHITE, kingside=False)
        assert pos.can_castle(Color.BLACK, kingside=True)

    def test_revoke_both_wings(self) -> None:
        pos = Position()
        pos.revoke_castling(Color.BLACK)
        assert pos.castling == CastlingRights.WHITE_BOTH

    def test_revoking_twice_is_harmless(self) -> None:
        pos = Position()
        pos.revoke_castling(Color.WHITE, kingside=False)
        pos.revoke_castling(Color.WHITE, kingside=False)
        assert pos.castling == CastlingRights.ALL & ~CastlingRights.WHITE_QUEENSIDE


class TestCopy:
    def test_copy_is_equal_and_independent(self) -> None:
        pos = Position()
        pos.captures[Color.WHITE].append("p")
        clone = pos.copy()
        assert clone == pos

        clone.board[E4] = clone.board[E2]
        clone.board[E2] = None
        clone.captures[Color.WHITE].append("n")
        clone.halfmove_clock = 3
        clone.revoke_castling(Color.WHITE)

        assert pos.board[E2] is not None
        assert pos.captured_by(Color.WHITE) == ("p",)
        assert pos.halfmove_clock == 0
        assert pos.castling == CastlingRights.ALL
        assert clone != pos

    def test_captured_by_is_a_snapshot(self) -> None:
        pos = Position()
        view = pos.captured_by(Color.BLACK)
        pos.captures[Color.BLACK].append("P")
        assert view == ()
