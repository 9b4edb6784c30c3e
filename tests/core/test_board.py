"""Tests for Board."""

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, PieceType
from chessmaster.core.piece import Piece
from chessmaster.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D3, E2, E3, E4, E5, F3, H5,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        assert board.rows()[1] == "pppppppp"
        assert board.rows()[6] == "PPPPPPPP"

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert not any(piece.has_moved for _, piece in board.squares())

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_equality_ignores_has_moved(self) -> None:
        a = Board()
        b = Board()
        a[E4] = Piece(Color.WHITE, PieceType.ROOK)
        b[E4] = Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert a == b

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.rows() == ["........"] * 8

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestFindKing:
    def test_initial(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_missing_king_is_none(self) -> None:
        assert Board().find_king(Color.WHITE) is None


class TestPathAndAttack:
    def test_path_blocked_by_own_pawn(self) -> None:
        board = Board.initial()
        assert not board.is_path_clear(D1, (4, 3))

    def test_path_ignores_endpoints(self) -> None:
        board = Board.initial()
        assert board.is_path_clear(E2, E3)
        assert board.is_path_clear(D1, E2)

    def test_diagonal_path(self) -> None:
        board = Board()
        assert board.is_path_clear(F1, (4, 2))
        board[E2] = Piece(Color.BLACK, PieceType.PAWN)
        assert not board.is_path_clear(F1, (4, 2))

    def test_pawn_never_attacks_empty_square(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        assert pawn is not None
        assert not board.can_attack(pawn, E2, E3)
        assert not board.can_attack(pawn, E2, D3)
        assert not board.can_attack(pawn, E2, F3)

    def test_pawn_attacks_enemy_diagonally_forward_only(self) -> None:
        board = Board()
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = pawn
        board[(3, 3)] = Piece(Color.BLACK, PieceType.KNIGHT)  # d5
        board[(5, 3)] = Piece(Color.BLACK, PieceType.KNIGHT)  # d3
        assert board.can_attack(pawn, E4, (3, 3))
        assert not board.can_attack(pawn, E4, (5, 3))

    def test_pawn_does_not_attack_own_piece(self) -> None:
        board = Board()
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        board[E5] = pawn
        board[(4, 3)] = Piece(Color.BLACK, PieceType.KNIGHT)  # d4
        assert not board.can_attack(pawn, E5, (4, 3))

    def test_knight_offsets(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.can_attack(knight, G1, F3)
        assert board.can_attack(knight, G1, (6, 4))
        assert not board.can_attack(knight, G1, (5, 6))

    def test_knight_reaches_exactly_eight_squares(self) -> None:
        board = Board()
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        targets = {
            (row, col)
            for row in range(8)
            for col in range(8)
            if (row, col) != E4 and board.can_attack(knight, E4, (row, col))
        }
        assert targets == {
            (2, 3), (2, 5), (3, 2), (3, 6),
            (5, 2), (5, 6), (6, 3), (6, 5),
        }

    def test_slider_alignment(self) -> None:
        board = Board()
        rook = Piece(Color.WHITE, PieceType.ROOK)
        bishop = Piece(Color.WHITE, PieceType.BISHOP)
        queen = Piece(Color.WHITE, PieceType.QUEEN)
        assert board.can_attack(rook, A1, A8)
        assert not board.can_attack(rook, A1, (6, 1))
        assert board.can_attack(bishop, C1, (2, 7))
        assert not board.can_attack(bishop, C1, (7, 5))
        assert board.can_attack(queen, D1, H5)
        assert board.can_attack(queen, D1, D8)
        assert not board.can_attack(queen, D1, (5, 4))

    def test_king_one_square(self) -> None:
        board = Board()
        king = Piece(Color.WHITE, PieceType.KING)
        assert board.can_attack(king, E1, (6, 5))
        assert not board.can_attack(king, E1, G1)


class TestIsInCheck:
    def test_initial_not_in_check(self) -> None:
        board = Board.initial()
        assert not board.is_in_check(Color.WHITE)
        assert not board.is_in_check(Color.BLACK)

    def test_rook_check_and_block(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        board[E8] = Piece(Color.BLACK, PieceType.ROOK)
        assert board.is_in_check(Color.WHITE)
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        assert not board.is_in_check(Color.WHITE)

    def test_pawn_check(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        board[(6, 3)] = Piece(Color.BLACK, PieceType.PAWN)  # d2
        assert board.is_in_check(Color.WHITE)

    def test_missing_king_is_not_in_check(self) -> None:
        board = Board()
        board[E8] = Piece(Color.BLACK, PieceType.QUEEN)
        assert not board.is_in_check(Color.WHITE)
