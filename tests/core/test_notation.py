"""Tests for coordinate move notation."""

import pytest

from chessmaster.core.enums import PieceType
from chessmaster.core.errors import NotationError
from chessmaster.core.move import Move
from chessmaster.core.notation import format_move, parse_move, parse_promotion
from chessmaster.core.types import A7, A8, E2, E4


class TestParseMove:
    def test_plain(self) -> None:
        assert parse_move("e2 e4") == Move(E2, E4)

    def test_surrounding_whitespace(self) -> None:
        assert parse_move("  e2 e4\n") == Move(E2, E4)

    def test_promotion_suffix(self) -> None:
        assert parse_move("a7 a8=N") == Move(A7, A8, PieceType.KNIGHT)
        assert parse_move("a7 a8=r") == Move(A7, A8, PieceType.ROOK)

    def test_unknown_promotion_letter_means_queen(self) -> None:
        assert parse_move("a7 a8=K") == Move(A7, A8, PieceType.QUEEN)

    @pytest.mark.parametrize(
        "text",
        ["", "e2e4", "e2  e4", "e2-e4", "E2 E4", "e9 e4", "i2 e4", "e2 e4 e5", "exit"],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(NotationError):
            parse_move(text)


class TestParsePromotion:
    @pytest.mark.parametrize(
        "letter, expected",
        [
            ("q", PieceType.QUEEN),
            ("R", PieceType.ROOK),
            ("b", PieceType.BISHOP),
            ("N", PieceType.KNIGHT),
            ("P", PieceType.QUEEN),
            ("", PieceType.QUEEN),
            (None, PieceType.QUEEN),
        ],
    )
    def test_letters(self, letter, expected: PieceType) -> None:
        assert parse_promotion(letter) == expected


class TestFormatMove:
    def test_plain(self) -> None:
        assert format_move(Move(E2, E4)) == "e2 e4"

    def test_queen_suffix_dropped(self) -> None:
        assert format_move(Move(A7, A8, PieceType.QUEEN)) == "a7 a8"

    def test_underpromotion_kept(self) -> None:
        assert format_move(Move(A7, A8, PieceType.BISHOP)) == "a7 a8=B"

    def test_parse_of_format(self) -> None:
        move = Move(A7, A8, PieceType.KNIGHT)
        assert parse_move(format_move(move)) == move
