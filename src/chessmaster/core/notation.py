"""Coordinate move notation: ``"e2 e4"`` and ``"d7 d8=Q"``."""

from __future__ import annotations

import re

from chessmaster.core.enums import PROMOTION_TYPES, PieceType
from chessmaster.core.errors import NotationError
from chessmaster.core.move import Move
from chessmaster.core.types import parse_square

_MOVE_RE = re.compile(r"^([a-h][1-8]) ([a-h][1-8])(?:=(.))?$")

_PROMO_LETTERS: dict[str, PieceType] = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}


def parse_promotion(letter: str | None) -> PieceType:
    """Promotion piece for *letter*; anything unrecognised means a queen."""
    if not letter:
        return PieceType.QUEEN
    return _PROMO_LETTERS.get(letter.upper(), PieceType.QUEEN)


def parse_move(text: str) -> Move:
    """Parse ``"<from> <to>[=X]"`` into a :class:`Move`.

    Raises:
        NotationError: the text is not two squares separated by one space.
    """
    match = _MOVE_RE.match(text.strip())
    if match is None:
        raise NotationError(f"Invalid move text: {text!r}")
    from_name, to_name, promo = match.groups()
    promotion = parse_promotion(promo) if promo is not None else None
    return Move(parse_square(from_name), parse_square(to_name), promotion)


def format_move(move: Move) -> str:
    """Inverse of :func:`parse_move` (promotion shown only when not a queen)."""
    text = str(move)
    if move.promotion == PieceType.QUEEN or move.promotion not in PROMOTION_TYPES:
        return text.split("=", 1)[0]
    return text
