"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmaster.core.enums import Color
from chessmaster.core.move_engine import MoveEngine
from chessmaster.core.notation import parse_move
from chessmaster.core.position import Position
from chessmaster.core.snapshot import loads

PositionFactory = Callable[..., Position]
MovePlayer = Callable[..., None]


def _build_position(
    rows: str,
    flags: str = "0 0 0 0",
    halfmove: int = 0,
    fullmove: int = 1,
    side: Color = Color.WHITE,
) -> Position:
    lines = [line.strip() for line in rows.strip().splitlines()]
    text = "\n".join([f"{flags} {halfmove} {fullmove}", *lines])
    return loads(text, side)


def _play(engine: MoveEngine, *moves: str) -> None:
    for text in moves:
        engine.apply_move(parse_move(text))


@pytest.fixture
def make_position() -> PositionFactory:
    """Position from eight board rows (rank 8 first) in save-file notation."""
    return _build_position


@pytest.fixture
def play() -> MovePlayer:
    """Apply ``"e2 e4"``-style moves to an engine; raises on any illegal one."""
    return _play


@pytest.fixture
def engine() -> MoveEngine:
    """Engine on the standard starting position."""
    return MoveEngine()
