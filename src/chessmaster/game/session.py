"""GameSession — the central orchestrator of a chess game.

Coordinates: GameState, move parsing, save/load.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from chessmaster.core import snapshot
from chessmaster.core.enums import Color, GameResult, RejectReason
from chessmaster.core.errors import IllegalMoveError, NotationError, SnapshotError
from chessmaster.core.move import Move
from chessmaster.core.notation import parse_move
from chessmaster.game.config import GameConfig
from chessmaster.game.interfaces import GameEndReason, GamePhase, IGameSession
from chessmaster.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CheckCallback = Callable[[Color], None]  # color now in check
GameOverCallback = Callable[[GameResult, GameEndReason], None]
RejectCallback = Callable[[str, RejectReason | None], None]  # text, reason


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Orchestrates a full chess game: validates moves, switches turns,
    persists snapshots, notifies listeners.

    Methods are meant to be called from a single thread, one at a time.
    """

    __slots__ = ("_config", "_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._state = GameState(check_limit=self._config.check_limit)
        self._state.setup()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    # ── IGameSession impl ────────────────────────────────────────────────

    def new_game(self) -> None:
        self._state = GameState(check_limit=self._config.check_limit)
        self._state.setup()
        _LOGGER.debug("New game started")

    def submit_move(self, move: Move) -> bool:
        try:
            record = self._state.apply_move(move)
        except IllegalMoveError as exc:
            _LOGGER.info("Rejected move %s: %s", move, exc)
            self._emit_rejected(str(move), exc.reason)
            return False

        _LOGGER.debug("%s played %s", record.outcome.piece.color, record.text)
        self._emit_move(record)

        if record.was_check:
            self._emit_check(self._state.side_to_move)

        if self._state.is_game_over:
            _LOGGER.info(
                "Game over: %s (%s)",
                self._state.result.name,
                self._state.end_reason.name,
            )
            self._emit_game_over()
        return True

    def submit_text(self, text: str) -> bool:
        """Parse ``"e2 e4"``-style text and submit it."""
        try:
            move = parse_move(text)
        except NotationError as exc:
            _LOGGER.info("%s", exc)
            self._emit_rejected(text, None)
            return False
        return self.submit_move(move)

    def undo_move(self) -> bool:
        return self._state.undo_last_move() is not None

    def abort(self) -> None:
        if self._state.is_game_over:
            return
        self._state.abort()
        self._emit_game_over()

    def save(self, path: str | Path | None = None) -> bool:
        target = Path(path if path is not None else self._config.save_path)
        try:
            snapshot.save(target, self._state.position)
        except OSError as exc:
            _LOGGER.warning("Could not save game to %s: %s", target, exc)
            return False
        _LOGGER.debug("Game saved to %s", target)
        return True

    def load(self, path: str | Path | None = None) -> bool:
        """Replace the position from disk, keeping the current side to move.

        On any failure the current game is left untouched.
        """
        source = Path(path if path is not None else self._config.save_path)
        try:
            position = snapshot.load(source, self._state.side_to_move)
        except (OSError, SnapshotError) as exc:
            _LOGGER.warning("Could not load game from %s: %s", source, exc)
            return False
        self._state.setup(position)
        _LOGGER.debug("Game loaded from %s", source)
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def captured_by(self, color: Color) -> tuple[str, ...]:
        return self._state.position.captured_by(color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._state.result, self._state.end_reason)

    def _emit_rejected(self, text: str, reason: RejectReason | None) -> None:
        for cb in self.events.on_rejected:
            cb(text, reason)
