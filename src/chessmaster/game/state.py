"""Game state machine — tracks phase transitions, move history and result."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessmaster.core.enums import Color, GameResult, RejectReason
from chessmaster.core.errors import IllegalMoveError
from chessmaster.core.move import Move, MoveOutcome
from chessmaster.core.move_engine import MoveEngine
from chessmaster.core.position import Position
from chessmaster.core.rules import Rules
from chessmaster.game.interfaces import GameEndReason, GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    text: str
    outcome: MoveOutcome
    position_before: Position
    check_count_before: int = 0

    @property
    def was_check(self) -> bool:
        return self.outcome.gives_check

    @property
    def was_capture(self) -> bool:
        return self.outcome.is_capture


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history, check counting.

    This is a pure data/logic class — no I/O.
    """

    check_limit: int | None = None
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    check_count: int = field(default=0, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _engine: MoveEngine = field(default_factory=MoveEngine, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game, optionally from a given position."""
        self._engine = MoveEngine(position if position is not None else Position())
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.check_count = 0
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and commit *move*, returning the history record.

        Raises:
            IllegalMoveError: the move was rejected; nothing changed.
        """
        if self.is_game_over:
            raise IllegalMoveError(RejectReason.GAME_OVER, str(move))

        before = self._engine.position
        outcome = self._engine.apply_move(move)

        record = MoveRecord(
            move=move,
            text=str(move),
            outcome=outcome,
            position_before=before,
            check_count_before=self.check_count,
        )
        self.move_history.append(record)

        if outcome.gives_check:
            self.check_count += 1
        self._check_game_over(outcome)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self._engine = MoveEngine(record.position_before)
        self.check_count = record.check_count_before

        # Reset result if we un-did a game-ending move
        if self.is_game_over:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = GameEndReason.NONE
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    def abort(self) -> None:
        """End the game without a result (the player typed ``exit``)."""
        self.end_reason = GameEndReason.ABORTED
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._engine.position

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since setup."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self._engine.legal_moves()

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self.position, color)

    def is_checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self.position, color)

    def is_stalemate(self, color: Color | None = None) -> bool:
        return Rules.is_stalemate(self.position, color)

    def is_draw(self) -> bool:
        return Rules.is_draw(self.position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self, outcome: MoveOutcome | None = None) -> None:
        if outcome is not None:
            mover = outcome.piece.color
            if outcome.is_checkmate:
                self._finish(GameResult.win_for(mover), GameEndReason.CHECKMATE)
                return
            if outcome.is_stalemate:
                self._finish(GameResult.DRAW, GameEndReason.STALEMATE)
                return
            if self.check_limit is not None and self.check_count >= self.check_limit:
                self._finish(GameResult.win_for(mover), GameEndReason.CHECK_LIMIT)
                return
        else:
            result = Rules.game_result(self.position)
            if result not in (GameResult.IN_PROGRESS, GameResult.DRAW):
                self._finish(result, GameEndReason.CHECKMATE)
                return
            if result == GameResult.DRAW and not Rules.is_draw(self.position):
                self._finish(result, GameEndReason.STALEMATE)
                return

        if Rules.is_draw(self.position):
            self._finish(GameResult.DRAW, GameEndReason.FIFTY_MOVE_RULE)

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
