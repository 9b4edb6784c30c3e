"""Console front end: main menu and the move-prompt loop."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from chessmaster.console.render import (
    LILAC,
    RED,
    TEAL,
    boxed,
    menu_text,
    paint,
    render_board,
    rules_text,
    side_color,
    welcome_text,
)
from chessmaster.core.enums import Color, GameResult
from chessmaster.game.config import DEFAULT_SAVE_PATH, GameConfig
from chessmaster.game.interfaces import GameEndReason
from chessmaster.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_END_MESSAGES: dict[GameEndReason, str] = {
    GameEndReason.CHECKMATE: "Checkmate! {winner} wins",
    GameEndReason.STALEMATE: "Stalemate! The game is a draw",
    GameEndReason.FIFTY_MOVE_RULE: "Draw by the fifty-move rule",
    GameEndReason.CHECK_LIMIT: "{winner} wins after {limit} checks!",
}


class ConsoleApp:
    """Thin text UI around a :class:`GameSession`.

    All terminal I/O goes through *input_fn* / *output_fn* so the loop can
    be driven from tests.
    """

    __slots__ = ("_session", "_input", "_output", "_color")

    def __init__(
        self,
        session: GameSession | None = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._session = session if session is not None else GameSession()
        self._input = input_fn
        self._output = output_fn
        self._color = self._session.config.use_color

    @property
    def session(self) -> GameSession:
        return self._session

    # ── Menu ─────────────────────────────────────────────────────────────

    def run(self) -> int:
        """Main menu loop. Returns a process exit code."""
        actions: dict[str, Callable[[], None]] = {
            "1": self.play,
            "2": self._save,
            "3": self._load,
            "4": self._show_rules,
        }
        while True:
            self._output(menu_text(self._color))
            try:
                choice = self._input(paint("Enter choice: ", LILAC, self._color)).strip()
            except EOFError:
                return 0
            if choice == "5":
                farewell = "Thank you for playing the Chess! HAVE A NICE DAY"
                self._output(boxed(farewell, LILAC, self._color))
                return 0
            action = actions.get(choice)
            if action is None:
                self._output(boxed("Invalid choice!", TEAL, self._color))
                continue
            try:
                action()
            except EOFError:
                return 0

    # ── Game loop ────────────────────────────────────────────────────────

    def play(self) -> None:
        """Prompt for moves until the game ends or the player types ``exit``.

        ``exit`` only leaves the prompt; the game is kept and the next call
        resumes it.  A finished game is replaced by a fresh one.
        """
        session = self._session
        if session.state.is_game_over:
            session.new_game()
        if session.config.show_welcome:
            self._output(welcome_text(self._color))

        while not session.state.is_game_over:
            state = session.state
            self._output(render_board(state.position, self._color))
            side = state.side_to_move
            prompt = paint(f"{side!s}'s turn. Enter move: ", side_color(side), self._color)
            text = self._input(prompt).strip()

            if text == "exit":
                self._output(boxed("Game Over!", RED, self._color))
                return
            if text == "undo":
                if not session.undo_move():
                    self._output(boxed("Nothing to undo", RED, self._color))
                continue

            if not session.submit_text(text):
                self._output(boxed("Invalid move!", RED, self._color))
                continue

            if session.state.is_in_check():
                self._output(boxed("Check!", RED, self._color))

        self._output(render_board(session.state.position, self._color))
        self._output(boxed(self._end_message(), TEAL, self._color))

    def _end_message(self) -> str:
        state = self._session.state
        template = _END_MESSAGES.get(state.end_reason, "Game Over!")
        winner = {
            GameResult.WHITE_WINS: str(Color.WHITE),
            GameResult.BLACK_WINS: str(Color.BLACK),
        }.get(state.result, "")
        return template.format(winner=winner, limit=state.check_limit)

    # ── Persistence / info ───────────────────────────────────────────────

    def _ask_path(self, verb: str) -> str:
        default = self._session.config.save_path
        name = self._input(f"Enter filename to {verb} [{default}]: ").strip()
        return name or default

    def _save(self) -> None:
        if self._session.save(self._ask_path("save")):
            self._output(boxed("Game saved!", LILAC, self._color))
        else:
            self._output(boxed("Could not save game", RED, self._color))

    def _load(self) -> None:
        if self._session.load(self._ask_path("load")):
            self._output(boxed("Game loaded!", LILAC, self._color))
        else:
            self._output(boxed("Could not load game", RED, self._color))

    def _show_rules(self) -> None:
        self._output(rules_text(self._session.config.check_limit, self._color))
        self._input("Press Enter to return to menu...")


# ── Entry point ──────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmaster", description="Two-player console chess."
    )
    parser.add_argument(
        "--check-limit",
        help="House rule: end the game after this many checks. Off by default.",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--save-file",
        help="Default file used by the save and load menu entries.",
        type=str,
        default=DEFAULT_SAVE_PATH,
    )
    parser.add_argument(
        "--log-level",
        help="Logging verbosity.",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    parser.add_argument(
        "--no-color",
        help="Disable ANSI colours.",
        action="store_true",
    )
    parser.add_argument(
        "--no-welcome",
        help="Skip the welcome banner when a game starts.",
        action="store_true",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the console application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        config = GameConfig(
            check_limit=args.check_limit,
            save_path=args.save_file,
            show_welcome=not args.no_welcome,
            use_color=not args.no_color,
        )
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2
    return ConsoleApp(GameSession(config)).run()
