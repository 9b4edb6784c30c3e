"""Text rendering for the console: board, banners, rules page."""

from __future__ import annotations

from chessmaster.core.enums import Color
from chessmaster.core.position import Position
from chessmaster.core.types import BOARD_SIZE, FILES

# ANSI 256-colour codes used by the console.
LIGHT_BLUE = "38;5;117"
PEACH = "38;5;216"
LILAC = "38;5;183"
TEAL = "38;5;30"
RED = "31"

_SIDE_COLORS: dict[Color, str] = {Color.WHITE: PEACH, Color.BLACK: LIGHT_BLUE}


def paint(text: str, code: str, enabled: bool = True) -> str:
    """Wrap *text* in an ANSI colour sequence when *enabled*."""
    if not enabled:
        return text
    return f"\033[{code}m{text}\033[0m"


def side_color(color: Color) -> str:
    return _SIDE_COLORS[color]


def _frame(code: str, use_color: bool) -> list[str]:
    border = "+" + "-" * (2 * BOARD_SIZE + 1) + "+"
    labels = "|  " + " ".join(FILES) + "|"
    return [paint(line, code, use_color) for line in (border, labels, border)]


def _captures_line(label: str, symbols: tuple[str, ...]) -> str:
    return f"{label}{' '.join(symbols) if symbols else 'None'}"


def render_board(position: Position, use_color: bool = True) -> str:
    """Board with rank/file labels, both clocks and both capture lists."""
    lines = _frame(LIGHT_BLUE, use_color)
    for row, text in enumerate(position.board.rows()):
        rank = BOARD_SIZE - row
        lines.append(f"{rank}| {' '.join(text)} |{rank}")
    lines.extend(_frame(PEACH, use_color))
    lines.append("")
    lines.append(
        f"Half-moves: {position.halfmove_clock} Full moves: {position.fullmove_number}"
    )
    lines.append(
        _captures_line(
            paint("White captured: ", PEACH, use_color),
            position.captured_by(Color.WHITE),
        )
    )
    lines.append(
        _captures_line(
            paint("Black captured: ", LIGHT_BLUE, use_color),
            position.captured_by(Color.BLACK),
        )
    )
    lines.append("")
    return "\n".join(lines)


def boxed(message: str, code: str, use_color: bool = True, width: int = 0) -> str:
    """Single-line message inside a ``+---+`` box."""
    inner = max(width, len(message) + 4)
    border = "+" + "-" * inner + "+"
    body = "|" + message.center(inner) + "|"
    return "\n".join(paint(line, code, use_color) for line in (border, body, border))


def welcome_text(use_color: bool = True) -> str:
    lines = [
        paint("*     Welcome to Chess Master     *", LILAC, use_color),
        paint("*" * 35, LILAC, use_color),
        paint("      Enter moves as 'e2 e4'       ", TEAL, use_color),
        paint("      Promotion: 'd7 d8=Q'         ", TEAL, use_color),
        paint("    Castling: 'e1 g1' or 'e8 g8'   ", TEAL, use_color),
        paint("      Type 'undo' to take back     ", TEAL, use_color),
        paint("      Type 'exit' to end game      ", TEAL, use_color),
        paint("      White moves first            ", TEAL, use_color),
        paint("*" * 35, LILAC, use_color),
    ]
    return "\n".join(lines)


def rules_text(check_limit: int | None, use_color: bool = True) -> str:
    ending = (
        f"Game ends after {check_limit} checks"
        if check_limit is not None
        else "Checkmate, stalemate or 50 quiet half-moves"
    )
    body = [
        "Chess Rules",
        "",
        "1. White moves first",
        f"2. {ending}",
        "3. Pieces move as follows:",
        "   King: 1 square any dir",
        "   Queen: Any dir, any dist",
        "   Rook: Horz/vert any dist",
        "   Bishop: Diag any dist",
        "   Knight: L-shape (2x1)",
        "   Pawn: 1 forward, 2 from start",
        "4. Capture by landing on opponent's piece",
        "5. Special moves:",
        "   - Castling (King+Rook)",
        "   - En passant (Pawn)",
        "   - Promotion (Pawn)",
    ]
    width = max(len(line) for line in body) + 4
    border = paint("*" + "-" * width + "*", TEAL, use_color)
    lines = [border]
    lines.extend(paint("|" + line.ljust(width) + "|", TEAL, use_color) for line in body)
    lines.append(border)
    return "\n".join(lines)


MENU_ENTRIES: tuple[str, ...] = (
    "Start Game",
    "Save Game",
    "Load Game",
    "View Rules",
    "Exit",
)


def menu_text(use_color: bool = True) -> str:
    lines = [
        paint("*-------------------------*", LILAC, use_color),
        paint("|      Chess Master       |", LILAC, use_color),
        paint("*-------------------------*", LILAC, use_color),
    ]
    for number, label in enumerate(MENU_ENTRIES, start=1):
        lines.append(f"|     {number}. {label:<16}|")
    return "\n".join(lines)
