"""Console layer — menu, board rendering and the move prompt loop."""

from chessmaster.console.app import ConsoleApp, build_parser, main

__all__ = [
    "ConsoleApp",
    "build_parser",
    "main",
]
