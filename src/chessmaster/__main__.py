"""Application entry point."""

from __future__ import annotations

import sys

from chessmaster.console.app import main

if __name__ == "__main__":
    sys.exit(main())
