"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SAVE_PATH = "chess_save.txt"


@dataclass
class GameConfig:
    """All user-configurable session settings."""

    # House rule: end the game once this many checks have been given in
    # total.  ``None`` plays standard chess.
    check_limit: int | None = None

    # Persistence
    save_path: str = DEFAULT_SAVE_PATH

    # Console
    show_welcome: bool = True
    use_color: bool = True

    def __post_init__(self) -> None:
        if self.check_limit is not None and self.check_limit < 1:
            raise ValueError(f"check_limit must be positive, got {self.check_limit}")
