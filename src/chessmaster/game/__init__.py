"""Game management layer — session, state machine, configuration.

Quick start::

    from chessmaster.game import GameConfig, GameSession

    session = GameSession(GameConfig(check_limit=None))
    session.submit_text("e2 e4")
    session.save("game.txt")
"""

from chessmaster.game.config import GameConfig
from chessmaster.game.interfaces import GameEndReason, GamePhase, IGameSession
from chessmaster.game.session import GameEvents, GameSession
from chessmaster.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameSession",
    # Concrete
    "GameConfig",
    "GameEvents",
    "GameSession",
    "GameState",
    "MoveRecord",
]
