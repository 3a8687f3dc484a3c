"""
Session Module - Manages in-memory play sessions.

A session represents one player's life story:
- Created when the player picks a character
- Holds the current game state and its seeded rng
- Validates and resolves choices
- Can restart with a fresh seed

Sessions are EPHEMERAL:
- No persistence to disk or database
- Dropped when ended or idle past the session TTL
"""

from .manager import (
    GameNotOverError,
    GameOverError,
    InvalidChoiceError,
    Session,
    SessionError,
    SessionManager,
    SessionNotFoundError,
    SessionState,
    UnknownCharacterError,
    start_run,
)
from .game_loop import GameLoop, LoopState, RunOutcome, TurnResult

__all__ = [
    "GameNotOverError",
    "GameOverError",
    "InvalidChoiceError",
    "Session",
    "SessionError",
    "SessionManager",
    "SessionNotFoundError",
    "SessionState",
    "UnknownCharacterError",
    "start_run",
    "GameLoop",
    "LoopState",
    "RunOutcome",
    "TurnResult",
]
