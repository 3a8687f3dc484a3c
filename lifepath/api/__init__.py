"""
API Module - HTTP interface for presentation clients.

Exposes the engine via REST API. A client:
1. Lists characters
2. Creates a session
3. Submits choices and shows results
4. Fetches the ending, restarts or ends the session

All state is session-scoped and in memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    ChoiceRequest,
    RestartRequest,
    # Responses
    SessionResponse,
    TurnResponse,
    EndingResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
    SessionStatus,
)
from .service import LifepathService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "ChoiceRequest",
    "RestartRequest",
    # Responses
    "SessionResponse",
    "TurnResponse",
    "EndingResponse",
    "ErrorResponse",
    # Enums
    "ErrorCode",
    "SessionStatus",
    # Service
    "LifepathService",
    "create_app",
]
