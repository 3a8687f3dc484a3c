"""
FastAPI Application - REST API for presentation clients.

Endpoints:
    GET    /api/v1/characters                 List character presets
    POST   /api/v1/sessions                   Create a play session
    GET    /api/v1/sessions                   List active sessions
    GET    /api/v1/sessions/{id}              Get session snapshot
    POST   /api/v1/sessions/{id}/choices      Resolve a choice
    POST   /api/v1/sessions/{id}/restart      Restart with a fresh seed
    GET    /api/v1/sessions/{id}/ending       Get the ending of a finished run
    DELETE /api/v1/sessions/{id}              End session
    GET    /health                            Health check

Play Flow:
    1. POST /sessions with a character id
    2. Show `scene` from the snapshot
    3. POST /choices with the picked choice id, show `result`
    4. Repeat until `game_over` is true
    5. GET /ending

All responses are JSON with explicit Pydantic schemas.
"""

from contextlib import asynccontextmanager
from typing import Annotated, Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, configure_logging, get_settings
from ..session import SessionError, SessionManager
from .schemas import (
    CharacterListResponse,
    ChoiceRequest,
    CreateSessionRequest,
    EndSessionResponse,
    EndingResponse,
    ErrorResponse,
    HealthResponse,
    RestartRequest,
    SessionListResponse,
    SessionResponse,
    TurnResponse,
)
from .service import LifepathService

logger = logging.getLogger(__name__)


def create_app(service: Optional[LifepathService] = None, settings: Optional[Settings] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional LifepathService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance

    Logging is configured when the server starts, so building or importing
    the app leaves the root logger alone.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        configure_logging(settings.log_level)
        yield

    app = FastAPI(
        title="Lifepath API",
        description="""
Turn-based life simulation - pick a character, make choices, live a life.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist or has expired |
| `UNKNOWN_CHARACTER` | Character preset id is not known |
| `INVALID_CHOICE` | Choice is not offered by the current scene, or is locked |
| `GAME_OVER` | The run has ended |
| `GAME_NOT_OVER` | The run is still in play |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or LifepathService(
        session_manager=SessionManager(session_ttl=settings.session_ttl)
    )

    # =========================================================================
    # Error handling
    # =========================================================================

    @app.exception_handler(SessionError)
    async def session_error_handler(request: Request, exc: SessionError) -> JSONResponse:
        status_code, error = api_service.error_for(exc)
        logger.info("%s %s -> %s: %s", request.method, request.url.path, error.error_code.value, exc)
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    error_responses = {
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    }

    # =========================================================================
    # Character Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/characters",
        response_model=CharacterListResponse,
        tags=["Characters"],
        summary="List character presets",
    )
    async def list_characters() -> CharacterListResponse:
        return api_service.list_characters()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse, "description": "Unknown character"}},
        tags=["Sessions"],
        summary="Create a new play session",
    )
    async def create_session(
        request: Optional[CreateSessionRequest] = None,
    ) -> SessionResponse:
        """
        Create a new play session.

        Omit `character_id` to play the first preset, and `seed` for a random run.
        """
        return api_service.create_session(request or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all session IDs still in play."""
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session snapshot",
    )
    async def get_session(session_id: str) -> SessionResponse:
        """Get the current snapshot of a play session."""
        return api_service.get_session(session_id)

    @app.post(
        "/api/v1/sessions/{session_id}/choices",
        response_model=TurnResponse,
        responses=error_responses,
        tags=["Play"],
        summary="Resolve a choice",
    )
    async def submit_choice(session_id: str, request: ChoiceRequest) -> TurnResponse:
        """
        Resolve a choice from the current scene.

        Returns the result payload and the new snapshot.
        """
        return api_service.submit_choice(session_id, request)

    @app.post(
        "/api/v1/sessions/{session_id}/restart",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Restart the run",
    )
    async def restart_session(
        session_id: str,
        request: Optional[RestartRequest] = None,
    ) -> SessionResponse:
        """Start over with the same character and a fresh seed."""
        return api_service.restart_session(session_id, request or RestartRequest())

    @app.get(
        "/api/v1/sessions/{session_id}/ending",
        response_model=EndingResponse,
        responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Get the ending",
    )
    async def get_ending(session_id: str) -> EndingResponse:
        """Classify a finished run."""
        return api_service.get_ending(session_id)

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a play session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """End a session and release it."""
        return api_service.end_session(session_id, reason)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="lifepath",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Lifepath API",
            "version": __version__,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# Default app instance for `uvicorn lifepath.api.app:app`
app = create_app()
