"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session calls
2. Manages sessions
3. Formats engine state into response schemas
4. Maps session errors to error codes and HTTP statuses

This layer is framework-agnostic; app.py wires it into FastAPI.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..content import CHARACTERS
from ..engine_core.chance import get_chance, get_money_range, is_neutral_choice
from ..engine_core.constants import MAX_TURNS
from ..engine_core.content import Character, Choice, Scene
from ..engine_core.reducer import ResultPayload
from ..engine_core.scene_deck import phase_from_turn
from ..engine_core.stats import Stats, normalize_stats
from ..session import (
    GameNotOverError,
    GameOverError,
    InvalidChoiceError,
    Session,
    SessionError,
    SessionManager,
    SessionNotFoundError,
    UnknownCharacterError,
)
from .schemas import (
    CharacterInfo,
    CharacterListResponse,
    ChoiceInfo,
    ChoiceRequest,
    CreateSessionRequest,
    EndSessionResponse,
    EndingResponse,
    ErrorCode,
    ErrorResponse,
    EventInfo,
    MoneyItemInfo,
    RestartRequest,
    ResultInfo,
    SceneInfo,
    SessionListResponse,
    SessionResponse,
    SessionStatus,
    StatsInfo,
    TurnResponse,
    WeatherInfo,
)

# Session error -> (error code, HTTP status)
ERROR_MAP: dict[type[SessionError], tuple[ErrorCode, int]] = {
    SessionNotFoundError: (ErrorCode.SESSION_NOT_FOUND, 404),
    UnknownCharacterError: (ErrorCode.UNKNOWN_CHARACTER, 400),
    InvalidChoiceError: (ErrorCode.INVALID_CHOICE, 400),
    GameOverError: (ErrorCode.GAME_OVER, 409),
    GameNotOverError: (ErrorCode.GAME_NOT_OVER, 409),
}


@dataclass
class LifepathService:
    """
    Main API service.

    Usage:
        service = LifepathService()

        session = service.create_session(CreateSessionRequest(character_id="farmer"))
        turn = service.submit_choice(session.session_id, ChoiceRequest(choice_id="last-harvest"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def list_characters(self) -> CharacterListResponse:
        characters = [self._character_info(character) for character in CHARACTERS]
        return CharacterListResponse(characters=characters, count=len(characters))

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Create a new play session."""
        session = self.session_manager.create_session(
            character_id=request.character_id,
            seed=request.seed,
        )
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse:
        """Get a session snapshot."""
        return self._session_to_response(self.session_manager.require_session(session_id))

    def submit_choice(self, session_id: str, request: ChoiceRequest) -> TurnResponse:
        """Resolve a choice in the session's current scene."""
        session = self.session_manager.require_session(session_id)
        resolution = session.choose(request.choice_id)
        return TurnResponse(
            result=self._result_info(resolution.result),
            session=self._session_to_response(session),
        )

    def restart_session(self, session_id: str, request: RestartRequest) -> SessionResponse:
        """Restart the run with the same character."""
        session = self.session_manager.require_session(session_id)
        session.restart(seed=request.seed)
        return self._session_to_response(session)

    def get_ending(self, session_id: str) -> EndingResponse:
        """Classify a finished run."""
        session = self.session_manager.require_session(session_id)
        ending = session.ending()
        return EndingResponse(
            session_id=session.session_id,
            title=ending.title,
            text=ending.text,
            kind=ending.kind.value,
            archetype_id=ending.archetype_id,
            ending_reason=session.game_state.ending_reason,
            final_stats=self._stats_info(session.game_state.stats),
        )

    def end_session(self, session_id: str, reason: str = "user_ended") -> EndSessionResponse:
        success = self.session_manager.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    def list_sessions(self) -> SessionListResponse:
        sessions = self.session_manager.list_active_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    def error_for(self, error: SessionError) -> tuple[int, ErrorResponse]:
        """Map a session error to an HTTP status and error payload."""
        code, status_code = ERROR_MAP.get(type(error), (ErrorCode.VALIDATION_ERROR, 400))
        details = None
        if isinstance(error, InvalidChoiceError):
            details = {"choice_id": error.choice_id, "scene_id": error.scene_id}
        elif isinstance(error, UnknownCharacterError):
            details = {"character_id": error.character_id}
        return status_code, ErrorResponse(error=str(error), error_code=code, details=details)

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    def _session_to_response(self, session: Session) -> SessionResponse:
        state = session.game_state
        if state.game_over:
            status = SessionStatus.GAME_OVER
        else:
            status = SessionStatus(session.state.value)
        return SessionResponse(
            session_id=session.session_id,
            status=status,
            character_id=session.character.id,
            seed=session.seed,
            turn=state.turn,
            max_turns=MAX_TURNS,
            stage=state.stage.value,
            season=state.season.value,
            phase=phase_from_turn(state.turn).value,
            stats=self._stats_info(state.stats),
            path_scores={path.value: score for path, score in state.path_scores.items()},
            scene=self._scene_info(state.scene, state.stats),
            log=list(state.log),
            last_result=self._result_info(session.last_result) if session.last_result else None,
            game_over=state.game_over,
            ending_reason=state.ending_reason or None,
            weather=WeatherInfo(
                effect_type=state.effect_type.value if state.effect_type else None,
                effect_until_turn=state.effect_until_turn,
                snow_intensity=state.snow_intensity.value,
            ),
            created_at=session.created_at,
        )

    def _stats_info(self, stats: Stats) -> StatsInfo:
        return StatsInfo(**stats.to_dict())

    def _character_info(self, character: Character) -> CharacterInfo:
        return CharacterInfo(
            character_id=character.id,
            name=character.name,
            description=character.description,
            lore=character.lore,
            stats=self._stats_info(character.stats),
        )

    def _scene_info(self, scene: Scene, stats: Stats) -> SceneInfo:
        safe_stats = normalize_stats(stats)
        return SceneInfo(
            scene_id=scene.id,
            title=scene.title,
            text=scene.text,
            choices=[self._choice_info(choice, safe_stats) for choice in scene.choices],
        )

    def _choice_info(self, choice: Choice, stats: Stats) -> ChoiceInfo:
        money_range = get_money_range(choice, stats)
        return ChoiceInfo(
            choice_id=choice.id,
            label=choice.label,
            description=choice.description,
            effort=choice.effort.value,
            path=choice.path.value if choice.path else None,
            min_health=choice.min_health,
            locked=choice.min_health is not None and stats.health < choice.min_health,
            chance=get_chance(choice, stats),
            is_neutral=is_neutral_choice(choice),
            money_range=money_range.label if money_range else None,
        )

    def _result_info(self, result: ResultPayload) -> ResultInfo:
        event = None
        if result.event is not None:
            event = EventInfo(
                event_id=result.event.id,
                title=result.event.title,
                text=result.event.text,
                effects=result.event.effects.to_dict(),
            )
        return ResultInfo(
            title=result.title,
            text=result.text,
            success=result.success,
            chance=result.chance,
            deltas=result.deltas.to_dict(),
            money_breakdown=[
                MoneyItemInfo(label=item.label, value=item.value)
                for item in result.money_breakdown
            ],
            event=event,
        )
