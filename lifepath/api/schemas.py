"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between presentation clients and the
engine. Clients only read snapshots and send intents (choice id, restart,
end).

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- UNKNOWN_CHARACTER: Character preset id is not known
- INVALID_CHOICE: Choice is not offered by the current scene, or is locked
- GAME_OVER: The run has ended; restart or fetch the ending
- GAME_NOT_OVER: Ending requested while the run is still in play
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    UNKNOWN_CHARACTER = "UNKNOWN_CHARACTER"
    INVALID_CHOICE = "INVALID_CHOICE"
    GAME_OVER = "GAME_OVER"
    GAME_NOT_OVER = "GAME_NOT_OVER"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class StatsInfo(BaseModel):
    """The full stat vector."""
    money: float
    reputation: float
    skill: float
    health: float
    age: float
    family: float
    hunger_debt: float
    fatigue: float
    luck: float
    karma: float

    model_config = {"from_attributes": True}


class CharacterInfo(BaseModel):
    """A playable character preset."""
    character_id: str
    name: str
    description: str
    lore: str
    stats: StatsInfo


class ChoiceInfo(BaseModel):
    """A choice as shown to the player."""
    choice_id: str
    label: str
    description: str = ""
    effort: str = Field(description="physical, mental, social, rest, neutral")
    path: Optional[str] = Field(None, description="craft, service, trade, crime")
    min_health: Optional[float] = None
    locked: bool = Field(False, description="True when health is below min_health")
    chance: float = Field(..., ge=0.0, le=1.0, description="Current odds of success")
    is_neutral: bool = Field(False, description="Both outcomes are identical")
    money_range: Optional[str] = Field(None, description="Money a success would pay")


class SceneInfo(BaseModel):
    """The current scene."""
    scene_id: str
    title: str
    text: str
    choices: list[ChoiceInfo] = Field(default_factory=list)


class MoneyItemInfo(BaseModel):
    """One line of the itemized money change."""
    label: str
    value: float


class EventInfo(BaseModel):
    """A world event that fired this turn."""
    event_id: str
    title: str
    text: str
    effects: dict[str, float] = Field(default_factory=dict)


class ResultInfo(BaseModel):
    """Outcome of the last resolved choice."""
    title: str = Field(description="Success or Failure")
    text: str
    success: bool
    chance: float = Field(..., ge=0.0, le=1.0)
    deltas: dict[str, float] = Field(
        default_factory=dict, description="Net change per stat, non-zero only"
    )
    money_breakdown: list[MoneyItemInfo] = Field(default_factory=list)
    event: Optional[EventInfo] = None


class WeatherInfo(BaseModel):
    """Cosmetic weather metadata for presentation."""
    effect_type: Optional[str] = Field(None, description="rain, snow, leaves")
    effect_until_turn: int
    snow_intensity: str = Field(description="gentle or blizzard")


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new play session."""
    character_id: Optional[str] = Field(None, description="Character preset; defaults to the first")
    seed: Optional[int] = Field(None, description="Seed for a reproducible run")


class ChoiceRequest(BaseModel):
    """Request to resolve a choice in the current scene."""
    choice_id: str = Field(..., min_length=1, description="ID of a choice in the current scene")


class RestartRequest(BaseModel):
    """Request to restart the run with the same character."""
    seed: Optional[int] = Field(None, description="Seed for the new run; random if omitted")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class CharacterListResponse(BaseModel):
    """Available character presets."""
    characters: list[CharacterInfo]
    count: int


class SessionResponse(BaseModel):
    """Snapshot of a play session."""
    session_id: str
    status: SessionStatus
    character_id: str
    seed: int
    turn: int
    max_turns: int
    stage: str
    season: str
    phase: str
    stats: StatsInfo
    path_scores: dict[str, int] = Field(default_factory=dict)
    scene: SceneInfo
    log: list[str] = Field(default_factory=list, description="Most recent first")
    last_result: Optional[ResultInfo] = None
    game_over: bool = False
    ending_reason: Optional[str] = None
    weather: WeatherInfo
    created_at: float = 0.0
    api_version: str = "v1"


class TurnResponse(BaseModel):
    """Result of resolving one choice, plus the new snapshot."""
    result: ResultInfo
    session: SessionResponse
    api_version: str = "v1"


class EndingResponse(BaseModel):
    """Classified ending of a finished run."""
    session_id: str
    title: str
    text: str
    kind: str = Field(description="death, archetype, near_miss, fallback")
    archetype_id: Optional[str] = None
    ending_reason: str
    final_stats: StatsInfo
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """Active session IDs."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Result of ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
