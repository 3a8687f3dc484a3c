"""
Engine Core - Deterministic life simulation over seeded randomness.

The engine is the runtime that:
1. Builds a per-run scene deck and picks scenes through ordered gates
2. Manages GameState
3. Resolves a chosen action into the next state via the reducer
4. Injects recurring and major world events
5. Classifies the terminal stats into an ending
"""

from .rng import Rng, SeededRng, create_seeded_rng, roll_initial_luck, shuffle
from .stats import (
    Effects,
    Season,
    Stage,
    Stats,
    apply_effects,
    normalize_stats,
    season_from_turn,
    stage_label,
)
from .content import Character, Choice, Effort, Path, Scene, ScenePhase, WorldEvent
from .chance import available_choices, get_chance, get_money_range, is_neutral_choice
from .scene_deck import ScenePick, build_scene_deck, get_next_scene, pick_start_scene
from .state import GameState
from .reducer import (
    Reducer,
    ResultPayload,
    TurnResolution,
    create_game_state_from_stats,
    resolve_choice,
)
from .ending import ARCHETYPES, Ending, EndingKind, get_ending
from .validation import ContentValidationError, ValidationResult, validate_content

__all__ = [
    "Rng",
    "SeededRng",
    "create_seeded_rng",
    "roll_initial_luck",
    "shuffle",
    "Effects",
    "Season",
    "Stage",
    "Stats",
    "apply_effects",
    "normalize_stats",
    "season_from_turn",
    "stage_label",
    "Character",
    "Choice",
    "Effort",
    "Path",
    "Scene",
    "ScenePhase",
    "WorldEvent",
    "available_choices",
    "get_chance",
    "get_money_range",
    "is_neutral_choice",
    "ScenePick",
    "build_scene_deck",
    "get_next_scene",
    "pick_start_scene",
    "GameState",
    "Reducer",
    "ResultPayload",
    "TurnResolution",
    "create_game_state_from_stats",
    "resolve_choice",
    "ARCHETYPES",
    "Ending",
    "EndingKind",
    "get_ending",
    "ContentValidationError",
    "ValidationResult",
    "validate_content",
]
