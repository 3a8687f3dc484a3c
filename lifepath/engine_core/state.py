"""
Game State - The full session snapshot the engine operates on.

Design principles:
- Replaced, never mutated: every transition returns a new GameState
- Session-scoped: each state carries its own scene and event decks
- Serializable: to_snapshot() gives presentation a plain dict
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
from copy import deepcopy

from .content import Path, Scene, WorldEvent
from .scene_deck import phase_from_turn
from .stats import Season, Stage, Stats, season_from_turn, stage_label
from .weather import SnowIntensity, WeatherEffect


def empty_path_scores() -> dict[Path, int]:
    return {path: 0 for path in Path}


def dominant_path(path_scores: dict[Path, int]) -> Path | None:
    """
    The path the player has favoured most.

    All-zero scores and ties for the top spot mean no preference.
    """
    if not path_scores:
        return None
    top = max(path_scores.values())
    if top <= 0:
        return None
    leaders = [path for path, score in path_scores.items() if score == top]
    if len(leaders) > 1:
        return None
    return leaders[0]


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    `scene_index` is the deck position of the current scene, or -1 when the
    current scene is a start scene drawn from outside the deck.
    """
    stats: Stats
    scene: Scene
    character_id: str | None = None
    path_scores: dict[Path, int] = field(default_factory=empty_path_scores)
    turn: int = 1

    # Most recent first, capped at LOG_LIMIT
    log: list[str] = field(default_factory=list)

    # Scene traversal
    scene_deck: list[Scene] = field(default_factory=list)
    scene_index: int = -1

    # Recurring world events
    event_deck: list[WorldEvent] = field(default_factory=list)
    event_index: int = 0
    next_event_turn: int = 2

    # Termination
    game_over: bool = False
    ending_reason: str = ""
    major_event_used: bool = False

    # Cosmetic weather metadata
    effect_type: WeatherEffect | None = WeatherEffect.LEAVES
    effect_until_turn: int = 999
    snow_intensity: SnowIntensity = SnowIntensity.GENTLE

    @property
    def stage(self) -> Stage:
        return stage_label(self.stats)

    @property
    def season(self) -> Season:
        return season_from_turn(self.turn)

    @property
    def preferred_path(self) -> Path | None:
        return dominant_path(self.path_scores)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            stats=kwargs.get("stats", self.stats),
            scene=kwargs.get("scene", self.scene),
            character_id=kwargs.get("character_id", self.character_id),
            path_scores=kwargs.get("path_scores", self.path_scores),
            turn=kwargs.get("turn", self.turn),
            log=kwargs.get("log", self.log),
            scene_deck=kwargs.get("scene_deck", self.scene_deck),
            scene_index=kwargs.get("scene_index", self.scene_index),
            event_deck=kwargs.get("event_deck", self.event_deck),
            event_index=kwargs.get("event_index", self.event_index),
            next_event_turn=kwargs.get("next_event_turn", self.next_event_turn),
            game_over=kwargs.get("game_over", self.game_over),
            ending_reason=kwargs.get("ending_reason", self.ending_reason),
            major_event_used=kwargs.get("major_event_used", self.major_event_used),
            effect_type=kwargs.get("effect_type", self.effect_type),
            effect_until_turn=kwargs.get("effect_until_turn", self.effect_until_turn),
            snow_intensity=kwargs.get("snow_intensity", self.snow_intensity),
        )

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)

    def to_snapshot(self) -> dict[str, Any]:
        """Plain-data view for presentation and replay comparison."""
        return {
            "character_id": self.character_id,
            "stats": self.stats.to_dict(),
            "stage": self.stage.value,
            "season": self.season.value,
            "phase": phase_from_turn(self.turn).value,
            "path_scores": {path.value: score for path, score in self.path_scores.items()},
            "turn": self.turn,
            "log": list(self.log),
            "scene_id": self.scene.id,
            "scene_index": self.scene_index,
            "scene_deck": [scene.id for scene in self.scene_deck],
            "event_deck": [event.id for event in self.event_deck],
            "event_index": self.event_index,
            "next_event_turn": self.next_event_turn,
            "game_over": self.game_over,
            "ending_reason": self.ending_reason,
            "major_event_used": self.major_event_used,
            "effect_type": self.effect_type.value if self.effect_type else None,
            "effect_until_turn": self.effect_until_turn,
            "snow_intensity": self.snow_intensity.value,
        }
