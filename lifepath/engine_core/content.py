"""
Content Types - Choices, scenes, world events and character presets.

Content is static data owned outside the engine. The engine reads these
definitions but never mutates them; scenes and choices are frozen.

Presentation strings (labels, texts) are opaque to the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .stats import Effects, NO_EFFECTS, Season, Stage, Stats


class Effort(Enum):
    """How a choice taxes the character. Drives fatigue and chance factors."""
    PHYSICAL = "physical"
    MENTAL = "mental"
    SOCIAL = "social"
    REST = "rest"
    NEUTRAL = "neutral"


class Path(Enum):
    """Thematic action category accumulated as path affinity."""
    CRAFT = "craft"
    SERVICE = "service"
    TRADE = "trade"
    CRIME = "crime"


class ScenePhase(Enum):
    """Pacing tag within an arc."""
    START = "start"
    EARLY = "early"
    MID = "mid"
    LATE = "late"


# Phases that take part in the ceiling check; START scenes live outside the deck
PHASE_ORDER: list[ScenePhase] = [ScenePhase.EARLY, ScenePhase.MID, ScenePhase.LATE]

NEUTRAL_VECTOR = "neutral"


@dataclass(frozen=True)
class Choice:
    """
    An action offered by a scene.

    `success` and `fail` are the two possible deltas; which one applies is
    decided by a roll against the chance function.
    """
    id: str
    label: str
    base_chance: float
    success_text: str
    fail_text: str
    success: Effects = NO_EFFECTS
    fail: Effects = NO_EFFECTS
    description: str = ""
    min_health: float | None = None
    effort: Effort = Effort.NEUTRAL
    path: Path | None = None


@dataclass(frozen=True)
class Scene:
    """
    A node in the content graph.

    Gates (all optional):
    - for_character: only these characters may see it
    - seasons: only in these seasons (empty = any)
    - min_turn / max_turn: inclusive turn window
    - min_stats / max_stats: sparse stat thresholds
    - min_stage: narrative tier required
    """
    id: str
    title: str
    text: str
    choices: tuple[Choice, ...] = ()
    arc: int = 1
    phase: ScenePhase | None = None
    vector: Path | str | None = None
    backlog: bool = False
    min_turn: int | None = None
    max_turn: int | None = None
    min_stats: dict[str, float] = field(default_factory=dict)
    max_stats: dict[str, float] = field(default_factory=dict)
    min_stage: Stage | None = None
    seasons: tuple[Season, ...] = ()
    for_character: tuple[str, ...] = ()

    def get_choice(self, choice_id: str) -> Choice | None:
        """Get a choice by ID."""
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        return None

    @property
    def tier(self) -> Stage:
        """Deck bucket; untiered scenes sit in the lowest tier."""
        return self.min_stage or Stage.EARLY


@dataclass(frozen=True)
class WorldEvent:
    """An effect applied without player choice."""
    id: str
    title: str
    text: str
    effects: Effects = NO_EFFECTS


@dataclass(frozen=True)
class Character:
    """A playable preset. `stats` must be a complete Stats record."""
    id: str
    name: str
    description: str
    lore: str
    stats: Stats
