"""
Stat Model - The character state vector and sparse effect deltas.

Design principles:
- Fixed shape: every consumer can enumerate STAT_FIELDS statically
- Immutable: applying an effect returns a new Stats
- No clamping: money and reputation may go negative, rules clamp explicitly
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping
import math

from .constants import SEASON_TURNS


class Stage(Enum):
    """Coarse narrative-progress tier derived from money and reputation."""
    EARLY = "Early"
    RISING = "Rising"
    ESTABLISHED = "Established"
    NOBLE = "Noble"

    @property
    def index(self) -> int:
        return STAGE_ORDER.index(self)


STAGE_ORDER: list[Stage] = [Stage.EARLY, Stage.RISING, Stage.ESTABLISHED, Stage.NOBLE]


class Season(Enum):
    """Seasons cycle every SEASON_TURNS turns."""
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"


SEASON_ORDER: list[Season] = [Season.SPRING, Season.SUMMER, Season.AUTUMN, Season.WINTER]


@dataclass(frozen=True)
class Stats:
    """
    Complete numeric state of a character.

    `health <= 0` is terminal. `hunger_debt` and `fatigue` are tracked by the
    turn engine; `karma` drifts with morally loaded choices.
    """
    money: float = 0
    reputation: float = 0
    skill: float = 0
    health: float = 10
    age: float = 16
    family: float = 0
    hunger_debt: float = 0
    fatigue: float = 0
    luck: float = 0
    karma: float = 0

    def to_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in STAT_FIELDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stats:
        """Build from a mapping. Unknown keys are an error."""
        unknown = set(data) - set(STAT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown stat fields: {sorted(unknown)}")
        return cls(**data)

    def _copy_with(self, **kwargs: float) -> Stats:
        """Create a copy with some fields replaced."""
        values = self.to_dict()
        values.update(kwargs)
        return Stats(**values)


@dataclass(frozen=True)
class Effects:
    """
    Sparse delta over the Stats fields.

    A field left at 0 means "no change". Success and fail outcomes of a
    choice, world events and engine bookkeeping are all expressed as Effects.
    """
    money: float = 0
    reputation: float = 0
    skill: float = 0
    health: float = 0
    age: float = 0
    family: float = 0
    hunger_debt: float = 0
    fatigue: float = 0
    luck: float = 0
    karma: float = 0

    def to_dict(self) -> dict[str, float]:
        """Only the fields that actually change."""
        return {
            name: getattr(self, name)
            for name in STAT_FIELDS
            if getattr(self, name) != 0
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Effects:
        unknown = set(data) - set(STAT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown effect fields: {sorted(unknown)}")
        return cls(**data)

    def _copy_with(self, **kwargs: float) -> Effects:
        values = {name: getattr(self, name) for name in STAT_FIELDS}
        values.update(kwargs)
        return Effects(**values)

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()


STAT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Stats))

NO_EFFECTS = Effects()


def apply_effects(stats: Stats, effects: Effects) -> Stats:
    """Add every field of `effects` to `stats`. Pure, total, unclamped."""
    return Stats(**{
        name: getattr(stats, name) + getattr(effects, name)
        for name in STAT_FIELDS
    })


def normalize_stats(stats: Stats) -> Stats:
    """Replace any non-finite field (NaN, +/-inf) with 0."""
    return Stats(**{
        name: _finite_or_zero(getattr(stats, name))
        for name in STAT_FIELDS
    })


def stage_label(stats: Stats) -> Stage:
    """Narrative tier from money and reputation thresholds."""
    if stats.money >= 50 and stats.reputation >= 30:
        return Stage.NOBLE
    if stats.money >= 25 and stats.reputation >= 15:
        return Stage.ESTABLISHED
    if stats.money >= 10 or stats.reputation >= 8:
        return Stage.RISING
    return Stage.EARLY


def can_use_stage(stage: Stage, min_stage: Stage | None) -> bool:
    if min_stage is None:
        return True
    return stage.index >= min_stage.index


def season_from_turn(turn: int) -> Season:
    index = ((turn - 1) // SEASON_TURNS) % len(SEASON_ORDER)
    return SEASON_ORDER[index]


def _finite_or_zero(value: Any) -> float:
    if isinstance(value, (int, float)) and math.isfinite(value):
        return value
    return 0
