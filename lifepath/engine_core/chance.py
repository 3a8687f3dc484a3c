"""
Chance Function - Success probability of a choice given current stats.

Contract:
- skill and health improve the odds
- fatigue and negative money worsen them
- effort gates how much skill and fatigue matter
  (physical > mental > social/rest/neutral, which ignore both)
- luck gives a small nudge
- the result is always inside [MIN_CHANCE, MAX_CHANCE]
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from .constants import (
    LUCK_BONUS_CAP,
    LUCK_BONUS_DIVISOR,
    MAX_CHANCE,
    MIN_CHANCE,
    SKILL_BONUS_CAP,
    SKILL_BONUS_DIVISOR,
)
from .content import Choice, Effort, Scene
from .stats import STAT_FIELDS, Effects, Stats

SKILL_FACTORS: dict[Effort, float] = {
    Effort.PHYSICAL: 0.02,
    Effort.MENTAL: 0.01,
}

FATIGUE_FACTORS: dict[Effort, float] = {
    Effort.PHYSICAL: 0.035,
    Effort.MENTAL: 0.02,
}

REPUTATION_FACTOR = 0.01
HEALTH_FACTOR = 0.008
WEALTH_FACTOR = 0.004
DEBT_PENALTY_FACTOR = 0.015
LUCK_FACTOR = 0.006
BASELINE_OFFSET = -0.05


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp into [low, high]. Non-finite values collapse to `low`."""
    if not math.isfinite(value):
        return low
    return max(low, min(high, value))


def get_chance(choice: Choice, stats: Stats) -> float:
    """Probability that `choice` succeeds for a character with `stats`."""
    skill_factor = SKILL_FACTORS.get(choice.effort, 0.0)
    fatigue_factor = FATIGUE_FACTORS.get(choice.effort, 0.0)
    debt_penalty = abs(stats.money) * DEBT_PENALTY_FACTOR if stats.money < 0 else 0.0
    modifier = (
        stats.skill * skill_factor
        + stats.reputation * REPUTATION_FACTOR
        + stats.health * HEALTH_FACTOR
        - stats.money * WEALTH_FACTOR
        - stats.fatigue * fatigue_factor
        - debt_penalty
        + stats.luck * LUCK_FACTOR
        + BASELINE_OFFSET
    )
    return clamp(choice.base_chance + modifier, MIN_CHANCE, MAX_CHANCE)


def money_bonus_cap(stats: Stats) -> tuple[int, int]:
    """(skill bonus, luck bonus) added to a successful money gain. Never negative."""
    skill_bonus = min(SKILL_BONUS_CAP, math.floor(stats.skill / SKILL_BONUS_DIVISOR))
    luck_bonus = min(LUCK_BONUS_CAP, math.floor(stats.luck / LUCK_BONUS_DIVISOR))
    return max(0, skill_bonus), max(0, luck_bonus)


@dataclass(frozen=True)
class MoneyRange:
    """Preview of what a successful paying choice can earn."""
    min: float
    max: float

    @property
    def label(self) -> str:
        return f"+{self.min:g}..+{self.max:g}"


def get_money_range(choice: Choice, stats: Stats) -> MoneyRange | None:
    """Range of money a success would pay, or None for non-paying choices."""
    base = choice.success.money
    if base <= 0:
        return None
    skill_bonus, luck_bonus = money_bonus_cap(stats)
    top = base + skill_bonus + luck_bonus + 1
    return MoneyRange(min=base, max=top)


def effects_equal(a: Effects, b: Effects) -> bool:
    return all(getattr(a, name) == getattr(b, name) for name in STAT_FIELDS)


def is_neutral_choice(choice: Choice) -> bool:
    """A choice with no real risk: both outcomes read and act the same."""
    return choice.success_text == choice.fail_text and effects_equal(choice.success, choice.fail)


def available_choices(scene: Scene, stats: Stats) -> list[Choice]:
    """Choices the character is healthy enough to take."""
    return [
        choice for choice in scene.choices
        if choice.min_health is None or stats.health >= choice.min_health
    ]
