"""
Ending Classifier - Maps terminal stats to a single ending.

Evaluation order (first hit wins):
1. Death, when health <= 0
2. ARCHETYPES, top to bottom, when every threshold holds
3. Near miss, when the closest archetype is within NEAR_MISS_THRESHOLD
4. Wealth tier fallback (destitute / poor / modest)

Every non-death ending also gets a tone sentence from reputation and karma.
The tone never changes which ending is picked.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .constants import NEAR_MISS_THRESHOLD
from .stats import Stats


class EndingKind(Enum):
    DEATH = "death"
    ARCHETYPE = "archetype"
    NEAR_MISS = "near_miss"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Ending:
    title: str
    text: str
    kind: EndingKind
    archetype_id: str | None = None


@dataclass(frozen=True)
class Archetype:
    """
    A named life outcome defined by stat thresholds.

    `minimums` must all be met, `maximums` must not be exceeded.
    """
    id: str
    title: str
    text: str
    minimums: dict[str, float] = field(default_factory=dict)
    maximums: dict[str, float] = field(default_factory=dict)

    def matches(self, stats: Stats) -> bool:
        return self.missing_score(stats) == 0

    def missing_score(self, stats: Stats) -> float:
        """Sum of shortfalls below minimums and overages above maximums."""
        shortfall = sum(
            max(0, minimum - getattr(stats, name))
            for name, minimum in self.minimums.items()
        )
        overage = sum(
            max(0, getattr(stats, name) - maximum)
            for name, maximum in self.maximums.items()
        )
        return shortfall + overage


# Priority order matters: a feudal lord also satisfies the merchant rule
ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        id="feudal_lord",
        title="Feudal Lord",
        text="You end your days as a powerful lord with land and men at your command.",
        minimums={"money": 55, "reputation": 35},
    ),
    Archetype(
        id="merchant",
        title="Merchant",
        text="You become a prosperous merchant with a house of your own.",
        minimums={"money": 35, "reputation": 15},
    ),
    Archetype(
        id="knight",
        title="Knight",
        text="Your name is sung in the halls as a knight who earned every spur.",
        minimums={"skill": 12, "reputation": 12, "health": 4},
    ),
    Archetype(
        id="artisan",
        title="Master Artisan",
        text="Your workshop hums with apprentices and orders from three towns.",
        minimums={"skill": 10, "money": 15},
    ),
    Archetype(
        id="guard",
        title="Captain of the Guard",
        text="You keep the gates of the town, trusted by the watch and feared by thieves.",
        minimums={"skill": 6, "health": 8, "reputation": 6},
    ),
    Archetype(
        id="monk",
        title="Monk",
        text="You turn from the world and find your peace behind monastery walls.",
        minimums={"reputation": 18, "karma": 2},
        maximums={"money": 10},
    ),
)

DEATH_TITLE = "Death"
DEATH_TEXT = "You die worn down by hardship and wounds."


@dataclass(frozen=True)
class WealthTier:
    title: str
    text: str
    applies: Callable[[Stats], bool]


# Checked in order; the last tier always applies
WEALTH_TIERS: tuple[WealthTier, ...] = (
    WealthTier(
        title="Destitute",
        text="You die poor and all but forgotten.",
        applies=lambda stats: stats.money <= 0,
    ),
    WealthTier(
        title="Poor Laborer",
        text="You scrape by to the end, one day's bread at a time.",
        applies=lambda stats: stats.money < 12 and stats.reputation < 10,
    ),
    WealthTier(
        title="Modest Life",
        text="You live out your years in a modest home, neither rich nor wanting.",
        applies=lambda stats: True,
    ),
)


@dataclass(frozen=True)
class ToneRule:
    sentence: str
    applies: Callable[[Stats], bool]


TONE_RULES: tuple[ToneRule, ...] = (
    ToneRule("People remember your kindness long after you are gone.", lambda s: s.karma >= 3),
    ToneRule("Whispers of your darker dealings follow your name.", lambda s: s.karma <= -3),
    ToneRule("Your word carries weight across the town.", lambda s: s.reputation >= 20),
    ToneRule("Few speak of you fondly.", lambda s: s.reputation < 0),
)

QUIET_TONE = "Your life passes quietly, neither praised nor condemned."


def tone_sentence(stats: Stats) -> str:
    sentences = [rule.sentence for rule in TONE_RULES if rule.applies(stats)]
    return " ".join(sentences) if sentences else QUIET_TONE


def match_archetype(stats: Stats) -> Archetype | None:
    """First archetype, in priority order, whose thresholds all hold."""
    for archetype in ARCHETYPES:
        if archetype.matches(stats):
            return archetype
    return None


def nearest_archetype(stats: Stats) -> tuple[Archetype, float]:
    """Archetype with the smallest missing score. Ties keep priority order."""
    best = ARCHETYPES[0]
    best_score = best.missing_score(stats)
    for archetype in ARCHETYPES[1:]:
        score = archetype.missing_score(stats)
        if score < best_score:
            best, best_score = archetype, score
    return best, best_score


def _compose(*parts: str) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def get_ending(stats: Stats, reason: str) -> Ending:
    """Classify a finished run. Total over every stats vector."""
    if stats.health <= 0:
        return Ending(
            title=DEATH_TITLE,
            text=_compose(reason, DEATH_TEXT),
            kind=EndingKind.DEATH,
        )

    tone = tone_sentence(stats)

    archetype = match_archetype(stats)
    if archetype is not None:
        return Ending(
            title=archetype.title,
            text=_compose(reason, archetype.text, tone),
            kind=EndingKind.ARCHETYPE,
            archetype_id=archetype.id,
        )

    nearest, score = nearest_archetype(stats)
    if score <= NEAR_MISS_THRESHOLD:
        return Ending(
            title=f"Almost a {nearest.title}",
            text=_compose(
                reason,
                f"You came within a hair of the life of a {nearest.title.lower()}.",
                "Another season might have been enough.",
                tone,
            ),
            kind=EndingKind.NEAR_MISS,
            archetype_id=nearest.id,
        )

    for tier in WEALTH_TIERS:
        if tier.applies(stats):
            return Ending(
                title=tier.title,
                text=_compose(reason, tier.text, tone),
                kind=EndingKind.FALLBACK,
            )
    # WEALTH_TIERS ends with a catch-all
    raise AssertionError("unreachable")
