"""
Choice Evaluator - Scores choices for strategy decision-making.

A choice is scored by its expected stat gain:
    chance * value(success) + (1 - chance) * value(fail)
where value() is a weighted sum over the effect fields.

Weights can be adjusted to create different play styles.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.chance import get_chance
from ..engine_core.content import Choice
from ..engine_core.stats import Effects, Stats, normalize_stats


@dataclass
class EvaluationWeights:
    """
    Weights for the choice evaluator.

    Higher values = more importance. Fields left at 0 are ignored.
    """
    money: float = 1.0
    reputation: float = 1.0
    skill: float = 1.0
    health: float = 1.0

    # Ignored by the balance greedy strategy
    family: float = 0.0
    fatigue: float = 0.0
    luck: float = 0.0
    karma: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "money": self.money,
            "reputation": self.reputation,
            "skill": self.skill,
            "health": self.health,
            "family": self.family,
            "fatigue": self.fatigue,
            "luck": self.luck,
            "karma": self.karma,
        }


@dataclass
class ChoiceEvaluation:
    """
    Result of evaluating a choice.
    """
    expected_value: float
    chance: float
    success_value: float
    fail_value: float
    feature_breakdown: dict[str, float] = field(default_factory=dict)


class ChoiceEvaluator:
    """
    Evaluates choices using weighted expected value.

    Used by the greedy strategy for one-step lookahead without touching
    the rng: the chance function gives the odds, the effects give the payoff.
    """

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def value(self, effects: Effects) -> float:
        """Weighted sum of an effect record."""
        return sum(
            weight * getattr(effects, name)
            for name, weight in self.weights.as_dict().items()
            if weight
        )

    def evaluate(self, choice: Choice, stats: Stats) -> ChoiceEvaluation:
        chance = get_chance(choice, normalize_stats(stats))
        success_value = self.value(choice.success)
        fail_value = self.value(choice.fail)
        expected = success_value * chance + fail_value * (1 - chance)
        return ChoiceEvaluation(
            expected_value=expected,
            chance=chance,
            success_value=success_value,
            fail_value=fail_value,
            feature_breakdown={
                "success": success_value * chance,
                "fail": fail_value * (1 - chance),
            },
        )
