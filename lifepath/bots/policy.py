"""
Strategy Policy - Interface for scripted choice-making.

A StrategyPolicy looks at the current scene and stats and picks a choice.
Strategies drive the balance simulator and the GameLoop.

Strategies only consider choices the character is healthy enough to take.
When a scene offers none, the first listed choice is used.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..engine_core.chance import available_choices, get_chance
from ..engine_core.content import Choice
from ..engine_core.rng import Rng, pick_index
from ..engine_core.state import GameState
from ..engine_core.stats import normalize_stats
from .evaluator import ChoiceEvaluator, EvaluationWeights


@dataclass
class StrategyDecision:
    """
    A decision made by a strategy.

    Contains:
    - The choice to take
    - Explanation (for logs/debugging)
    - Confidence in the decision
    """
    choice: Choice
    explanation: str = ""
    confidence: float = 1.0

    # Evaluation details (for debugging)
    evaluated_choices: int = 0
    best_score: float = 0.0
    evaluation_details: dict[str, Any] = field(default_factory=dict)


class StrategyPolicy(ABC):
    """
    Abstract base class for strategies.

    The rng passed in is the session's rng, so a run driven by a strategy
    stays reproducible from its seed.
    """

    name: str = "base"

    @abstractmethod
    def select_choice(self, state: GameState, rng: Rng) -> StrategyDecision:
        """
        Select a choice from the current scene.

        Args:
            state: Current game state
            rng: The session's random source

        Returns:
            StrategyDecision with the selected choice
        """
        pass

    def get_name(self) -> str:
        """Get the strategy's name/identifier."""
        return self.name

    def _candidates(self, state: GameState) -> list[Choice]:
        choices = available_choices(state.scene, normalize_stats(state.stats))
        if choices:
            return choices
        if not state.scene.choices:
            raise ValueError(f"Scene '{state.scene.id}' has no choices")
        return [state.scene.choices[0]]


class RandomStrategy(StrategyPolicy):
    """
    Random strategy - picks uniformly among available choices.

    Used for:
    - Testing
    - Baseline comparison
    """

    name = "random"

    def select_choice(self, state: GameState, rng: Rng) -> StrategyDecision:
        candidates = self._candidates(state)
        choice = candidates[pick_index(len(candidates), rng)]
        return StrategyDecision(
            choice=choice,
            explanation="Selected randomly",
            confidence=1.0 / len(candidates),
            evaluated_choices=len(candidates),
        )


class SafeStrategy(StrategyPolicy):
    """
    Safe strategy - picks the choice most likely to succeed.

    Ties keep display order.
    """

    name = "safe"

    def select_choice(self, state: GameState, rng: Rng) -> StrategyDecision:
        candidates = self._candidates(state)
        stats = normalize_stats(state.stats)
        best = candidates[0]
        best_chance = get_chance(best, stats)
        for choice in candidates[1:]:
            chance = get_chance(choice, stats)
            if chance > best_chance:
                best, best_chance = choice, chance
        return StrategyDecision(
            choice=best,
            explanation=f"Highest chance of success ({best_chance:.0%})",
            confidence=best_chance,
            evaluated_choices=len(candidates),
            best_score=best_chance,
        )


class GreedyStrategy(StrategyPolicy):
    """
    Greedy strategy - picks the best expected stat gain.

    Uses ChoiceEvaluator; ties keep display order.
    """

    name = "greedy"

    def __init__(self, weights: EvaluationWeights | None = None):
        self.evaluator = ChoiceEvaluator(weights)

    def select_choice(self, state: GameState, rng: Rng) -> StrategyDecision:
        candidates = self._candidates(state)
        details: dict[str, float] = {}
        best = candidates[0]
        best_score = float("-inf")
        for choice in candidates:
            evaluation = self.evaluator.evaluate(choice, state.stats)
            details[choice.id] = evaluation.expected_value
            if evaluation.expected_value > best_score:
                best, best_score = choice, evaluation.expected_value
        return StrategyDecision(
            choice=best,
            explanation=f"Best expected gain ({best_score:+.2f})",
            evaluated_choices=len(candidates),
            best_score=best_score,
            evaluation_details=details,
        )


STRATEGIES: dict[str, type[StrategyPolicy]] = {
    RandomStrategy.name: RandomStrategy,
    SafeStrategy.name: SafeStrategy,
    GreedyStrategy.name: GreedyStrategy,
}


def get_strategy(name: str) -> StrategyPolicy:
    """Instantiate a strategy by name."""
    strategy_class = STRATEGIES.get(name)
    if strategy_class is None:
        raise ValueError(
            f"Unknown strategy '{name}'. Choose from: {', '.join(STRATEGIES)}"
        )
    return strategy_class()
