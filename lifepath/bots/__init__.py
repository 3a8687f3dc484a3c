"""
Bots module - Scripted strategies for headless play.

Provides:
- StrategyPolicy: Interface for choice-making
- RandomStrategy / SafeStrategy / GreedyStrategy
- ChoiceEvaluator: Scores choices by expected gain
"""

from .policy import (
    STRATEGIES,
    GreedyStrategy,
    RandomStrategy,
    SafeStrategy,
    StrategyDecision,
    StrategyPolicy,
    get_strategy,
)
from .evaluator import ChoiceEvaluation, ChoiceEvaluator, EvaluationWeights

__all__ = [
    "STRATEGIES",
    "GreedyStrategy",
    "RandomStrategy",
    "SafeStrategy",
    "StrategyDecision",
    "StrategyPolicy",
    "get_strategy",
    "ChoiceEvaluation",
    "ChoiceEvaluator",
    "EvaluationWeights",
]
