"""
Seeded Randomness - The single source of chance for the engine.

Every stochastic decision (success rolls, shuffles, index picks, luck drift)
consumes from one `rng` callable that is created here and threaded through
the engine by the caller. Replaying a seed with the same choices replays the
same run.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar
import math
import random

T = TypeVar("T")

# A zero-argument callable returning a float in [0, 1)
Rng = Callable[[], float]

SEED_BITS = 32


@dataclass(frozen=True)
class SeededRng:
    """A seed together with the generator it produced."""
    seed: int
    rng: Rng

    def __call__(self) -> float:
        return self.rng()


def create_seeded_rng(seed: int | None = None) -> SeededRng:
    """
    Create a deterministic generator.

    Args:
        seed: Seed to use. When omitted (or not a finite number) a fresh
            seed is drawn from OS entropy and reported back.

    Returns:
        SeededRng whose `rng()` yields floats in [0, 1)
    """
    if seed is None or isinstance(seed, bool) or not _is_finite_number(seed):
        seed = random.SystemRandom().getrandbits(SEED_BITS)
    final_seed = int(seed)
    generator = random.Random(final_seed)
    return SeededRng(seed=final_seed, rng=generator.random)


def shuffle(items: Sequence[T], rng: Rng) -> list[T]:
    """Fisher-Yates shuffle into a new list, consuming from `rng`."""
    copy = list(items)
    for i in range(len(copy) - 1, 0, -1):
        j = int(rng() * (i + 1))
        copy[i], copy[j] = copy[j], copy[i]
    return copy


def pick_index(length: int, rng: Rng) -> int:
    """Uniform index in [0, length)."""
    if length <= 0:
        raise ValueError("Cannot pick from an empty sequence")
    return min(int(rng() * length), length - 1)


def roll_initial_luck(rng: Rng) -> int:
    """Starting luck for a fresh character: 0-4."""
    return int(math.floor(rng() * 5))


def _is_finite_number(value: object) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)
