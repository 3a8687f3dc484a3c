"""
Balance Simulator - Monte-Carlo runs of the engine with scripted strategies.

Each run gets its own seeded rng (base seed + run index when a base seed is
given), starts from the chosen character preset, and is driven to completion
by a strategy. The report collects an ending histogram and average final
stats.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence
import logging

from .bots.policy import get_strategy
from .content import DEFAULT_CHARACTER_ID, get_character
from .engine_core.reducer import Reducer, default_reducer
from .engine_core.stats import STAT_FIELDS, Stats
from .session.game_loop import GameLoop
from .session.manager import Session, UnknownCharacterError, start_run

logger = logging.getLogger(__name__)

DEFAULT_RUNS = 500


@dataclass
class SimulationReport:
    """Aggregate outcome of a batch of runs."""
    runs: int
    character_id: str
    character_name: str
    strategy: str
    seed: int | None = None
    endings: dict[str, int] = field(default_factory=dict)
    ending_reasons: dict[str, int] = field(default_factory=dict)
    average_stats: dict[str, float] = field(default_factory=dict)

    def ending_share(self, title: str) -> float:
        if not self.runs:
            return 0.0
        return self.endings.get(title, 0) / self.runs

    def format_lines(self) -> list[str]:
        """Human-readable summary, one line per entry."""
        lines = [
            "Simulation summary",
            f"Runs: {self.runs}",
            f"Character: {self.character_name} ({self.character_id})",
            f"Strategy: {self.strategy}",
        ]
        if self.seed is not None:
            lines.append(f"Seed: {self.seed}")
        lines.append("Endings:")
        for title, count in self.endings.items():
            lines.append(f"- {title}: {count} ({self.ending_share(title) * 100:.1f}%)")
        lines.append("Average final stats:")
        for name, value in self.average_stats.items():
            lines.append(f"- {name}: {value:g}")
        return lines


def summarize_stats(stats_list: Sequence[Stats]) -> dict[str, float]:
    """Per-field mean over a list of stats, rounded to 2 places."""
    count = len(stats_list) or 1
    return {
        name: round(sum(getattr(stats, name) for stats in stats_list) / count, 2)
        for name in STAT_FIELDS
    }


def run_simulation(
    runs: int = DEFAULT_RUNS,
    seed: int | None = None,
    strategy: str = "random",
    character_id: str | None = None,
    reducer: Reducer | None = None,
) -> SimulationReport:
    """
    Play `runs` complete runs and aggregate the results.

    Args:
        runs: Number of runs
        seed: Base seed; run i uses seed + i. Unseeded runs draw from entropy
        strategy: random, safe or greedy
        character_id: Preset to play; defaults to the first preset
        reducer: Engine to use; defaults to the bundled content

    Raises:
        UnknownCharacterError: for an unknown character id
        ValueError: for an unknown strategy or a negative run count
    """
    if runs < 0:
        raise ValueError("runs must be >= 0")

    character_id = character_id or DEFAULT_CHARACTER_ID
    character = get_character(character_id)
    if character is None:
        raise UnknownCharacterError(character_id)

    policy = get_strategy(strategy)
    reducer = reducer or default_reducer()

    logger.info(
        "Simulating %d run(s) of %s with the %s strategy",
        runs,
        character.id,
        policy.get_name(),
    )

    endings: dict[str, int] = {}
    reasons: dict[str, int] = {}
    final_stats: list[Stats] = []

    for index in range(runs):
        run_seed = seed + index if seed is not None else None
        rng, game_state = start_run(character, run_seed, reducer)
        session = Session(
            session_id=f"sim-{index}",
            character=character,
            rng=rng,
            game_state=game_state,
            reducer=reducer,
            created_at=0.0,
        )
        outcome = GameLoop(session, policy).run()

        endings[outcome.ending.title] = endings.get(outcome.ending.title, 0) + 1
        reason = session.game_state.ending_reason
        reasons[reason] = reasons.get(reason, 0) + 1
        final_stats.append(session.game_state.stats)
        logger.debug(
            "Run %d (seed %d): %s after %d turn(s)",
            index,
            rng.seed,
            outcome.ending.title,
            len(outcome.turns),
        )

    report = SimulationReport(
        runs=runs,
        character_id=character.id,
        character_name=character.name,
        strategy=policy.get_name(),
        seed=seed,
        endings=endings,
        ending_reasons=reasons,
        average_stats=summarize_stats(final_stats),
    )
    logger.info("Simulation finished: %d distinct ending(s)", len(endings))
    return report
