"""
Game Loop - Drives a session headlessly with a strategy.

The loop:
1. Strategy looks at the current scene and picks a choice
2. Session validates and resolves the choice
3. Repeat until the run is over
4. Classify the ending

Used by the balance simulator and by tests; presentation clients call
Session.choose() directly instead.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ..engine_core.constants import MAX_TURNS
from ..engine_core.ending import Ending
from ..engine_core.reducer import ResultPayload

if TYPE_CHECKING:
    from ..bots.policy import StrategyPolicy
    from .manager import Session


class LoopState(Enum):
    """State of the game loop."""
    WAITING_CHOICE = "waiting_choice"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of one loop step.

    Carries the strategy's pick and the engine's result payload.
    """
    loop_state: LoopState
    turn: int
    choice_id: str
    explanation: str = ""
    result: ResultPayload | None = None


@dataclass
class RunOutcome:
    """A finished run."""
    ending: Ending
    turns: list[TurnResult] = field(default_factory=list)

    @property
    def choice_ids(self) -> list[str]:
        return [turn.choice_id for turn in self.turns]


class GameLoop:
    """
    The headless game loop driver.

    Usage:
        loop = GameLoop(session, SafeStrategy())
        outcome = loop.run()
        print(outcome.ending.title)
    """

    # Every run ends within MAX_TURNS transitions; the slack guards content bugs
    SAFETY_LIMIT = MAX_TURNS + 5

    def __init__(self, session: Session, strategy: StrategyPolicy):
        self.session = session
        self.strategy = strategy
        self.state = (
            LoopState.GAME_OVER if session.game_over else LoopState.WAITING_CHOICE
        )

    def step(self) -> TurnResult:
        """Pick and resolve one choice."""
        turn = self.session.game_state.turn
        decision = self.strategy.select_choice(self.session.game_state, self.session.rng.rng)
        resolution = self.session.choose(decision.choice.id)

        self.state = (
            LoopState.GAME_OVER if resolution.next_state.game_over else LoopState.WAITING_CHOICE
        )
        return TurnResult(
            loop_state=self.state,
            turn=turn,
            choice_id=decision.choice.id,
            explanation=decision.explanation,
            result=resolution.result,
        )

    def run(self) -> RunOutcome:
        """
        Play until the run is over.

        Raises RuntimeError if the run does not end within SAFETY_LIMIT steps.
        """
        turns: list[TurnResult] = []
        while not self.session.game_over:
            if len(turns) >= self.SAFETY_LIMIT:
                raise RuntimeError(
                    f"Run did not end after {self.SAFETY_LIMIT} turns "
                    f"(session {self.session.session_id})"
                )
            turns.append(self.step())

        self.state = LoopState.GAME_OVER
        return RunOutcome(ending=self.session.ending(), turns=turns)
