"""
Pytest fixtures for Lifepath tests.
"""

import pytest

from ..engine_core.reducer import Reducer
from ..engine_core.content import ScenePhase
from ..engine_core.stats import Stats
from ..session import SessionManager
from .helpers import constant_rng, make_event, make_scene, make_start_scene


@pytest.fixture
def small_scenes():
    """One start scene and four plain early deck scenes."""
    return (
        make_start_scene("opening"),
        make_scene("docks", phase=ScenePhase.EARLY),
        make_scene("market", phase=ScenePhase.EARLY),
        make_scene("tavern", phase=ScenePhase.EARLY),
        make_scene("well", phase=ScenePhase.EARLY),
    )


@pytest.fixture
def small_reducer(small_scenes) -> Reducer:
    """Reducer over the small scene set with one recurring and one major event."""
    return Reducer(
        events=(make_event("rain", money=-1),),
        major_events=(make_event("plague", health=-3),),
        scenes=small_scenes,
    )


@pytest.fixture
def quiet_state(small_reducer):
    """
    A fresh state on the small content with events pushed out of reach.

    Money is comfortable so hunger stays out of the way.
    """
    state = small_reducer.create_state(
        Stats(money=20, reputation=0, skill=0, health=10),
        constant_rng(0.5),
        event_deck=[],
    )
    return state._copy_with(next_event_turn=99)


@pytest.fixture
def manager() -> SessionManager:
    """A session manager over the bundled content."""
    return SessionManager()


class FakeClock:
    """Settable stand-in for time.time."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
