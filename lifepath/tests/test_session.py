"""
Tests for play sessions and the session manager.

Tests:
- Session creation and character lookup
- Choice validation and resolution
- Run lifecycle: ending, restart, end
- Idle session cleanup
"""

import pytest

from ..bots import SafeStrategy
from ..content import DEFAULT_CHARACTER_ID
from ..engine_core.chance import available_choices
from ..engine_core.constants import MAX_TURNS
from ..session import (
    GameLoop,
    GameNotOverError,
    GameOverError,
    InvalidChoiceError,
    LoopState,
    SessionManager,
    SessionNotFoundError,
    SessionState,
    UnknownCharacterError,
    start_run,
)
from ..content import get_character


def first_choice_id(session):
    state = session.game_state
    choices = available_choices(state.scene, state.stats)
    return (choices or list(state.scene.choices))[0].id


def play_to_end(session):
    for _ in range(MAX_TURNS + 1):
        if session.game_over:
            break
        session.choose(first_choice_id(session))
    return session


class TestCreateSession:
    """Tests for SessionManager.create_session."""

    def test_default_character(self, manager):
        session = manager.create_session()

        assert session.character.id == DEFAULT_CHARACTER_ID
        assert session.state == SessionState.ACTIVE
        assert session.game_state.turn == 1
        assert session.is_active()

    def test_named_character(self, manager):
        session = manager.create_session("farmer", seed=5)

        assert session.character.id == "farmer"
        assert session.seed == 5
        assert session.game_state.character_id == "farmer"

    def test_unknown_character(self, manager):
        with pytest.raises(UnknownCharacterError) as exc_info:
            manager.create_session("wizard")
        assert exc_info.value.character_id == "wizard"

    def test_luck_is_rolled(self, manager):
        lucks = {manager.create_session(seed=seed).game_state.stats.luck for seed in range(40)}

        assert lucks <= {0, 1, 2, 3, 4}
        assert len(lucks) > 1

    def test_same_seed_same_opening(self, manager):
        a = manager.create_session("apprentice", seed=77)
        b = manager.create_session("apprentice", seed=77)

        assert a.session_id != b.session_id
        assert a.game_state.to_snapshot() == b.game_state.to_snapshot()


class TestChoose:
    def test_resolves_turn(self, manager):
        session = manager.create_session(seed=1)
        choice_id = first_choice_id(session)

        resolution = session.choose(choice_id)

        assert session.game_state is resolution.next_state
        assert session.game_state.turn == 2
        assert session.last_result is resolution.result
        assert session.history == [choice_id]

    def test_unknown_choice(self, manager):
        session = manager.create_session(seed=1)

        with pytest.raises(InvalidChoiceError) as exc_info:
            session.choose("fly-away")
        assert exc_info.value.scene_id == session.game_state.scene.id
        assert session.game_state.turn == 1

    def test_locked_choice(self, manager):
        from ..engine_core.stats import Stats
        from .helpers import make_choice, make_scene

        session = manager.create_session(seed=1)
        scene = make_scene("arena", make_choice("fight", min_health=8), make_choice("watch"))
        session.game_state = session.game_state._copy_with(
            scene=scene, stats=Stats(money=5, health=4)
        )

        with pytest.raises(InvalidChoiceError, match="locked"):
            session.choose("fight")

    def test_same_seed_same_run(self, manager):
        a = play_to_end(manager.create_session("refugee", seed=31))
        b = play_to_end(manager.create_session("refugee", seed=31))

        assert a.history == b.history
        assert a.game_state.to_snapshot() == b.game_state.to_snapshot()
        assert a.ending() == b.ending()


class TestRunLifecycle:
    def test_ending_before_game_over(self, manager):
        session = manager.create_session(seed=2)
        with pytest.raises(GameNotOverError):
            session.ending()

    def test_finished_run(self, manager):
        session = play_to_end(manager.create_session(seed=2))

        assert session.game_over
        assert session.state == SessionState.GAME_OVER
        assert not session.is_active()
        assert session.ending().title

        with pytest.raises(GameOverError):
            session.choose(first_choice_id(session))

    def test_restart_keeps_session_and_character(self, manager):
        session = play_to_end(manager.create_session("farmer", seed=2))
        session_id = session.session_id

        session.restart(seed=9)

        assert session.session_id == session_id
        assert session.character.id == "farmer"
        assert session.seed == 9
        assert session.game_state.turn == 1
        assert not session.game_over
        assert session.state == SessionState.ACTIVE
        assert session.history == []
        assert session.last_result is None
        assert session.runs_started == 2


class TestSessionManager:
    def test_require_missing(self, manager):
        with pytest.raises(SessionNotFoundError):
            manager.require_session("missing")
        assert manager.get_session("missing") is None

    def test_end_session(self, manager):
        session = manager.create_session()

        assert manager.end_session(session.session_id)
        assert session.state == SessionState.ABANDONED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_list_active_sessions(self, manager):
        playing = manager.create_session(seed=3)
        finished = play_to_end(manager.create_session(seed=4))

        active = manager.list_active_sessions()
        assert playing.session_id in active
        assert finished.session_id not in active
        assert len(manager.list_sessions()) == 2

    def test_stale_sessions_dropped(self, clock):
        manager = SessionManager(session_ttl=60, clock=clock)
        old = manager.create_session(seed=1)
        clock.advance(45)
        fresh = manager.create_session(seed=2)
        clock.advance(30)

        assert manager.cleanup_stale_sessions() == 1
        assert manager.get_session(old.session_id) is None
        assert manager.get_session(fresh.session_id) is fresh

    def test_access_keeps_session_alive(self, clock):
        manager = SessionManager(session_ttl=60, clock=clock)
        session = manager.create_session(seed=1)

        for _ in range(3):
            clock.advance(50)
            assert manager.get_session(session.session_id) is session

    def test_choose_and_restart_use_manager_clock(self, clock):
        manager = SessionManager(session_ttl=60, clock=clock)
        session = manager.create_session(seed=1)

        clock.advance(30)
        session.choose(available_choices(session.game_state.scene, session.game_state.stats)[0].id)
        assert session.last_active_at == clock.now

        clock.advance(30)
        session.restart(seed=2)
        assert session.last_active_at == clock.now

        clock.advance(45)
        assert manager.cleanup_stale_sessions() == 0
        clock.advance(30)
        assert manager.cleanup_stale_sessions() == 1

    def test_explicit_idle_limit(self, clock):
        manager = SessionManager(clock=clock)
        manager.create_session(seed=1)
        clock.advance(10)

        assert manager.cleanup_stale_sessions() == 0
        assert manager.cleanup_stale_sessions(max_idle_seconds=5) == 1


class TestStartRun:
    def test_seed_reproduces_opening(self):
        character = get_character("urchin")
        rng_a, state_a = start_run(character, seed=12)
        rng_b, state_b = start_run(character, seed=12)

        assert rng_a.seed == rng_b.seed == 12
        assert state_a.to_snapshot() == state_b.to_snapshot()

    def test_preset_is_not_mutated(self):
        character = get_character("urchin")
        before = character.stats
        start_run(character, seed=3)

        assert character.stats == before


class TestGameLoop:
    def test_runs_to_completion(self, manager):
        session = manager.create_session("apprentice", seed=8)
        outcome = GameLoop(session, SafeStrategy()).run()

        assert session.game_over
        assert 1 <= len(outcome.turns) <= MAX_TURNS
        assert outcome.turns[-1].loop_state == LoopState.GAME_OVER
        assert outcome.choice_ids == session.history
        assert outcome.ending == session.ending()

    def test_step(self, manager):
        session = manager.create_session(seed=8)
        loop = GameLoop(session, SafeStrategy())

        turn = loop.step()

        assert turn.turn == 1
        assert turn.result is session.last_result
        assert loop.state == LoopState.WAITING_CHOICE
