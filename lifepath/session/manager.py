"""
Session Manager - Creates and manages play sessions.

LIFECYCLE:
1. Player picks a character -> session created with a fresh seed
2. During play:
   - Presentation shows the current scene
   - Player submits a choice id
   - Session validates it and runs the reducer
   - Session keeps the new state and the result payload
3. Run ends -> ending available, session stays until ended or idle too long
4. Player can:
   - Restart (same character, new seed, same session id)
   - End the session

PERSISTENCE RULES:
- Sessions live in memory only
- Each session owns its GameState and its rng
- No state is shared between sessions
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable
import logging
import time
import uuid

from ..content import CHARACTERS, DEFAULT_CHARACTER_ID, get_character
from ..engine_core.content import Character, Choice
from ..engine_core.ending import Ending, get_ending
from ..engine_core.reducer import Reducer, ResultPayload, TurnResolution, default_reducer
from ..engine_core.rng import SeededRng, create_seeded_rng, roll_initial_luck
from ..engine_core.state import GameState
from ..engine_core.stats import normalize_stats

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Base class for session-level errors."""


class SessionNotFoundError(SessionError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session '{session_id}' not found")


class UnknownCharacterError(SessionError):
    def __init__(self, character_id: str):
        self.character_id = character_id
        known = ", ".join(character.id for character in CHARACTERS)
        super().__init__(f"Unknown character '{character_id}'. Choose from: {known}")


class InvalidChoiceError(SessionError):
    def __init__(self, choice_id: str, scene_id: str, reason: str = "not offered"):
        self.choice_id = choice_id
        self.scene_id = scene_id
        super().__init__(f"Choice '{choice_id}' is {reason} in scene '{scene_id}'")


class GameOverError(SessionError):
    def __init__(self, session_id: str):
        super().__init__(f"Session '{session_id}' has already ended its run")


class GameNotOverError(SessionError):
    def __init__(self, session_id: str):
        super().__init__(f"Session '{session_id}' is still in play")


class SessionState(Enum):
    """State of a play session."""
    ACTIVE = "active"  # Run in progress
    GAME_OVER = "game_over"  # Run finished, ending available
    ABANDONED = "abandoned"  # Ended before the run finished


def start_run(
    character: Character,
    seed: int | None = None,
    reducer: Reducer | None = None,
) -> tuple[SeededRng, GameState]:
    """
    Build the rng and opening state for one run of `character`.

    Starting luck is rolled from the run's own rng, so the seed alone
    reproduces the whole run.
    """
    reducer = reducer or default_reducer()
    seeded = create_seeded_rng(seed)
    stats = normalize_stats(
        character.stats._copy_with(luck=roll_initial_luck(seeded.rng))
    )
    state = reducer.create_state(stats, seeded.rng, character_id=character.id)
    return seeded, state


@dataclass
class Session:
    """
    An in-memory play session.

    Contains:
    - The chosen character
    - The seeded rng and the current GameState
    - The last resolved result and the choice history of the current run
    """
    session_id: str
    character: Character
    rng: SeededRng
    game_state: GameState
    reducer: Reducer
    created_at: float

    state: SessionState = SessionState.ACTIVE
    last_result: ResultPayload | None = None
    history: list[str] = field(default_factory=list)
    last_active_at: float = 0.0
    runs_started: int = 1
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    @property
    def seed(self) -> int:
        return self.rng.seed

    @property
    def game_over(self) -> bool:
        return self.game_state.game_over

    def is_active(self) -> bool:
        """Check if the session can still take choices."""
        return self.state == SessionState.ACTIVE and not self.game_state.game_over

    def touch(self, now: float | None = None) -> None:
        self.last_active_at = self.clock() if now is None else now

    def find_choice(self, choice_id: str) -> Choice:
        """
        Look up a choice in the current scene.

        Raises InvalidChoiceError if the scene does not offer it or the
        character is too weak to take it.
        """
        scene = self.game_state.scene
        choice = scene.get_choice(choice_id)
        if choice is None:
            raise InvalidChoiceError(choice_id, scene.id)
        if choice.min_health is not None and self.game_state.stats.health < choice.min_health:
            raise InvalidChoiceError(
                choice_id, scene.id, reason=f"locked below {choice.min_health:g} health"
            )
        return choice

    def choose(self, choice_id: str) -> TurnResolution:
        """Resolve one turn with the given choice id."""
        if self.game_state.game_over or self.state != SessionState.ACTIVE:
            raise GameOverError(self.session_id)

        choice = self.find_choice(choice_id)
        resolution = self.reducer.resolve(self.game_state, choice, self.rng.rng)

        self.game_state = resolution.next_state
        self.last_result = resolution.result
        self.history.append(choice.id)
        self.touch()

        if self.game_state.game_over:
            self.state = SessionState.GAME_OVER
            logger.info(
                "Session %s finished on turn %d: %s",
                self.session_id,
                self.game_state.turn,
                self.game_state.ending_reason,
            )
        return resolution

    def ending(self) -> Ending:
        """Classify the finished run."""
        if not self.game_state.game_over:
            raise GameNotOverError(self.session_id)
        return get_ending(self.game_state.stats, self.game_state.ending_reason)

    def restart(self, seed: int | None = None) -> None:
        """Start a new run with the same character and a fresh seed."""
        self.rng, self.game_state = start_run(self.character, seed, self.reducer)
        self.state = SessionState.ACTIVE
        self.last_result = None
        self.history = []
        self.runs_started += 1
        self.touch()
        logger.info(
            "Session %s restarted as %s (seed %d)",
            self.session_id,
            self.character.id,
            self.seed,
        )


class SessionManager:
    """
    Manages play sessions.

    Responsibilities:
    - Create sessions for a character
    - Track active sessions
    - Drop sessions idle longer than `session_ttl` seconds

    No persistence - sessions are in-memory only.
    """

    def __init__(
        self,
        reducer: Reducer | None = None,
        session_ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._sessions: dict[str, Session] = {}
        self._reducer = reducer
        self.session_ttl = session_ttl
        self._clock = clock

    @property
    def reducer(self) -> Reducer:
        if self._reducer is None:
            self._reducer = default_reducer()
        return self._reducer

    def create_session(
        self,
        character_id: str | None = None,
        seed: int | None = None,
    ) -> Session:
        """
        Create a new play session.

        Args:
            character_id: Preset to play; defaults to the first preset
            seed: Optional seed for a reproducible run

        Returns:
            New Session on its opening scene
        """
        self.cleanup_stale_sessions()

        character_id = character_id or DEFAULT_CHARACTER_ID
        character = get_character(character_id)
        if character is None:
            raise UnknownCharacterError(character_id)

        rng, game_state = start_run(character, seed, self.reducer)
        now = self._clock()
        session = Session(
            session_id=str(uuid.uuid4()),
            character=character,
            rng=rng,
            game_state=game_state,
            reducer=self.reducer,
            created_at=now,
            last_active_at=now,
            clock=self._clock,
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s as %s (seed %d)",
            session.session_id,
            character.id,
            rng.seed,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        self.cleanup_stale_sessions()
        session = self._sessions.get(session_id)
        if session is not None:
            session.touch(self._clock())
        return session

    def require_session(self, session_id: str) -> Session:
        """Get a session by ID, raising SessionNotFoundError if missing."""
        session = self.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        if session.game_state.game_over:
            session.state = SessionState.GAME_OVER
        else:
            session.state = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions still taking choices."""
        return [
            session_id for session_id, session in self._sessions.items()
            if session.is_active()
        ]

    def list_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def cleanup_stale_sessions(self, max_idle_seconds: int | None = None) -> int:
        """
        Drop sessions idle longer than max_idle_seconds (or session_ttl).

        Returns the number of sessions removed.
        """
        ttl = self.session_ttl if max_idle_seconds is None else max_idle_seconds
        if ttl is None:
            return 0

        now = self._clock()
        stale = [
            session_id for session_id, session in self._sessions.items()
            if now - session.last_active_at > ttl
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
