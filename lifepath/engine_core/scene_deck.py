"""
Scene Deck - Builds the per-run traversal order and picks the next scene.

The deck is bucketed by narrative tier (min_stage) and shuffled within each
tier, so low-tier content is always met before higher tiers while repeated
runs still differ.

Selection runs two ordered passes over the remaining deck:
- Pass 0: scene vector must equal the preferred path (when there is one)
- Pass 1: only scenes leaning to a *different* path are skipped
Within a pass the per-scene gates in SCENE_GATES are checked top to bottom,
the first survivor is remembered as a fallback, and the first survivor whose
min_stage is reachable wins. If nothing wins, the fallback is used unless it
sits above the player's stage while a reachable-tier scene remains; then the
first remaining reachable scene is taken, gates or not. That same scene is
the last resort when there is no fallback, and when no reachable scene is
left either, the first remaining one. Only an exhausted deck yields None.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence

from .constants import EARLY_PHASE_LAST_TURN, MID_PHASE_LAST_TURN
from .content import PHASE_ORDER, Path, Scene, ScenePhase
from .rng import Rng, pick_index, shuffle
from .stats import STAGE_ORDER, Season, Stage, Stats, can_use_stage


@dataclass(frozen=True)
class ScenePick:
    """A selected scene and its position in the deck."""
    scene: Scene
    index: int


@dataclass(frozen=True)
class SelectionContext:
    """Everything the gates look at for one selection call."""
    stage: Stage
    season: Season
    stats: Stats
    turn: int
    character_id: str | None = None
    phase: ScenePhase = ScenePhase.EARLY


def phase_from_turn(turn: int) -> ScenePhase:
    if turn <= EARLY_PHASE_LAST_TURN:
        return ScenePhase.EARLY
    if turn <= MID_PHASE_LAST_TURN:
        return ScenePhase.MID
    return ScenePhase.LATE


def _bundled_scenes() -> tuple[Scene, ...]:
    from ..content import SCENES
    return SCENES


def build_scene_deck(
    rng: Rng,
    arc_id: int = 1,
    scenes: Sequence[Scene] | None = None,
) -> list[Scene]:
    """
    Build a traversal order for one run.

    Start-phase and backlog scenes are excluded. Each tier is shuffled
    independently and tiers are concatenated lowest first.
    """
    pool = _bundled_scenes() if scenes is None else scenes
    buckets: dict[Stage, list[Scene]] = {stage: [] for stage in STAGE_ORDER}
    for scene in pool:
        if scene.arc != arc_id or scene.backlog or scene.phase == ScenePhase.START:
            continue
        buckets[scene.tier].append(scene)

    deck: list[Scene] = []
    for stage in STAGE_ORDER:
        deck.extend(shuffle(buckets[stage], rng))
    return deck


def pick_start_scene(
    rng: Rng,
    arc_id: int = 1,
    character_id: str | None = None,
    scenes: Sequence[Scene] | None = None,
) -> Scene | None:
    """Uniformly pick an opening scene the character may see."""
    pool = _bundled_scenes() if scenes is None else scenes
    candidates = [
        scene for scene in pool
        if scene.arc == arc_id
        and scene.phase == ScenePhase.START
        and not scene.backlog
        and (not scene.for_character or (character_id or "") in scene.for_character)
    ]
    if not candidates:
        for scene in pool:
            if scene.phase == ScenePhase.START:
                return scene
        return pool[0] if pool else None
    return candidates[pick_index(len(candidates), rng)]


# =============================================================================
# Gates
# =============================================================================

def _character_gate(scene: Scene, ctx: SelectionContext) -> bool:
    if not scene.for_character or ctx.character_id is None:
        return True
    return ctx.character_id in scene.for_character


def _season_gate(scene: Scene, ctx: SelectionContext) -> bool:
    return not scene.seasons or ctx.season in scene.seasons


def _turn_gate(scene: Scene, ctx: SelectionContext) -> bool:
    if scene.min_turn is not None and ctx.turn < scene.min_turn:
        return False
    if scene.max_turn is not None and ctx.turn > scene.max_turn:
        return False
    return True


def _stats_gate(scene: Scene, ctx: SelectionContext) -> bool:
    for name, minimum in scene.min_stats.items():
        if getattr(ctx.stats, name) < minimum:
            return False
    for name, maximum in scene.max_stats.items():
        if getattr(ctx.stats, name) > maximum:
            return False
    return True


def _phase_gate(scene: Scene, ctx: SelectionContext) -> bool:
    """Scenes paced later than the current phase wait their turn."""
    if scene.phase not in PHASE_ORDER:
        return True
    ceiling = PHASE_ORDER.index(ctx.phase) if ctx.phase in PHASE_ORDER else 0
    return PHASE_ORDER.index(scene.phase) <= ceiling


SceneGate = Callable[[Scene, SelectionContext], bool]

SCENE_GATES: tuple[tuple[str, SceneGate], ...] = (
    ("character", _character_gate),
    ("season", _season_gate),
    ("turn", _turn_gate),
    ("stats", _stats_gate),
    ("phase", _phase_gate),
)


def failed_gate(scene: Scene, ctx: SelectionContext) -> str | None:
    """Name of the first gate the scene fails, or None if it passes all."""
    for name, gate in SCENE_GATES:
        if not gate(scene, ctx):
            return name
    return None


def _matches_path(scene: Scene, preferred_path: Path | None, strict: bool) -> bool:
    if preferred_path is None:
        return True
    if strict:
        return scene.vector == preferred_path
    return not isinstance(scene.vector, Path) or scene.vector == preferred_path


# =============================================================================
# Selection
# =============================================================================

def get_next_scene(
    deck: Sequence[Scene],
    start_index: int,
    stage: Stage,
    season: Season,
    stats: Stats,
    turn: int,
    character_id: str | None = None,
    phase: ScenePhase = ScenePhase.EARLY,
    preferred_path: Path | None = None,
) -> ScenePick | None:
    """
    Pick the next scene at or after `start_index`.

    Returns None only when no scene remains.
    """
    start = max(0, start_index)
    if start >= len(deck):
        return None

    ctx = SelectionContext(
        stage=stage,
        season=season,
        stats=stats,
        turn=turn,
        character_id=character_id,
        phase=phase,
    )
    fallback: ScenePick | None = None
    passes = (True, False) if preferred_path is not None else (False,)

    for strict in passes:
        for index in range(start, len(deck)):
            scene = deck[index]
            if failed_gate(scene, ctx) is not None:
                continue
            if fallback is None:
                fallback = ScenePick(scene=scene, index=index)
            if not can_use_stage(stage, scene.min_stage):
                continue
            if not _matches_path(scene, preferred_path, strict):
                continue
            return ScenePick(scene=scene, index=index)

    reachable = _first_reachable(deck, start, stage)
    if fallback is not None and (
        reachable is None or can_use_stage(stage, fallback.scene.min_stage)
    ):
        return fallback
    if reachable is not None:
        return reachable
    return ScenePick(scene=deck[start], index=start)


def _first_reachable(deck: Sequence[Scene], start: int, stage: Stage) -> ScenePick | None:
    """First remaining scene whose tier the stage has reached, gates ignored."""
    for index in range(start, len(deck)):
        if can_use_stage(stage, deck[index].min_stage):
            return ScenePick(scene=deck[index], index=index)
    return None
