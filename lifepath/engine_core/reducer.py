"""
Reducer - Resolves a chosen action into the next game state.

The reducer is the single point of state transition.
All turns must go through resolve_choice().

Design principles:
- Pure function: (state, choice, rng) -> (next_state, result)
- Atomic: one call runs the whole turn, in a fixed order
- Deterministic: every roll consumes from the passed rng
- Never throws for well-formed input; running out of scenes ends the run

Turn order:
 1. normalize stats
 2. path affinity
 3. success roll
 4-5. pick outcome, money bonus on paying success
 6. apply outcome
 7. upkeep
 8. age
 9. major event (turn window, once) else recurring world event
10. hunger debt
11. fatigue
12. luck drift
13. termination and next scene
14. weather metadata
15. result payload
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Sequence
import math

from .chance import get_chance, money_bonus_cap
from .constants import (
    BASE_UPKEEP,
    FATIGUE_HEALTH_PENALTY,
    FATIGUE_THRESHOLD,
    FIRST_EVENT_TURN,
    LEAVES_EVERY_TURNS,
    LOG_LIMIT,
    LUCK_DOWN_ROLL,
    LUCK_UP_CHANCE,
    MAJOR_EVENT_FIRST_TURN,
    MAJOR_EVENT_LAST_TURN,
    MAX_TURNS,
    PASSIVE_RECOVERY,
    PHYSICAL_FATIGUE,
    REST_RECOVERY,
    VARIABILITY_CHANCE,
)
from .content import Choice, Effort, Scene, ScenePhase, WorldEvent
from .rng import Rng, pick_index, shuffle
from .scene_deck import build_scene_deck, get_next_scene, phase_from_turn, pick_start_scene
from .state import GameState, dominant_path, empty_path_scores
from .stats import (
    STAT_FIELDS,
    Effects,
    Stats,
    apply_effects,
    normalize_stats,
    season_from_turn,
    stage_label,
)
from .weather import SnowIntensity, WeatherEffect, effect_from_text, snow_intensity_from_text

REASON_STARVATION = "Hunger wore you down to nothing."
REASON_EXHAUSTION = "Your health gave out under exhaustion, injuries and the weight of your choices."
REASON_FULL_SPAN = "Your life ran its full course."
REASON_OUT_OF_STORY = "You walked every road this life had to offer."

TITLE_SUCCESS = "Success"
TITLE_FAILURE = "Failure"

LABEL_CHOICE = "Choice result"
LABEL_UPKEEP = "Upkeep"
LABEL_FOOD = "Food"


@dataclass(frozen=True)
class MoneyItem:
    """One line of the itemized money change."""
    label: str
    value: float


@dataclass
class ResultPayload:
    """
    Everything presentation needs to show a turn's outcome.

    `deltas` holds the net change of every stat over the whole turn, so
    `deltas.money` equals the sum of `money_breakdown`.
    """
    title: str
    text: str
    success: bool
    chance: float
    deltas: Effects
    money_breakdown: list[MoneyItem] = field(default_factory=list)
    event: WorldEvent | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "text": self.text,
            "success": self.success,
            "chance": self.chance,
            "deltas": self.deltas.to_dict(),
            "money_breakdown": [
                {"label": item.label, "value": item.value}
                for item in self.money_breakdown
            ],
            "event": {
                "id": self.event.id,
                "title": self.event.title,
                "text": self.event.text,
            } if self.event else None,
        }


@dataclass
class TurnResolution:
    """Result of resolving one choice."""
    next_state: GameState
    result: ResultPayload


def _event_gap(rng: Rng) -> int:
    """Turns until the next recurring event: 2 or 3 on a coin flip."""
    return 2 if rng() < 0.5 else 3


def _fatigue_delta(effort: Effort) -> int:
    if effort == Effort.PHYSICAL:
        return PHYSICAL_FATIGUE
    if effort == Effort.REST:
        return REST_RECOVERY
    return PASSIVE_RECOVERY


def _stat_deltas(before: Stats, after: Stats) -> Effects:
    return Effects(**{
        name: getattr(after, name) - getattr(before, name)
        for name in STAT_FIELDS
    })


@dataclass
class Reducer:
    """
    Turn engine bound to a content set.

    Stateless - all state is in GameState, all randomness in the rng.
    """
    events: Sequence[WorldEvent]
    major_events: Sequence[WorldEvent]
    scenes: Sequence[Scene] | None = None
    arc_id: int = 1

    def create_state(
        self,
        stats: Stats,
        rng: Rng,
        character_id: str | None = None,
        scene_deck: Sequence[Scene] | None = None,
        event_deck: Sequence[WorldEvent] | None = None,
        effect_type: WeatherEffect | None = WeatherEffect.LEAVES,
        effect_until_turn: int = 999,
        snow_intensity: SnowIntensity = SnowIntensity.GENTLE,
    ) -> GameState:
        """
        Build a fresh session state.

        Decks are built per call, never shared between sessions.
        """
        safe_stats = normalize_stats(stats)
        deck = list(scene_deck) if scene_deck is not None else build_scene_deck(
            rng, self.arc_id, self.scenes
        )
        start_scene = pick_start_scene(rng, self.arc_id, character_id, self.scenes)

        scene_index = -1
        scene = start_scene
        if scene is None or scene.phase != ScenePhase.START:
            first = get_next_scene(
                deck,
                0,
                stage_label(safe_stats),
                season_from_turn(1),
                safe_stats,
                1,
                character_id,
                ScenePhase.EARLY,
                None,
            )
            if first is not None:
                scene, scene_index = first.scene, first.index
        if scene is None:
            raise ValueError("Content has no scenes to start a run with")

        return GameState(
            stats=safe_stats,
            scene=scene,
            character_id=character_id,
            path_scores=empty_path_scores(),
            turn=1,
            log=[],
            scene_deck=deck,
            scene_index=scene_index,
            event_deck=list(event_deck) if event_deck is not None else shuffle(self.events, rng),
            event_index=0,
            next_event_turn=FIRST_EVENT_TURN + int(rng() * 2),
            game_over=False,
            ending_reason="",
            major_event_used=False,
            effect_type=effect_type,
            effect_until_turn=effect_until_turn,
            snow_intensity=snow_intensity,
        )

    def resolve(self, state: GameState, choice: Choice, rng: Rng) -> TurnResolution:
        """Resolve `choice` against `state`. See the module docstring for order."""
        initial_stats = normalize_stats(state.stats)

        path_scores = dict(state.path_scores)
        if choice.path is not None:
            path_scores[choice.path] = path_scores.get(choice.path, 0) + 1

        chance = get_chance(choice, initial_stats)
        success = rng() < chance
        effects = choice.success if success else choice.fail

        if success and effects.money > 0:
            skill_bonus, luck_bonus = money_bonus_cap(initial_stats)
            variability = 1 if rng() < VARIABILITY_CHANCE else 0
            effects = effects._copy_with(
                money=effects.money + skill_bonus + luck_bonus + variability
            )

        after_choice = apply_effects(initial_stats, effects)
        upkeep = BASE_UPKEEP - after_choice.family
        stats = apply_effects(after_choice, Effects(money=upkeep, age=1))

        result_text = choice.success_text if success else choice.fail_text
        log_line = f"Turn {state.turn}: {result_text} (upkeep {upkeep:g})"

        money_breakdown: list[MoneyItem] = []
        if effects.money != 0:
            money_breakdown.append(MoneyItem(LABEL_CHOICE, effects.money))
        money_breakdown.append(MoneyItem(LABEL_UPKEEP, upkeep))

        # World events: the major window takes precedence over the recurring track
        next_turn = state.turn + 1
        event: WorldEvent | None = None
        event_deck = state.event_deck
        event_index = state.event_index
        next_event_turn = state.next_event_turn
        major_event_used = state.major_event_used

        in_major_window = MAJOR_EVENT_FIRST_TURN <= next_turn <= MAJOR_EVENT_LAST_TURN
        if in_major_window and not major_event_used and self.major_events:
            event = self.major_events[pick_index(len(self.major_events), rng)]
            major_event_used = True
            stats = apply_effects(stats, event.effects)
            next_event_turn = next_turn + _event_gap(rng)
        elif next_turn >= next_event_turn and (event_index < len(event_deck) or self.events):
            if event_index >= len(event_deck):
                event_deck = shuffle(self.events, rng)
                event_index = 0
            event = event_deck[event_index]
            stats = apply_effects(stats, event.effects)
            event_index += 1
            next_event_turn = next_turn + _event_gap(rng)

        if event is not None and event.effects.money != 0:
            money_breakdown.append(MoneyItem(f"Event: {event.title}", event.effects.money))

        # Hunger: unpaid subsistence compounds, positive money repays it
        if stats.money <= 0:
            hunger_debt = stats.hunger_debt + 1
            health_loss = max(1, math.ceil(hunger_debt / 2))
            stats = stats._copy_with(hunger_debt=hunger_debt, health=stats.health - health_loss)
            log_line += f", hunger -{health_loss:g}"
        elif stats.hunger_debt > 0:
            pay = min(stats.money, stats.hunger_debt)
            stats = stats._copy_with(
                money=stats.money - pay,
                hunger_debt=stats.hunger_debt - pay,
            )
            money_breakdown.append(MoneyItem(LABEL_FOOD, -pay))
            log_line += f", food -{pay:g}"

        fatigue = max(0, stats.fatigue + _fatigue_delta(choice.effort))
        stats = stats._copy_with(fatigue=fatigue)
        if fatigue >= FATIGUE_THRESHOLD:
            stats = stats._copy_with(health=stats.health - FATIGUE_HEALTH_PENALTY)
            log_line += f", fatigue -{FATIGUE_HEALTH_PENALTY} health"

        luck_roll = rng()
        if luck_roll < LUCK_UP_CHANCE:
            stats = stats._copy_with(luck=stats.luck + 1)
        elif luck_roll > LUCK_DOWN_ROLL:
            stats = stats._copy_with(luck=stats.luck - 1)

        # Termination
        game_over = stats.health <= 0 or next_turn > MAX_TURNS
        ending_reason = state.ending_reason
        if stats.health <= 0:
            ending_reason = REASON_STARVATION if stats.hunger_debt > 0 else REASON_EXHAUSTION
        elif next_turn > MAX_TURNS:
            ending_reason = REASON_FULL_SPAN

        scene = state.scene
        scene_index = state.scene_index
        if not game_over:
            pick = get_next_scene(
                state.scene_deck,
                state.scene_index + 1,
                stage_label(stats),
                season_from_turn(next_turn),
                stats,
                next_turn,
                state.character_id,
                phase_from_turn(next_turn),
                dominant_path(path_scores),
            )
            if pick is None:
                game_over = True
                ending_reason = REASON_OUT_OF_STORY
            else:
                scene, scene_index = pick.scene, pick.index

        effect_type, effect_until_turn, snow_intensity = self._next_weather(
            state, event, next_turn
        )

        log_lines = [log_line]
        if event is not None:
            log_lines.append(f"Event: {event.title}. {event.text}")
        log = (log_lines + list(state.log))[:LOG_LIMIT]

        next_state = state._copy_with(
            stats=stats,
            path_scores=path_scores,
            turn=next_turn,
            log=log,
            scene=scene,
            scene_index=scene_index,
            event_deck=event_deck,
            event_index=event_index,
            next_event_turn=next_event_turn,
            game_over=game_over,
            ending_reason=ending_reason,
            major_event_used=major_event_used,
            effect_type=effect_type,
            effect_until_turn=effect_until_turn,
            snow_intensity=snow_intensity,
        )

        result = ResultPayload(
            title=TITLE_SUCCESS if success else TITLE_FAILURE,
            text=result_text,
            success=success,
            chance=chance,
            deltas=_stat_deltas(initial_stats, stats),
            money_breakdown=money_breakdown,
            event=event,
        )
        return TurnResolution(next_state=next_state, result=result)

    def _next_weather(
        self,
        state: GameState,
        event: WorldEvent | None,
        next_turn: int,
    ) -> tuple[WeatherEffect | None, int, SnowIntensity]:
        """Event text first, then the scene just played, then the periodic leaves."""
        event_text = f"{event.title} {event.text}" if event else ""
        scene_text = f"{state.scene.title} {state.scene.text}"

        new_effect = effect_from_text(event_text) if event else None
        source_text = event_text
        if new_effect is None:
            new_effect = effect_from_text(scene_text)
            source_text = scene_text
        if new_effect is None and next_turn % LEAVES_EVERY_TURNS == 0:
            new_effect = WeatherEffect.LEAVES

        effect_type = state.effect_type
        effect_until_turn = state.effect_until_turn
        snow_intensity = state.snow_intensity
        if new_effect is not None:
            effect_type = new_effect
            effect_until_turn = next_turn + (2 if event else 1)
            if new_effect == WeatherEffect.SNOW:
                snow_intensity = snow_intensity_from_text(source_text)
        elif effect_type is not None and next_turn > effect_until_turn:
            effect_type = None
        return effect_type, effect_until_turn, snow_intensity


# =============================================================================
# Convenience entry points bound to the bundled content
# =============================================================================

def default_reducer() -> Reducer:
    """Reducer over the bundled events and scenes."""
    from ..content import EVENTS, MAJOR_EVENTS, SCENES
    return Reducer(events=EVENTS, major_events=MAJOR_EVENTS, scenes=SCENES)


def create_game_state_from_stats(
    stats: Stats,
    rng: Rng,
    character_id: str | None = None,
    scene_deck: Sequence[Scene] | None = None,
    event_deck: Sequence[WorldEvent] | None = None,
    effect_type: WeatherEffect | None = WeatherEffect.LEAVES,
    effect_until_turn: int = 999,
    snow_intensity: SnowIntensity = SnowIntensity.GENTLE,
) -> GameState:
    """Convenience function to start a run on the bundled content."""
    return default_reducer().create_state(
        stats,
        rng,
        character_id=character_id,
        scene_deck=scene_deck,
        event_deck=event_deck,
        effect_type=effect_type,
        effect_until_turn=effect_until_turn,
        snow_intensity=snow_intensity,
    )


def resolve_choice(state: GameState, choice: Choice, rng: Rng) -> TurnResolution:
    """
    Convenience function to resolve a choice.

    Creates a Reducer over the bundled content and resolves the turn.
    """
    return default_reducer().resolve(state, choice, rng)
