"""
Tests for the reducer (turn resolution).

Tests:
- Upkeep, hunger, fatigue and luck bookkeeping
- Money bonus and itemized breakdown
- World event precedence
- Termination reasons
- Determinism over whole runs
"""

import math

import pytest

from ..content import CHARACTERS, MAJOR_EVENTS
from ..engine_core.chance import available_choices
from ..engine_core.constants import LOG_LIMIT, MAX_TURNS
from ..engine_core.content import Effort, Path
from ..engine_core.reducer import (
    REASON_EXHAUSTION,
    REASON_FULL_SPAN,
    REASON_OUT_OF_STORY,
    REASON_STARVATION,
    MoneyItem,
    Reducer,
    create_game_state_from_stats,
    resolve_choice,
)
from ..engine_core.rng import create_seeded_rng
from ..engine_core.stats import Effects, Stats
from ..engine_core.weather import SnowIntensity, WeatherEffect
from .helpers import constant_rng, make_choice, make_event, make_scene, make_start_scene


QUIET = constant_rng(0.5)


def first_available(state):
    choices = available_choices(state.scene, state.stats)
    return choices[0] if choices else state.scene.choices[0]


def play_run(seed, character=None, pick=first_available):
    """Play one run on the bundled content; returns (states, results)."""
    character = character or CHARACTERS[0]
    rng = create_seeded_rng(seed)
    state = create_game_state_from_stats(character.stats, rng, character_id=character.id)
    states, results = [state], []
    while not state.game_over and len(results) <= MAX_TURNS:
        resolution = resolve_choice(state, pick(state), rng)
        state = resolution.next_state
        states.append(state)
        results.append(resolution.result)
    return states, results


class TestUpkeep:
    """Cost of living and ageing."""

    def test_base_upkeep_and_age(self, small_reducer, quiet_state):
        result = small_reducer.resolve(quiet_state, make_choice(), QUIET)
        stats = result.next_state.stats

        assert stats.money == 19
        assert stats.age == quiet_state.stats.age + 1
        assert result.result.money_breakdown == [MoneyItem("Upkeep", -1)]

    def test_family_never_lowers_upkeep(self, small_reducer, quiet_state):
        money_after = []
        for family in (0, 1, 2, 4):
            state = quiet_state._copy_with(stats=Stats(money=20, health=10, family=family))
            money_after.append(small_reducer.resolve(state, make_choice(), QUIET).next_state.stats.money)

        assert money_after == sorted(money_after, reverse=True)
        assert money_after == [19, 18, 17, 15]


class TestHunger:
    """Hunger debt accrues on empty purses and is repaid from positive money."""

    def test_first_debt_costs_one_health(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=0, hunger_debt=0, health=10))
        result = small_reducer.resolve(state, make_choice(), QUIET)
        stats = result.next_state.stats

        assert stats.hunger_debt == 1
        assert stats.health == 9
        assert stats.money == -1

    def test_debt_compounds(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=0, hunger_debt=3, health=10))
        stats = small_reducer.resolve(state, make_choice(), QUIET).next_state.stats

        assert stats.hunger_debt == 4
        assert stats.health == 10 - math.ceil(4 / 2)

    def test_positive_money_repays_debt(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=5, hunger_debt=3, health=10))
        result = small_reducer.resolve(state, make_choice(), QUIET)
        stats = result.next_state.stats

        assert stats.hunger_debt == 0
        assert stats.money == 1
        assert result.result.money_breakdown == [MoneyItem("Upkeep", -1), MoneyItem("Food", -3)]
        assert result.result.deltas.money == -4

    def test_partial_repayment(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=3, hunger_debt=5, health=10))
        stats = small_reducer.resolve(state, make_choice(), QUIET).next_state.stats

        assert stats.money == 0
        assert stats.hunger_debt == 3
        assert stats.health == 10

    @pytest.mark.parametrize("seed", range(8))
    def test_debt_invariant_over_runs(self, seed):
        states, _ = play_run(seed)
        for before, after in zip(states, states[1:]):
            assert after.stats.hunger_debt >= 0
            change = after.stats.hunger_debt - before.stats.hunger_debt
            if change > 0:
                assert change == 1
                assert after.stats.money <= 0
            elif before.stats.hunger_debt > 0:
                assert change < 0


class TestFatigue:
    @pytest.mark.parametrize(
        "effort, start, expected",
        [
            (Effort.PHYSICAL, 0, 1),
            (Effort.REST, 1, 0),
            (Effort.REST, 4, 2),
            (Effort.MENTAL, 0, 0),
            (Effort.SOCIAL, 3, 2),
        ],
    )
    def test_effort_drives_fatigue(self, small_reducer, quiet_state, effort, start, expected):
        state = quiet_state._copy_with(stats=Stats(money=20, health=10, fatigue=start))
        stats = small_reducer.resolve(state, make_choice(effort=effort), QUIET).next_state.stats

        assert stats.fatigue == expected

    def test_threshold_costs_health(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=20, health=10, fatigue=5))
        stats = small_reducer.resolve(
            state, make_choice(effort=Effort.PHYSICAL), QUIET
        ).next_state.stats

        assert stats.fatigue == 6
        assert stats.health == 9

    @pytest.mark.parametrize("seed", range(5))
    def test_never_negative(self, seed):
        states, _ = play_run(seed)
        assert all(state.stats.fatigue >= 0 for state in states)


class TestMoneyBonus:
    def test_successful_paying_choice_gets_bonus(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=20, health=10, skill=10, luck=4))
        choice = make_choice(success=Effects(money=3))
        result = small_reducer.resolve(state, choice, constant_rng(0.01))

        # 3 base + 2 skill + 2 luck + 1 variability
        assert result.result.success
        assert result.result.money_breakdown[0] == MoneyItem("Choice result", 8)
        assert result.next_state.stats.money == 20 + 8 - 1

    def test_failure_gets_no_bonus(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=20, health=10, skill=10, luck=4))
        choice = make_choice(success=Effects(money=3), fail=Effects(money=-2))
        result = small_reducer.resolve(state, choice, constant_rng(0.99))

        assert not result.result.success
        assert result.result.money_breakdown[0] == MoneyItem("Choice result", -2)

    @pytest.mark.parametrize("seed", range(8))
    def test_breakdown_sums_to_net_money(self, seed):
        _, results = play_run(seed)
        for result in results:
            assert sum(item.value for item in result.money_breakdown) == result.deltas.money


class TestLuckDrift:
    def test_low_roll_raises_luck(self, small_reducer, quiet_state):
        stats = small_reducer.resolve(quiet_state, make_choice(), constant_rng(0.01)).next_state.stats
        assert stats.luck == quiet_state.stats.luck + 1

    def test_high_roll_lowers_luck(self, small_reducer, quiet_state):
        stats = small_reducer.resolve(quiet_state, make_choice(), constant_rng(0.99)).next_state.stats
        assert stats.luck == quiet_state.stats.luck - 1

    def test_middle_roll_keeps_luck(self, small_reducer, quiet_state):
        stats = small_reducer.resolve(quiet_state, make_choice(), QUIET).next_state.stats
        assert stats.luck == quiet_state.stats.luck


class TestPathAffinity:
    def test_tagged_choice_counts(self, small_reducer, quiet_state):
        choice = make_choice(path=Path.CRAFT)
        next_state = small_reducer.resolve(quiet_state, choice, QUIET).next_state

        assert next_state.path_scores[Path.CRAFT] == 1
        assert next_state.path_scores[Path.CRIME] == 0
        assert quiet_state.path_scores[Path.CRAFT] == 0

    def test_untagged_choice_leaves_scores(self, small_reducer, quiet_state):
        next_state = small_reducer.resolve(quiet_state, make_choice(), QUIET).next_state
        assert next_state.path_scores == quiet_state.path_scores


class TestWorldEvents:
    """Recurring and major event tracks."""

    def test_recurring_event_fires_on_schedule(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(
            event_deck=list(small_reducer.events), event_index=0, next_event_turn=2
        )
        result = small_reducer.resolve(state, make_choice(), QUIET)

        assert result.result.event.id == "rain"
        assert result.next_state.event_index == 1
        assert result.next_state.next_event_turn in (4, 5)
        assert MoneyItem("Event: Rain", -1) in result.result.money_breakdown
        assert result.next_state.stats.money == 18

    def test_exhausted_event_deck_reshuffles(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(
            event_deck=list(small_reducer.events), event_index=1, next_event_turn=2
        )
        result = small_reducer.resolve(state, make_choice(), QUIET)

        assert result.result.event.id == "rain"
        assert result.next_state.event_index == 1

    def test_no_event_before_schedule(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(
            event_deck=list(small_reducer.events), event_index=0, next_event_turn=5
        )
        result = small_reducer.resolve(state, make_choice(), QUIET)

        assert result.result.event is None
        assert result.next_state.event_index == 0

    def test_major_event_takes_the_turn(self, small_reducer, quiet_state):
        """The major event fires instead of a recurring event due the same turn."""
        state = quiet_state._copy_with(
            turn=15,
            event_deck=list(small_reducer.events),
            event_index=0,
            next_event_turn=16,
        )
        result = small_reducer.resolve(state, make_choice(), QUIET)
        next_state = result.next_state

        assert result.result.event.id == "plague"
        assert next_state.major_event_used
        assert next_state.event_index == 0
        assert next_state.stats.health == 10 - 3
        assert next_state.next_event_turn > 16

    def test_major_event_fires_once(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(turn=15)
        first = small_reducer.resolve(state, make_choice(), QUIET)
        second = small_reducer.resolve(first.next_state, make_choice(), QUIET)

        assert first.result.event.id == "plague"
        assert second.result.event is None

    def test_major_event_outside_window(self, small_reducer, quiet_state):
        for turn in (14, 19):
            state = quiet_state._copy_with(turn=turn)
            result = small_reducer.resolve(state, make_choice(), QUIET)
            assert result.result.event is None

    @pytest.mark.parametrize("seed", range(12))
    def test_major_event_at_most_once_per_run(self, seed):
        major_ids = {event.id for event in MAJOR_EVENTS}
        _, results = play_run(seed)
        fired = [r for r in results if r.event is not None and r.event.id in major_ids]

        assert len(fired) <= 1


class TestTermination:
    def test_starvation(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=0, health=1))
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.game_over
        assert next_state.ending_reason == REASON_STARVATION

    def test_exhaustion(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(stats=Stats(money=20, health=1, fatigue=5))
        next_state = small_reducer.resolve(
            state, make_choice(effort=Effort.PHYSICAL), QUIET
        ).next_state

        assert next_state.game_over
        assert next_state.ending_reason == REASON_EXHAUSTION

    def test_full_span(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(turn=MAX_TURNS)
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.game_over
        assert next_state.turn == MAX_TURNS + 1
        assert next_state.ending_reason == REASON_FULL_SPAN
        assert next_state.scene is state.scene

    def test_out_of_story(self, small_reducer, quiet_state):
        last = len(quiet_state.scene_deck) - 1
        state = quiet_state._copy_with(scene=quiet_state.scene_deck[last], scene_index=last)
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.game_over
        assert next_state.ending_reason == REASON_OUT_OF_STORY

    def test_advances_through_deck(self, small_reducer, quiet_state):
        next_state = small_reducer.resolve(quiet_state, make_choice(), QUIET).next_state

        assert not next_state.game_over
        assert next_state.scene_index == 0
        assert next_state.scene is quiet_state.scene_deck[0]

    @pytest.mark.parametrize("character", CHARACTERS, ids=lambda c: c.id)
    @pytest.mark.parametrize("seed", range(5))
    def test_every_run_ends(self, character, seed):
        states, results = play_run(seed, character)

        assert states[-1].game_over
        assert len(results) <= MAX_TURNS
        assert states[-1].ending_reason


class TestPurityAndDeterminism:
    def test_input_state_untouched(self, small_reducer, quiet_state):
        before = quiet_state.to_snapshot()
        small_reducer.resolve(quiet_state, make_choice(path=Path.TRADE), QUIET)

        assert quiet_state.to_snapshot() == before

    @pytest.mark.parametrize("seed", [0, 7, 2024])
    def test_same_seed_same_run(self, seed):
        states_a, results_a = play_run(seed)
        states_b, results_b = play_run(seed)

        assert [s.to_snapshot() for s in states_a] == [s.to_snapshot() for s in states_b]
        assert [r.to_dict() for r in results_a] == [r.to_dict() for r in results_b]

    def test_log_is_capped_and_newest_first(self):
        states, _ = play_run(3)
        for state in states[1:]:
            assert len(state.log) <= LOG_LIMIT
        assert states[1].log[0].startswith("Turn 1:")


class TestWeather:
    def test_event_text_sets_rain(self, quiet_state):
        reducer = Reducer(events=(make_event("storm", health=-1),), major_events=())
        state = quiet_state._copy_with(
            event_deck=list(reducer.events), event_index=0, next_event_turn=2
        )
        next_state = reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.effect_type == WeatherEffect.RAIN
        assert next_state.effect_until_turn == 2 + 2

    def test_scene_text_sets_blizzard(self, small_reducer, quiet_state):
        scene = make_scene("pass", title="Pass", text="Snow falls in a howling blizzard.")
        state = quiet_state._copy_with(scene=scene)
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.effect_type == WeatherEffect.SNOW
        assert next_state.snow_intensity == SnowIntensity.BLIZZARD
        assert next_state.effect_until_turn == 3

    def test_periodic_leaves(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(turn=4, effect_type=None, effect_until_turn=0)
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.effect_type == WeatherEffect.LEAVES

    def test_effect_expires(self, small_reducer, quiet_state):
        state = quiet_state._copy_with(
            turn=3, effect_type=WeatherEffect.RAIN, effect_until_turn=2
        )
        next_state = small_reducer.resolve(state, make_choice(), QUIET).next_state

        assert next_state.effect_type is None


class TestCreateState:
    def test_opens_on_start_scene(self, small_reducer):
        state = small_reducer.create_state(Stats(money=5), QUIET)

        assert state.scene.id == "opening"
        assert state.scene_index == -1
        assert state.turn == 1
        assert not state.game_over
        assert state.next_event_turn in (2, 3)
        assert len(state.scene_deck) == 4

    def test_without_start_scene_opens_on_deck(self):
        reducer = Reducer(
            events=(), major_events=(), scenes=(make_scene("a"), make_scene("b"))
        )
        state = reducer.create_state(Stats(), QUIET)

        assert state.scene_index >= 0
        assert state.scene is state.scene_deck[state.scene_index]

    def test_no_content_raises(self):
        reducer = Reducer(events=(), major_events=(), scenes=())
        with pytest.raises(ValueError):
            reducer.create_state(Stats(), QUIET)

    def test_explicit_decks_are_used(self, small_reducer, small_scenes):
        deck = [small_scenes[2], small_scenes[1]]
        event = make_event("fair", money=2)
        state = small_reducer.create_state(
            Stats(), QUIET, scene_deck=deck, event_deck=[event],
            effect_type=None, snow_intensity=SnowIntensity.BLIZZARD,
        )

        assert [s.id for s in state.scene_deck] == ["market", "docks"]
        assert state.scene_deck is not deck
        assert [e.id for e in state.event_deck] == ["fair"]
        assert state.effect_type is None
        assert state.snow_intensity == SnowIntensity.BLIZZARD

    def test_sessions_do_not_share_decks(self):
        a = create_game_state_from_stats(Stats(), create_seeded_rng(1))
        b = create_game_state_from_stats(Stats(), create_seeded_rng(1))

        assert a.scene_deck is not b.scene_deck
        assert a.event_deck is not b.event_deck
        assert a.to_snapshot() == b.to_snapshot()

    def test_non_finite_stats_normalized(self, small_reducer):
        state = small_reducer.create_state(Stats(luck=math.nan, money=math.inf), QUIET)

        assert state.stats.luck == 0
        assert state.stats.money == 0

    def test_start_scene_respects_character(self):
        scenes = (
            make_start_scene("farm", for_character=("farmer",)),
            make_start_scene("alley", for_character=("urchin",)),
            make_scene("deck"),
        )
        reducer = Reducer(events=(), major_events=(), scenes=scenes)

        assert reducer.create_state(Stats(), QUIET, character_id="urchin").scene.id == "alley"
        assert reducer.create_state(Stats(), QUIET, character_id="farmer").scene.id == "farm"
