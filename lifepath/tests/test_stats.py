"""
Tests for the stat model and effect application.
"""

import math

import pytest

from ..engine_core.stats import (
    STAT_FIELDS,
    Effects,
    Season,
    Stage,
    Stats,
    apply_effects,
    can_use_stage,
    normalize_stats,
    season_from_turn,
    stage_label,
)


class TestApplyEffects:
    """Tests for apply_effects."""

    def test_adds_each_field(self):
        stats = Stats(money=5, reputation=2, skill=1, health=10)
        result = apply_effects(stats, Effects(money=3, skill=2, health=-4))

        assert result.money == 8
        assert result.skill == 3
        assert result.health == 6
        assert result.reputation == 2

    def test_no_clamping(self):
        result = apply_effects(Stats(money=1, reputation=0), Effects(money=-5, reputation=-3))

        assert result.money == -4
        assert result.reputation == -3

    def test_pure(self):
        stats = Stats(money=5)
        apply_effects(stats, Effects(money=1))

        assert stats.money == 5

    def test_empty_effects_is_identity(self):
        stats = Stats(money=3, luck=2, karma=-1)
        assert apply_effects(stats, Effects()) == stats


class TestEffects:
    def test_to_dict_is_sparse(self):
        assert Effects(money=2, health=-1).to_dict() == {"money": 2, "health": -1}
        assert Effects().is_empty

    def test_from_dict_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            Effects.from_dict({"gold": 3})

    def test_stats_round_trip(self):
        stats = Stats(money=4, reputation=1, skill=2, health=9, age=20, luck=3)
        assert Stats.from_dict(stats.to_dict()) == stats
        assert tuple(stats.to_dict()) == STAT_FIELDS


class TestNormalizeStats:
    def test_non_finite_become_zero(self):
        stats = Stats(money=math.inf, luck=math.nan, health=-math.inf, skill=3)
        result = normalize_stats(stats)

        assert result.money == 0
        assert result.luck == 0
        assert result.health == 0
        assert result.skill == 3

    def test_finite_untouched(self):
        stats = Stats(money=-3, reputation=7, luck=2)
        assert normalize_stats(stats) == stats


class TestStage:
    @pytest.mark.parametrize(
        "money, reputation, expected",
        [
            (0, 0, Stage.EARLY),
            (9, 7, Stage.EARLY),
            (10, 0, Stage.RISING),
            (0, 8, Stage.RISING),
            (25, 15, Stage.ESTABLISHED),
            (49, 40, Stage.ESTABLISHED),
            (50, 30, Stage.NOBLE),
        ],
    )
    def test_thresholds(self, money, reputation, expected):
        assert stage_label(Stats(money=money, reputation=reputation)) == expected

    def test_can_use_stage(self):
        assert can_use_stage(Stage.EARLY, None)
        assert can_use_stage(Stage.NOBLE, Stage.RISING)
        assert can_use_stage(Stage.RISING, Stage.RISING)
        assert not can_use_stage(Stage.EARLY, Stage.NOBLE)


class TestSeason:
    @pytest.mark.parametrize(
        "turn, expected",
        [
            (1, Season.SPRING),
            (5, Season.SPRING),
            (6, Season.SUMMER),
            (11, Season.AUTUMN),
            (16, Season.WINTER),
            (20, Season.WINTER),
            (21, Season.SPRING),
        ],
    )
    def test_cycle(self, turn, expected):
        assert season_from_turn(turn) == expected
