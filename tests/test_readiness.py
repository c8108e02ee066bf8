import math

import pytest

from dailyarc.core.enums import ExerciseType, IntensityLabel, Recommendation
from dailyarc.schemas.readiness import ReadinessInput, RecentSession
from dailyarc.services.readiness import (
    apply_cns_fatigue_modifier,
    calculate_readiness_average,
    calculate_readiness_factor,
    calculate_readiness_score,
    get_intensity_adjustment,
    get_recommendation,
    readiness_factor_from_score,
    recommendation_for_score,
    rescale_slider,
)


def _score(s, st, so, f):
    return calculate_readiness_score(sleep_quality=s, stress_level=st, soreness=so, fatigue=f)


class TestReadinessScore:
    def test_perfect_day(self):
        assert _score(10, 10, 10, 0) == 10

    def test_worst_day(self):
        assert _score(1, 1, 1, 100) == 0

    def test_half_fatigue_halves_score(self):
        assert _score(5, 5, 5, 50) == 2.5

    def test_fatigue_is_multiplicative(self):
        # Otherwise perfect but fully fatigued scores 0, not 7
        assert _score(10, 10, 10, 100) == 0

    def test_markers_are_averaged_symmetrically(self):
        assert _score(9, 6, 3, 0) == _score(3, 9, 6, 0) == 6

    @pytest.mark.parametrize(
        "args",
        [(50, 50, 50, -20), (-3, 0, 0, 0), (10, 10, 10, 500), (math.nan, 10, 10, math.inf)],
    )
    def test_garbage_input_stays_in_range(self, args):
        assert 0 <= _score(*args) <= 10


class TestFactorFromScore:
    def test_saturates_high(self):
        assert readiness_factor_from_score(10) == 1.2

    @pytest.mark.parametrize("score", [0, 2.5, 5, 6.5, 6.666])
    def test_floor(self, score):
        assert readiness_factor_from_score(score) == 0.8

    def test_floor_ends_at_two_thirds(self):
        assert readiness_factor_from_score(20 / 3) == pytest.approx(0.8)
        assert readiness_factor_from_score(6.7) > 0.8

    def test_baseline_near_8_33(self):
        assert abs(readiness_factor_from_score(8.33) - 1.0) < 1e-3

    def test_factor_is_not_rounded_across_breakpoints(self):
        factor = readiness_factor_from_score(8.3)
        assert factor == pytest.approx(0.996)
        assert get_recommendation(factor) is Recommendation.LIGHT
        assert get_recommendation(readiness_factor_from_score(8.34)) is Recommendation.MODERATE

    def test_monotonic_and_bounded(self):
        factors = [readiness_factor_from_score(i / 10) for i in range(0, 101)]
        assert factors == sorted(factors)
        assert all(0.8 <= f <= 1.2 for f in factors)

    def test_out_of_range_score_is_clamped(self):
        assert readiness_factor_from_score(50) == 1.2
        assert readiness_factor_from_score(-4) == 0.8


class TestCheckInSliders:
    @pytest.mark.parametrize(
        "values,expected",
        [((1, 1, 1, 1), 0.8), ((5, 5, 5, 5), 1.2), ((3, 3, 3, 3), 1.0), ((2, 2, 2, 2), 0.9), ((4, 4, 4, 4), 1.1), ((5, 1, 3, 3), 1.0), ((4, 3, 2, 5), 1.05)],
    )
    def test_factor(self, values, expected):
        sleep, soreness, stress, energy = values
        readiness = ReadinessInput(sleep=sleep, soreness=soreness, stress=stress, energy=energy)
        assert calculate_readiness_factor(readiness) == expected

    def test_average(self):
        assert calculate_readiness_average(ReadinessInput(sleep=4, soreness=3, stress=2, energy=5)) == 3.5

    def test_input_bounds_are_validated(self):
        with pytest.raises(ValueError):
            ReadinessInput(sleep=0, soreness=3, stress=3, energy=3)
        with pytest.raises(ValueError):
            ReadinessInput(sleep=3, soreness=6, stress=3, energy=3)

    def test_rescale_slider(self):
        assert rescale_slider(1) == 1
        assert rescale_slider(5) == 10
        assert rescale_slider(3) == 5.5
        assert rescale_slider(9) == 10


class TestRecommendation:
    @pytest.mark.parametrize(
        "factor,expected",
        [
            (0.8, Recommendation.REST),
            (0.89, Recommendation.REST),
            (0.9, Recommendation.LIGHT),
            (0.99, Recommendation.LIGHT),
            (1.0, Recommendation.MODERATE),
            (1.09, Recommendation.MODERATE),
            (1.1, Recommendation.INTENSE),
            (1.2, Recommendation.INTENSE),
        ],
    )
    def test_by_factor(self, factor, expected):
        assert get_recommendation(factor) is expected

    @pytest.mark.parametrize(
        "score,expected",
        [(0, Recommendation.REST), (3.99, Recommendation.REST), (4, Recommendation.LIGHT), (6, Recommendation.MODERATE), (8, Recommendation.INTENSE), (10, Recommendation.INTENSE)],
    )
    def test_by_score(self, score, expected):
        assert recommendation_for_score(score) is expected

    def test_ordered(self):
        order = list(Recommendation)
        recs = [order.index(get_recommendation(f / 100)) for f in range(70, 131)]
        assert recs == sorted(recs)

    def test_garbage_is_rest(self):
        assert get_recommendation(math.nan) is Recommendation.REST


class TestCnsFatigue:
    def test_no_sessions(self):
        assert apply_cns_fatigue_modifier(1.0, []) == 1.0

    @pytest.mark.parametrize("rpe,expected", [(7, 1.0), (8, 0.97), (9, 0.95), (10, 0.92)])
    def test_single_session(self, rpe, expected):
        assert apply_cns_fatigue_modifier(1.0, [RecentSession(rpe=rpe)]) == expected

    def test_penalties_add_up(self):
        sessions = [RecentSession(rpe=8), RecentSession(rpe=10)]
        assert apply_cns_fatigue_modifier(1.0, sessions) == 0.89

    def test_floor(self):
        sessions = [RecentSession(rpe=10)] * 3
        assert apply_cns_fatigue_modifier(0.8, sessions) == 0.7


class TestIntensityAdjustment:
    def test_weightlifting_labels(self):
        assert get_intensity_adjustment(0.7, ExerciseType.WEIGHTLIFTING).label is IntensityLabel.DELOAD
        assert get_intensity_adjustment(1.2, "WEIGHTLIFTING").label is IntensityLabel.MAX_EFFORT
        assert get_intensity_adjustment(0.7, ExerciseType.WEIGHTLIFTING).load_multiplier == 0.7

    def test_calisthenics_level_delta(self):
        assert get_intensity_adjustment(0.7, ExerciseType.CALISTHENICS).level_delta == -2
        assert get_intensity_adjustment(1.2, ExerciseType.CALISTHENICS).level_delta == 1
        assert get_intensity_adjustment(1.0, ExerciseType.CALISTHENICS).level_delta == 0

    def test_cardio_volume(self):
        adjustment = get_intensity_adjustment(0.9, ExerciseType.CARDIO)
        assert adjustment.label is IntensityLabel.REDUCED
        assert adjustment.volume_multiplier == 0.75
        assert adjustment.level_delta == 0
        assert adjustment.load_multiplier == 1.0
