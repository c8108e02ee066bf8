"""Readiness pipeline: daily markers -> score -> readiness factor -> recommendation.

Two entry points feed the same factor band [0.8, 1.2]:
- Daily log markers (sleep quality, stress, soreness on 1-10, fatigue %):
  score = mean(sleep, stress, soreness) * (1 - fatigue / 100), in [0, 10];
  factor = clamp(score / 10 * 1.2, 0.8, 1.2). Fatigue is a multiplicative
  damper: perfect markers at 100% fatigue score 0. Everything below ~6.67
  shares the 0.8 floor so poor days are not punished further.
- Check-in sliders (sleep, soreness, stress, energy on 1-5):
  factor = ((mean - 1) / 4) * 0.4 + 0.8, so all-3s is the 1.0 baseline.

All inputs are clamped to their documented ranges and outputs never leave
theirs, whatever the caller passes.
"""

from __future__ import annotations

from collections.abc import Iterable

from dailyarc.core.constants import (
    CNS_RF_FLOOR,
    CNS_RPE_PENALTIES,
    FATIGUE_MAX,
    FATIGUE_MIN,
    MARKER_MAX,
    MARKER_MIN,
    RF_MAX,
    RF_MIN,
    SCORE_MAX,
    SCORE_MIN,
    SLIDER_MAX,
    SLIDER_MIN,
)
from dailyarc.core.enums import ExerciseType, IntensityLabel, Recommendation
from dailyarc.core.numbers import bounded, clamp, is_finite_number, round_half_up
from dailyarc.schemas.readiness import IntensityAdjustment, ReadinessInput, RecentSession

# Lower bounds, checked from the top; anything below the last is REST.
FACTOR_BREAKPOINTS: tuple[tuple[float, Recommendation], ...] = (
    (1.1, Recommendation.INTENSE),
    (1.0, Recommendation.MODERATE),
    (0.9, Recommendation.LIGHT),
)
SCORE_BREAKPOINTS: tuple[tuple[float, Recommendation], ...] = (
    (8.0, Recommendation.INTENSE),
    (6.0, Recommendation.MODERATE),
    (4.0, Recommendation.LIGHT),
)

# Upper bounds (exclusive) on the training factor; anything above is MAX_EFFORT.
INTENSITY_BREAKPOINTS: tuple[tuple[float, IntensityLabel], ...] = (
    (0.8, IntensityLabel.DELOAD),
    (0.95, IntensityLabel.REDUCED),
    (1.05, IntensityLabel.MAINTAIN),
    (1.15, IntensityLabel.PROGRESS),
)

# label -> (calisthenics level delta, weightlifting load x, cardio volume x)
INTENSITY_PRESCRIPTIONS: dict[IntensityLabel, tuple[int, float, float]] = {
    IntensityLabel.DELOAD: (-2, 0.7, 0.5),
    IntensityLabel.REDUCED: (-1, 0.85, 0.75),
    IntensityLabel.MAINTAIN: (0, 1.0, 1.0),
    IntensityLabel.PROGRESS: (0, 1.025, 1.1),
    IntensityLabel.MAX_EFFORT: (1, 1.05, 1.2),
}


# ── Daily log markers ────────────────────────────────────────────────────

def calculate_readiness_score(
    sleep_quality: float,
    stress_level: float,
    soreness: float,
    fatigue: float,
) -> float:
    """Readiness score in [0, 10], 2 dp. Unusable fatigue counts as fully fatigued."""
    sleep_quality = bounded(sleep_quality, MARKER_MIN, MARKER_MAX)
    stress_level = bounded(stress_level, MARKER_MIN, MARKER_MAX)
    soreness = bounded(soreness, MARKER_MIN, MARKER_MAX)
    fatigue = bounded(fatigue, FATIGUE_MIN, FATIGUE_MAX, default=FATIGUE_MAX)

    base_score = (sleep_quality + stress_level + soreness) / 3
    fatigue_multiplier = (FATIGUE_MAX - fatigue) / FATIGUE_MAX
    score = round_half_up(base_score * fatigue_multiplier, 2)
    return clamp(score, SCORE_MIN, SCORE_MAX)


def readiness_factor_from_score(score: float) -> float:
    """Map a 0-10 score onto the [0.8, 1.2] factor band; 1.0 at ~8.33. Unrounded."""
    score = bounded(score, SCORE_MIN, SCORE_MAX)
    return clamp(score / SCORE_MAX * RF_MAX, RF_MIN, RF_MAX)


def recommendation_for_score(score: float) -> Recommendation:
    if not is_finite_number(score):
        return Recommendation.REST
    for lower, recommendation in SCORE_BREAKPOINTS:
        if score >= lower:
            return recommendation
    return Recommendation.REST


# ── Check-in sliders ─────────────────────────────────────────────────────

def _sliders(readiness: ReadinessInput) -> list[float]:
    return [
        bounded(v, SLIDER_MIN, SLIDER_MAX)
        for v in (readiness.sleep, readiness.soreness, readiness.stress, readiness.energy)
    ]


def calculate_readiness_average(readiness: ReadinessInput) -> float:
    values = _sliders(readiness)
    return sum(values) / len(values)


def calculate_readiness_factor(readiness: ReadinessInput) -> float:
    """((average - 1) / 4) * 0.4 + 0.8, 2 dp: 0.8 at all-1s, 1.0 at all-3s, 1.2 at all-5s."""
    average = calculate_readiness_average(readiness)
    span = SLIDER_MAX - SLIDER_MIN
    factor = ((average - SLIDER_MIN) / span) * (RF_MAX - RF_MIN) + RF_MIN
    return clamp(round_half_up(factor, 2), RF_MIN, RF_MAX)


def rescale_slider(value: float) -> float:
    """Map a 1-5 slider onto the 1-10 marker scale used by the score."""
    value = bounded(value, SLIDER_MIN, SLIDER_MAX)
    span = (MARKER_MAX - MARKER_MIN) / (SLIDER_MAX - SLIDER_MIN)
    return MARKER_MIN + (value - SLIDER_MIN) * span


def get_recommendation(readiness_factor: float) -> Recommendation:
    """REST below 0.9, LIGHT below 1.0, MODERATE below 1.1, else INTENSE."""
    if not is_finite_number(readiness_factor):
        return Recommendation.REST
    for lower, recommendation in FACTOR_BREAKPOINTS:
        if readiness_factor >= lower:
            return recommendation
    return Recommendation.REST


# ── Training adjustments ─────────────────────────────────────────────────

def _cns_penalty(rpe: float) -> float:
    for threshold in sorted(CNS_RPE_PENALTIES, reverse=True):
        if rpe >= threshold:
            return CNS_RPE_PENALTIES[threshold]
    return 0.0


def apply_cns_fatigue_modifier(
    readiness_factor: float,
    recent_sessions: Iterable[RecentSession],
) -> float:
    """
    Lower the factor for recent high-RPE sessions (RPE 8: -0.03, 9: -0.05,
    10: -0.08 each). The result may fall to 0.7, below the nutrition floor,
    which is the deload band.
    """
    factor = bounded(readiness_factor, CNS_RF_FLOOR, RF_MAX, default=RF_MIN)
    penalty = sum(_cns_penalty(s.rpe) for s in recent_sessions if is_finite_number(s.rpe))
    return clamp(round_half_up(factor - penalty, 2), CNS_RF_FLOOR, RF_MAX)


def get_intensity_adjustment(
    training_factor: float,
    exercise_type: ExerciseType | str,
) -> IntensityAdjustment:
    """Per-modality session adjustment; fields that don't apply stay neutral."""
    exercise_type = ExerciseType(exercise_type)
    label = IntensityLabel.MAX_EFFORT
    if not is_finite_number(training_factor):
        label = IntensityLabel.DELOAD
    else:
        for upper, candidate in INTENSITY_BREAKPOINTS:
            if training_factor < upper:
                label = candidate
                break

    level_delta, load_multiplier, volume_multiplier = INTENSITY_PRESCRIPTIONS[label]
    if exercise_type is ExerciseType.CALISTHENICS:
        return IntensityAdjustment(label=label, level_delta=level_delta)
    if exercise_type is ExerciseType.WEIGHTLIFTING:
        return IntensityAdjustment(label=label, load_multiplier=load_multiplier)
    return IntensityAdjustment(label=label, volume_multiplier=volume_multiplier)
