"""Strength metrics from logged sets, and the metric table cross-prerequisites read.

Workout-history aggregation lives here rather than in the unlock resolver: the
resolver only compares values against thresholds through an injected lookup.

1RM uses the Epley formula, 1RM = weight * (1 + reps / 30). It is most
accurate for 6-15 reps; it overestimates slightly at 1-5 reps compared with
Brzycki and becomes unreliable above ~15 reps.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

from dailyarc.core.constants import EPLEY_REPS_DIVISOR
from dailyarc.core.enums import CrossMetric
from dailyarc.core.numbers import is_finite_number, round_half_up
from dailyarc.schemas.skill import LoggedSet, MetricValue
from dailyarc.services.unlock_resolver import MetricsLookup

MetricTable = dict[tuple[str, CrossMetric], float]


def calculate_volume(sets: Iterable[LoggedSet]) -> float:
    """Total tonnage: sum of reps x weight. Sets without weight count as 0."""
    return sum(s.reps * (s.weight or 0) for s in sets)


def estimate_1rm(weight: float, reps: int) -> float:
    """Epley estimate. A single rep is its own 1RM; zero weight or reps gives 0."""
    if not is_finite_number(weight) or not is_finite_number(reps):
        return 0.0
    if reps <= 0 or weight <= 0:
        return 0.0
    if reps == 1:
        return float(weight)
    return round_half_up(weight * (1 + reps / EPLEY_REPS_DIVISOR))


def calculate_relative_strength(one_rep_max: float, bodyweight: float) -> float:
    """Strength-to-weight ratio, 2 dp. Zero or missing bodyweight gives 0, never inf."""
    if not is_finite_number(bodyweight) or not is_finite_number(one_rep_max):
        return 0.0
    if bodyweight <= 0 or one_rep_max <= 0:
        return 0.0
    return round_half_up(one_rep_max / bodyweight, 2)


def build_metric_table(
    history: Iterable[LoggedSet],
    bodyweight_kg: float | None,
    completed_ids: Iterable[str] = (),
) -> MetricTable:
    """
    Aggregate logged sets per exercise into cross-prerequisite metrics:
    - 1rm_bw_ratio: best estimated 1RM across sets / bodyweight
    - volume_load: total reps x weight
    - mastered: 1.0 for completed exercises, 0.0 for logged but not completed
    """
    best_1rm: dict[str, float] = defaultdict(float)
    volume: dict[str, float] = defaultdict(float)
    for s in history:
        weight = s.weight or 0
        best_1rm[s.exercise_id] = max(best_1rm[s.exercise_id], estimate_1rm(weight, s.reps))
        volume[s.exercise_id] += s.reps * weight

    table: MetricTable = {}
    for exercise_id in volume:
        table[(exercise_id, CrossMetric.ONE_RM_BW_RATIO)] = calculate_relative_strength(
            best_1rm[exercise_id], bodyweight_kg or 0
        )
        table[(exercise_id, CrossMetric.VOLUME_LOAD)] = volume[exercise_id]
        table[(exercise_id, CrossMetric.MASTERED)] = 0.0
    for exercise_id in completed_ids:
        table[(exercise_id, CrossMetric.MASTERED)] = 1.0
    return table


def merge_metric_values(table: MetricTable, values: Iterable[MetricValue]) -> MetricTable:
    """Explicit values override derived ones."""
    merged = dict(table)
    for v in values:
        merged[(v.exercise_id, v.metric)] = v.value
    return merged


def metrics_lookup_from_table(table: Mapping[tuple[str, CrossMetric], float]) -> MetricsLookup:
    def lookup(exercise_id: str, metric: CrossMetric) -> float | None:
        return table.get((exercise_id, CrossMetric(metric)))

    return lookup
