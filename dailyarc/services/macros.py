"""Macro calibration: scale a base nutrition target by the readiness factor.

Two policies, picked explicitly (Settings.macro_policy is the default):

- uniform: every macro x factor, including protein. This is what the
  dashboards show against all three rings.
- protein_anchored: protein is held constant for structural repair; carbs
  follow the factor within [0.8, 1.2], fat within the narrower [0.9, 1.1], and
  calories are recomputed from the adjusted macros (4/4/9 kcal per gram).

Both round to the nearest gram / kcal, halves up.
"""

from __future__ import annotations

from dailyarc.core.constants import (
    CARB_MULTIPLIER_MAX,
    CARB_MULTIPLIER_MIN,
    FAT_MULTIPLIER_MAX,
    FAT_MULTIPLIER_MIN,
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    RF_BASELINE,
    RF_MAX,
    RF_MIN,
)
from dailyarc.core.enums import MacroPolicy
from dailyarc.core.numbers import bounded, round_int
from dailyarc.schemas.nutrition import MacroSplit, NutritionTargets


def _factor(readiness_factor: float, lo: float, hi: float) -> float:
    # Unusable factors fall back to the 1.0 baseline, i.e. no adjustment
    return bounded(readiness_factor, lo, hi, default=RF_BASELINE)


def calculate_dynamic_macros(base: MacroSplit, readiness_factor: float) -> MacroSplit:
    """
    Uniform policy. Returns the same model type as base; calories are scaled
    too when the base carries them.
    """
    factor = _factor(readiness_factor, RF_MIN, RF_MAX)
    scaled = {
        key: None if value is None else round_int(value * factor)
        for key, value in base.model_dump().items()
    }
    return type(base)(**scaled)


def calculate_adjusted_macros(base: MacroSplit, readiness_factor: float) -> NutritionTargets:
    """Protein-anchored policy. Calories never come from the base target."""
    carb_multiplier = _factor(readiness_factor, CARB_MULTIPLIER_MIN, CARB_MULTIPLIER_MAX)
    fat_multiplier = _factor(readiness_factor, FAT_MULTIPLIER_MIN, FAT_MULTIPLIER_MAX)

    protein = base.protein
    carbs = round_int(base.carbs * carb_multiplier)
    fat = round_int(base.fat * fat_multiplier)
    calories = protein * KCAL_PER_G_PROTEIN + carbs * KCAL_PER_G_CARBS + fat * KCAL_PER_G_FAT

    return NutritionTargets(calories=round_int(calories), protein=protein, carbs=carbs, fat=fat)


def calibrate_macros(
    base: NutritionTargets,
    readiness_factor: float,
    policy: MacroPolicy | str,
) -> NutritionTargets:
    policy = MacroPolicy(policy)
    if policy is MacroPolicy.PROTEIN_ANCHORED:
        return calculate_adjusted_macros(base, readiness_factor)
    return NutritionTargets(**calculate_dynamic_macros(base, readiness_factor).model_dump())
