"""Engine constants."""

# Skill levels
MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 10

# Readiness scorer (daily log, 1-10 markers + fatigue %)
MARKER_MIN = 1.0
MARKER_MAX = 10.0
FATIGUE_MIN = 0.0
FATIGUE_MAX = 100.0
SCORE_MIN = 0.0
SCORE_MAX = 10.0

# Readiness check-in sliders
SLIDER_MIN = 1.0
SLIDER_MAX = 5.0

# Readiness factor band
RF_MIN = 0.8
RF_MAX = 1.2
RF_BASELINE = 1.0

# Training factor after CNS fatigue can fall into the deload band
CNS_RF_FLOOR = 0.7

# Penalty per recent session by RPE (RPE >= 10 uses the 10 entry)
CNS_RPE_PENALTIES: dict[int, float] = {8: 0.03, 9: 0.05, 10: 0.08}

# Protein-anchored macro bands
CARB_MULTIPLIER_MIN = 0.8
CARB_MULTIPLIER_MAX = 1.2
FAT_MULTIPLIER_MIN = 0.9
FAT_MULTIPLIER_MAX = 1.1

# kcal per gram
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

# Epley 1RM divisor
EPLEY_REPS_DIVISOR = 30.0
