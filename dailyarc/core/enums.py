"""Shared enums for the progression engine and API."""

from enum import Enum


class ExerciseType(str, Enum):
    """Modality a skill node belongs to."""

    CALISTHENICS = "CALISTHENICS"
    WEIGHTLIFTING = "WEIGHTLIFTING"
    CARDIO = "CARDIO"


class ExerciseCategory(str, Enum):
    """Movement bucket. Cardio nodes are filed under legs/core."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"
    IRON = "iron"


class TrainingMode(str, Enum):
    """Which catalogs a tree is assembled from."""

    BODYWEIGHT = "bodyweight"
    IRON = "iron"
    CARDIO = "cardio"
    HYBRID = "hybrid"


class CrossMetric(str, Enum):
    """Performance metrics a cross-modality prerequisite can gate on."""

    ONE_RM_BW_RATIO = "1rm_bw_ratio"  # Estimated 1RM / bodyweight
    VOLUME_LOAD = "volume_load"  # Total reps x weight
    MASTERED = "mastered"  # 1.0 once completed


class NodeState(str, Enum):
    """Derived lock state of a node for one learner."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    COMPLETED = "completed"


class Recommendation(str, Enum):
    """Daily training recommendation, ordered least to most intense."""

    REST = "REST"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    INTENSE = "INTENSE"


class IntensityLabel(str, Enum):
    """Session intensity adjustment derived from the training factor."""

    DELOAD = "DELOAD"
    REDUCED = "REDUCED"
    MAINTAIN = "MAINTAIN"
    PROGRESS = "PROGRESS"
    MAX_EFFORT = "MAX_EFFORT"


class MacroPolicy(str, Enum):
    """How the readiness factor scales nutrition targets."""

    UNIFORM = "uniform"  # Every macro x factor
    PROTEIN_ANCHORED = "protein_anchored"  # Protein fixed, carbs/fat clamped
