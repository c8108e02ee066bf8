"""Skill tree schemas: nodes, cross-modality prerequisites, validation and progress."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dailyarc.core.enums import CrossMetric, ExerciseCategory, ExerciseType, NodeState, TrainingMode


class CrossPrerequisite(BaseModel):
    """Gate on a metric computed from another exercise's logged history."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    metric: CrossMetric
    threshold: float


class LegacyExerciseNode(BaseModel):
    """Original calisthenics node shape (no modality, no cross-prerequisites)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    level: int
    sets: int
    reps: int
    description: str
    category: ExerciseCategory
    prerequisites: tuple[str, ...] = ()

    @field_validator("category")
    @classmethod
    def _bodyweight_category(cls, v: ExerciseCategory) -> ExerciseCategory:
        if v is ExerciseCategory.IRON:
            raise ValueError("legacy calisthenics nodes are push, pull, legs or core")
        return v


class SkillNode(BaseModel):
    """
    Canonical progression node. Level bounds are not enforced here so the
    validator can report authored-data mistakes instead of failing assembly.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    level: int
    sets: int
    reps: int
    description: str
    category: ExerciseCategory
    exercise_type: ExerciseType
    prerequisites: tuple[str, ...] = ()
    cross_prerequisites: tuple[CrossPrerequisite, ...] = ()
    # Weightlifting / calisthenics
    target_bw_ratio: float | None = None
    # Cardio
    distance: float | None = None  # km
    duration: int | None = None  # seconds
    zone: int | None = Field(None, ge=1, le=5)  # heart-rate zone


class TreeValidation(BaseModel):
    valid: bool
    errors: list[str]


# ── Progress queries ─────────────────────────────────────────────────────

class MetricValue(BaseModel):
    exercise_id: str
    metric: CrossMetric
    value: float


class LoggedSet(BaseModel):
    """One logged set from workout history. Missing weight means bodyweight only."""

    exercise_id: str
    reps: int = Field(0, ge=0)
    weight: float | None = Field(None, ge=0)


class ProgressRequest(BaseModel):
    mode: TrainingMode | None = None
    completed_ids: list[str] = Field(default_factory=list)
    metrics: list[MetricValue] = Field(
        default_factory=list,
        description="Pre-computed metric values. Override anything derived from history.",
    )
    history: list[LoggedSet] = Field(default_factory=list)
    bodyweight_kg: float | None = Field(None, ge=0)


class NodeProgress(BaseModel):
    id: str
    name: str
    level: int
    exercise_type: ExerciseType
    state: NodeState


class ProgressResponse(BaseModel):
    mode: TrainingMode
    nodes: list[NodeProgress]
    next_progressions: list[str]
    completed_count: int
    total_count: int
    percentage: int
    max_level: int
