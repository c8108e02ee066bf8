"""Readiness schemas: daily log markers, check-in sliders and results."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dailyarc.core.enums import ExerciseType, IntensityLabel, Recommendation


class DailyLogMarkers(BaseModel):
    """Subjective daily markers on a 1-10 scale plus fatigue percentage."""

    sleep_quality: float = Field(..., ge=1, le=10)
    stress_level: float = Field(..., ge=1, le=10, description="10 = no stress")
    soreness: float = Field(..., ge=1, le=10, description="10 = no soreness")
    fatigue: float = Field(..., ge=0, le=100, description="Fatigue %")


class ReadinessInput(BaseModel):
    """Daily check-in sliders, 1 = worst / 5 = best."""

    sleep: int = Field(..., ge=1, le=5, description="Sleep quality: 1 = terrible, 5 = excellent")
    soreness: int = Field(..., ge=1, le=5, description="Muscle soreness: 1 = extreme, 5 = none")
    stress: int = Field(..., ge=1, le=5, description="Stress level: 1 = very high, 5 = very low")
    energy: int = Field(..., ge=1, le=5, description="Energy level: 1 = exhausted, 5 = fully charged")


class RecentSession(BaseModel):
    """A recent training session, used for CNS fatigue."""

    rpe: float = Field(..., ge=0, le=10)


class IntensityAdjustment(BaseModel):
    label: IntensityLabel
    level_delta: int = 0  # Calisthenics: move up/down the progression
    load_multiplier: float = 1.0  # Weightlifting: x working weight
    volume_multiplier: float = 1.0  # Cardio: x duration / distance


class ReadinessScoreResponse(BaseModel):
    score: float
    readiness_factor: float
    recommendation: Recommendation


class CheckInRequest(ReadinessInput):
    recent_sessions: list[RecentSession] = Field(default_factory=list)


class CheckInResponse(BaseModel):
    readiness_average: float
    readiness_factor: float
    recommendation: Recommendation
    training_factor: float
    intensity: dict[ExerciseType, IntensityAdjustment]
