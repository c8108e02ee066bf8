"""Daily readiness endpoints: score, factor and training recommendation."""

from fastapi import APIRouter

from dailyarc.core.enums import ExerciseType
from dailyarc.schemas.readiness import (
    CheckInRequest,
    CheckInResponse,
    DailyLogMarkers,
    ReadinessScoreResponse,
)
from dailyarc.services.readiness import (
    apply_cns_fatigue_modifier,
    calculate_readiness_average,
    calculate_readiness_factor,
    calculate_readiness_score,
    get_intensity_adjustment,
    get_recommendation,
    readiness_factor_from_score,
)

router = APIRouter()


@router.post("/score", response_model=ReadinessScoreResponse)
async def score(payload: DailyLogMarkers):
    """Score 1-10 markers and fatigue %, then map the score to a factor."""
    value = calculate_readiness_score(
        sleep_quality=payload.sleep_quality,
        stress_level=payload.stress_level,
        soreness=payload.soreness,
        fatigue=payload.fatigue,
    )
    factor = readiness_factor_from_score(value)
    return ReadinessScoreResponse(
        score=value,
        readiness_factor=factor,
        recommendation=get_recommendation(factor),
    )


@router.post("/check-in", response_model=CheckInResponse)
async def check_in(payload: CheckInRequest):
    """
    Daily 1-5 check-in. The readiness factor drives nutrition; the training
    factor is the same value after CNS fatigue from recent hard sessions.
    """
    factor = calculate_readiness_factor(payload)
    training_factor = apply_cns_fatigue_modifier(factor, payload.recent_sessions)
    return CheckInResponse(
        readiness_average=calculate_readiness_average(payload),
        readiness_factor=factor,
        recommendation=get_recommendation(factor),
        training_factor=training_factor,
        intensity={t: get_intensity_adjustment(training_factor, t) for t in ExerciseType},
    )
