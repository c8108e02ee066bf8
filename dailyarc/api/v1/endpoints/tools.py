"""QoL tools: 1RM estimate and relative strength (pure logic)."""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from dailyarc.services.strength import calculate_relative_strength, estimate_1rm

router = APIRouter()


class OneRepMaxResponse(BaseModel):
    weight: float
    reps: int
    estimated_1rm: float


class RelativeStrengthResponse(BaseModel):
    one_rep_max: float
    bodyweight: float
    ratio: float


@router.get("/one-rep-max", response_model=OneRepMaxResponse)
async def one_rep_max(
    weight: float = Query(..., ge=0),
    reps: int = Query(..., ge=0),
):
    """Epley estimate: weight * (1 + reps / 30). Zero weight or reps gives 0."""
    return OneRepMaxResponse(weight=weight, reps=reps, estimated_1rm=estimate_1rm(weight, reps))


@router.get("/relative-strength", response_model=RelativeStrengthResponse)
async def relative_strength(
    one_rep_max: float = Query(..., ge=0),
    bodyweight: float = Query(..., ge=0),
):
    """1RM / bodyweight, 2 dp. Zero bodyweight gives 0."""
    return RelativeStrengthResponse(
        one_rep_max=one_rep_max,
        bodyweight=bodyweight,
        ratio=calculate_relative_strength(one_rep_max, bodyweight),
    )
