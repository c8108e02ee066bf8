"""Nutrition endpoints: readiness-calibrated macros and pantry gaps."""

from fastapi import APIRouter

from dailyarc.core.config import get_settings
from dailyarc.schemas.nutrition import (
    GapRequest,
    GapResponse,
    MacroCalibrationRequest,
    MacroCalibrationResponse,
    RecipeListRequest,
)
from dailyarc.services.ingredients import build_shopping_list, get_ingredient_gaps, rank_recipes
from dailyarc.services.macros import calibrate_macros

router = APIRouter()


@router.post("/macros", response_model=MacroCalibrationResponse)
async def macros(payload: MacroCalibrationRequest):
    """Scale base targets by the day's factor using the requested or configured policy."""
    policy = payload.policy or get_settings().macro_policy
    return MacroCalibrationResponse(
        policy=policy,
        readiness_factor=payload.readiness_factor,
        targets=calibrate_macros(payload.base, payload.readiness_factor, policy),
    )


@router.post("/gaps", response_model=GapResponse)
async def gaps(payload: GapRequest):
    missing = get_ingredient_gaps(payload.inventory, payload.recipe)
    return GapResponse(recipe_id=payload.recipe.id, gaps=missing, ready_to_cook=not missing)


@router.post("/recipes/rank", response_model=list[GapResponse])
async def rank(payload: RecipeListRequest):
    """Recipes sorted closest-to-cookable first, with their gaps."""
    result = []
    for recipe in rank_recipes(payload.inventory, payload.recipes):
        missing = get_ingredient_gaps(payload.inventory, recipe)
        result.append(GapResponse(recipe_id=recipe.id, gaps=missing, ready_to_cook=not missing))
    return result


@router.post("/shopping-list")
async def shopping_list(payload: RecipeListRequest):
    return {"items": build_shopping_list(payload.inventory, payload.recipes)}
