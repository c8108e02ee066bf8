"""Nutrition schemas: macro targets, pantry items and recipes."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from dailyarc.core.enums import MacroPolicy


class MacroSplit(BaseModel):
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)


class NutritionTargets(MacroSplit):
    """Daily targets. Calories are optional on a base target; calibration may derive them."""

    calories: float | None = Field(None, ge=0)


class InventoryItem(BaseModel):
    """Pantry entry with an explicit presence flag."""

    name: str
    is_present: bool = False
    category: str | None = None


# Free-text pantry entries are always present
PantryEntry = Union[str, InventoryItem]


class RecipeIngredient(BaseModel):
    food: str
    text: str | None = None
    quantity: float | None = None
    measure: str | None = None


class Recipe(BaseModel):
    id: str
    label: str
    calories: float = 0
    macros: MacroSplit | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _coerce_names(cls, v: Any) -> Any:
        # Bare ingredient names are accepted as {"food": name}
        if isinstance(v, list):
            return [{"food": i} if isinstance(i, str) else i for i in v]
        return v


# ── Requests / responses ─────────────────────────────────────────────────

class MacroCalibrationRequest(BaseModel):
    base: NutritionTargets
    readiness_factor: float
    policy: MacroPolicy | None = None


class MacroCalibrationResponse(BaseModel):
    policy: MacroPolicy
    readiness_factor: float
    targets: NutritionTargets


class GapRequest(BaseModel):
    inventory: list[PantryEntry] = Field(default_factory=list)
    recipe: Recipe


class GapResponse(BaseModel):
    recipe_id: str
    gaps: list[str]
    ready_to_cook: bool


class RecipeListRequest(BaseModel):
    inventory: list[PantryEntry] = Field(default_factory=list)
    recipes: list[Recipe] = Field(default_factory=list)
