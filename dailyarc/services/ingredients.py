"""Ingredient gap matching between a pantry and recipes.

Matching is fuzzy on purpose: pantry entries are free text, so an ingredient
counts as present when its lowercase name contains a pantry name or a pantry
name contains it ("chicken" matches "chicken breast" either way).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dailyarc.schemas.nutrition import InventoryItem, PantryEntry, Recipe


def normalize_inventory(inventory: Iterable[PantryEntry]) -> set[str]:
    """
    Lowercase names of items on hand. Plain strings are present by definition;
    InventoryItem needs is_present. Blank names are dropped since an empty
    string would match every ingredient.
    """
    present: set[str] = set()
    for item in inventory:
        if isinstance(item, InventoryItem):
            if not item.is_present:
                continue
            name = item.name
        else:
            name = item
        name = name.strip().lower()
        if name:
            present.add(name)
    return present


def _has_ingredient(food: str, pantry: set[str]) -> bool:
    return any(food in item or item in food for item in pantry)


def get_ingredient_gaps(inventory: Iterable[PantryEntry], recipe: Recipe) -> list[str]:
    """Missing ingredient names, deduplicated, in recipe order (original casing)."""
    pantry = normalize_inventory(inventory)
    missing: list[str] = []
    for ingredient in recipe.ingredients:
        food = ingredient.food.strip().lower()
        if not food:
            continue
        if not _has_ingredient(food, pantry) and ingredient.food not in missing:
            missing.append(ingredient.food)
    return missing


def rank_recipes(inventory: Iterable[PantryEntry], recipes: Sequence[Recipe]) -> list[Recipe]:
    """Fewest gaps first ("closest to cookable"); ties keep input order."""
    pantry = list(inventory)
    return sorted(recipes, key=lambda r: len(get_ingredient_gaps(pantry, r)))


def build_shopping_list(inventory: Iterable[PantryEntry], recipes: Sequence[Recipe]) -> list[str]:
    """Union of the recipes' gaps, first occurrence wins."""
    pantry = list(inventory)
    shopping: list[str] = []
    seen: set[str] = set()
    for recipe in recipes:
        for gap in get_ingredient_gaps(pantry, recipe):
            key = gap.strip().lower()
            if key not in seen:
                seen.add(key)
                shopping.append(gap)
    return shopping
