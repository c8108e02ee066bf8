from dailyarc.schemas.nutrition import InventoryItem, Recipe
from dailyarc.services.ingredients import (
    build_shopping_list,
    get_ingredient_gaps,
    normalize_inventory,
    rank_recipes,
)


def _recipe(recipe_id, *foods):
    return Recipe(id=recipe_id, label=recipe_id.title(), ingredients=list(foods))


def test_normalize_inventory():
    inventory = ["Rice", InventoryItem(name="Eggs", is_present=True), InventoryItem(name="Milk", is_present=False), "  "]
    assert normalize_inventory(inventory) == {"rice", "eggs"}


def test_bidirectional_substring_match():
    recipe = _recipe("stir-fry", "Chicken Breast", "Soy Sauce", "rice")
    # pantry name inside ingredient, and ingredient inside pantry name
    assert get_ingredient_gaps(["chicken", "Jasmine Rice"], recipe) == ["Soy Sauce"]


def test_empty_exactly_when_everything_matches():
    recipe = _recipe("omelette", "eggs", "butter")
    assert get_ingredient_gaps(["Eggs", "Butter"], recipe) == []
    assert get_ingredient_gaps(["Eggs"], recipe) == ["butter"]


def test_gaps_are_ordered_and_deduplicated():
    recipe = _recipe("bowl", "Tofu", "Kale", "Tofu", "Quinoa")
    assert get_ingredient_gaps([], recipe) == ["Tofu", "Kale", "Quinoa"]


def test_absent_flagged_item_is_a_gap():
    recipe = _recipe("cereal", "milk")
    assert get_ingredient_gaps([InventoryItem(name="Milk", is_present=False)], recipe) == ["milk"]


def test_blank_pantry_entry_matches_nothing():
    recipe = _recipe("toast", "bread")
    assert get_ingredient_gaps([""], recipe) == ["bread"]


def test_rank_recipes_is_stable():
    a = _recipe("a", "x", "y")
    b = _recipe("b", "eggs")
    c = _recipe("c", "p", "q")
    d = _recipe("d", "eggs", "z")
    ranked = rank_recipes(["eggs"], [a, b, c, d])
    assert [r.id for r in ranked] == ["b", "d", "a", "c"]


def test_shopping_list_unions_gaps():
    recipes = [_recipe("a", "Kale", "eggs"), _recipe("b", "kale", "Lemon")]
    assert build_shopping_list(["eggs"], recipes) == ["Kale", "Lemon"]
