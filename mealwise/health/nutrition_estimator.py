"""Heuristic nutrition estimation from recipe tags and ingredient names.

The estimate feeds the health scorer only. It never replaces the
recipe's own ``nutrition`` values.
"""
from typing import List

from mealwise.data_layer.models import NutritionalProfile, Recipe, RecipeIngredient

# Starting point before any tag or ingredient adjustment
BASE_PROTEIN = 15
BASE_CARBS = 30
BASE_FAT = 10
BASE_FIBER = 5
BASE_SODIUM = 400
BASE_SUGAR = 5

# Floors applied by "low-*" tags
MIN_CARBS = 5
MIN_FAT = 5
MIN_SODIUM = 100


def ingredient_names(recipe: Recipe) -> List[str]:
    """Return lowercased ingredient names, whatever form the entries take."""
    names = []
    for entry in recipe.ingredients:
        if isinstance(entry, str):
            names.append(entry.lower())
        elif isinstance(entry, RecipeIngredient) and entry.name:
            names.append(entry.name.lower())
        else:
            names.append("")
    return names


def estimate_nutritional_profile(recipe: Recipe) -> NutritionalProfile:
    """Estimate macros, fiber and sodium for a recipe.

    Args:
        recipe: Recipe to estimate

    Returns:
        NutritionalProfile; calories are derived from protein, carbs and
        fat only (4/4/9 kcal per gram)
    """
    tags = recipe.all_tags()

    protein = BASE_PROTEIN
    carbs = BASE_CARBS
    fat = BASE_FAT
    fiber = BASE_FIBER
    sodium = BASE_SODIUM
    sugar = BASE_SUGAR

    if "high-protein" in tags:
        protein += 20
    if "low-carb" in tags or "keto" in tags:
        carbs = max(MIN_CARBS, carbs - 20)
    if "low-fat" in tags:
        fat = max(MIN_FAT, fat - 5)
    if "high-fiber" in tags:
        fiber += 10
    if "low-sodium" in tags:
        sodium = max(MIN_SODIUM, sodium - 200)

    for name in ingredient_names(recipe):
        if "cheese" in name or "butter" in name:
            fat += 8
            sodium += 100
        if "beans" in name or "lentils" in name:
            protein += 10
            fiber += 8
        if "chicken" in name or "fish" in name:
            protein += 15
        if "salt" in name or "soy sauce" in name:
            sodium += 200

    calories = round(protein * 4 + carbs * 4 + fat * 9)

    return NutritionalProfile(
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
        sodium=sodium,
        sugar=sugar,
        calories=calories,
    )
