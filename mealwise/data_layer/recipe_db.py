"""Recipe database for loading recipes from JSON."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from mealwise.data_layer.exceptions import RecipeDataError, RecipeNotFoundError
from mealwise.data_layer.models import (
    IngredientEntry,
    NutritionFacts,
    Recipe,
    RecipeIngredient,
)

logger = logging.getLogger(__name__)

# Nutrition keys with a dedicated NutritionFacts field
_CORE_NUTRIENTS = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")


class RecipeDB:
    """Database for managing recipes loaded from JSON.

    The JSON file holds ``{"recipes": [...]}`` where each record uses the
    recipe store's camelCase field names (``dietaryTags``, ``prepTime``,
    ``mealTypes``...). Ingredients may be plain strings or
    ``{name, amount, unit}`` objects.
    """

    def __init__(self, json_path: str):
        """Initialize recipe database from JSON file.

        Args:
            json_path: Path to JSON file containing recipes

        Raises:
            FileNotFoundError: If the file does not exist
            RecipeDataError: If a recipe record is malformed
        """
        self.json_path = Path(json_path)
        self._recipes: List[Recipe] = []
        self._load_recipes()

    def _load_recipes(self):
        """Load recipes from JSON file."""
        with open(self.json_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        recipes_data = data.get("recipes", []) if isinstance(data, dict) else data
        for index, recipe_data in enumerate(recipes_data):
            self._recipes.append(self._parse_recipe(index, recipe_data))

        logger.info("Loaded %d recipes from %s", len(self._recipes), self.json_path)

    def _parse_recipe(self, index: int, recipe_data: Any) -> Recipe:
        """Parse a single recipe from dictionary data.

        Args:
            index: Position of the record, used in error messages
            recipe_data: Dictionary containing recipe data

        Returns:
            Recipe object
        """
        if not isinstance(recipe_data, dict):
            raise RecipeDataError(index, "record is not an object")
        for required in ("id", "title"):
            if required not in recipe_data:
                raise RecipeDataError(index, f"missing '{required}'")

        ingredients = [
            self._parse_ingredient(index, ing_data)
            for ing_data in recipe_data.get("ingredients") or []
        ]

        try:
            return Recipe(
                id=str(recipe_data["id"]),
                title=str(recipe_data["title"]),
                description=recipe_data.get("description") or "",
                tags=[str(t) for t in recipe_data.get("tags") or []],
                dietary_tags=[str(t) for t in recipe_data.get("dietaryTags") or []],
                ingredients=ingredients,
                nutrition=self._parse_nutrition(recipe_data.get("nutrition") or {}),
                cuisine=recipe_data.get("cuisine") or "",
                prep_time=int(recipe_data.get("prepTime") or 0),
                cook_time=int(recipe_data.get("cookTime") or 0),
                servings=int(recipe_data.get("servings") or 1),
                meal_types=[str(m) for m in recipe_data.get("mealTypes") or []],
            )
        except (TypeError, ValueError) as exc:
            raise RecipeDataError(index, str(exc)) from exc

    def _parse_ingredient(self, index: int, ing_data: Any) -> IngredientEntry:
        """Parse a single ingredient entry (string or object)."""
        if isinstance(ing_data, str):
            return ing_data
        if isinstance(ing_data, dict):
            return RecipeIngredient(
                name=str(ing_data.get("name") or ""),
                amount=str(ing_data.get("amount") or ""),
                unit=str(ing_data.get("unit") or ""),
            )
        raise RecipeDataError(index, f"unsupported ingredient entry {ing_data!r}")

    @staticmethod
    def _parse_nutrition(nutrition_data: Dict[str, Any]) -> NutritionFacts:
        core = {key: float(nutrition_data.get(key) or 0.0) for key in _CORE_NUTRIENTS}
        extra = {
            key: float(value)
            for key, value in nutrition_data.items()
            if key not in _CORE_NUTRIENTS and isinstance(value, (int, float))
        }
        return NutritionFacts(extra=extra, **core)

    def get_all_recipes(self) -> List[Recipe]:
        """Get all recipes in the database.

        Returns:
            List of all Recipe objects
        """
        return self._recipes.copy()

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get a recipe by its ID.

        Args:
            recipe_id: Unique recipe identifier

        Returns:
            Recipe object if found, None otherwise
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def get_recipes_by_ids(self, recipe_ids: List[str]) -> List[Recipe]:
        """Get recipes in the order of the given ids.

        Raises:
            RecipeNotFoundError: If any id is unknown
        """
        recipes = []
        for recipe_id in recipe_ids:
            recipe = self.get_recipe_by_id(recipe_id)
            if recipe is None:
                raise RecipeNotFoundError(recipe_id)
            recipes.append(recipe)
        return recipes
