"""Shared fixtures for recipe-file based tests."""
import json
import logging

import pytest

SAMPLE_RECIPES = {
    "recipes": [
        {
            "id": "quinoa-bowl",
            "title": "Quinoa Bowl",
            "description": "Quinoa with vegetables and whole grains",
            "dietaryTags": ["vegetarian", "high-fiber", "low-sodium"],
            "ingredients": [
                {"name": "quinoa", "amount": "1", "unit": "cup"},
                {"name": "lemon", "amount": "1", "unit": "item"},
                {"name": "olive oil", "amount": "2", "unit": "tbsp"},
            ],
            "nutrition": {"calories": 420, "protein": 14, "carbs": 58, "fat": 15,
                          "fiber": 11, "sugar": 6, "sodium": 280, "iron": 3.5},
            "prepTime": 15,
            "cookTime": 20,
            "servings": 2,
            "mealTypes": ["lunch"],
        },
        {
            "id": "club-sandwich",
            "title": "Club Sandwich",
            "description": "White bread with processed meats",
            "dietaryTags": [],
            "ingredients": ["3 slices white bread", "4 oz ham", "1 tbsp butter"],
            "nutrition": {"calories": 780, "sodium": 1900},
        },
        {
            "id": "lemon-chicken",
            "title": "Lemon Chicken",
            "description": "Grilled chicken with lemon",
            "tags": ["dinner"],
            "dietaryTags": ["high-protein"],
            "ingredients": [
                {"name": "Lemon", "amount": "2", "unit": "item"},
                {"name": "chicken breast", "amount": "1", "unit": "lb"},
            ],
        },
    ]
}


@pytest.fixture
def recipes_file(tmp_path):
    """Write the sample recipes to a temporary JSON file."""
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(SAMPLE_RECIPES), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logging.getLogger("mealwise").handlers.clear()
