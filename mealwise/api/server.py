"""FastAPI server for health-aware recommendations and shopping lists."""

import os
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from mealwise.app_logging import configure_logging
from mealwise.data_layer.category_lexicon import get_category
from mealwise.data_layer.condition_lexicon import HEALTH_CONDITIONS
from mealwise.data_layer.exceptions import RecipeNotFoundError, UnknownCategoryError
from mealwise.data_layer.recipe_db import RecipeDB
from mealwise.data_layer.settings import SettingsLoader
from mealwise.health.condition_parser import generate_health_advice, parse_conditions
from mealwise.health.recipe_ranker import recommend_recipes
from mealwise.output.formatters import (
    format_recommendations_json,
    format_shopping_list_json,
)
from mealwise.shopping.aggregator import ShoppingListAggregator


recipes_path = os.environ.get("MEALWISE_RECIPES_PATH", "data/recipes/recipes.json")
config_path = os.environ.get("MEALWISE_CONFIG_PATH", "config/settings.yaml")

settings = SettingsLoader(config_path).load()
configure_logging(settings.log_level)

app = FastAPI(title="MealWise API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RecommendationRequest(BaseModel):
    text: Optional[str] = None
    conditions: List[str] = Field(default_factory=list)
    min_score: Optional[int] = Field(default=None, ge=0, le=100)
    limit: Optional[int] = Field(default=None, ge=1)


class CustomItemRequest(BaseModel):
    ingredient: str
    category: Optional[str] = None
    notes: Optional[str] = None


class ShoppingListRequest(BaseModel):
    recipe_ids: List[str] = Field(default_factory=list)
    custom_items: List[CustomItemRequest] = Field(default_factory=list)


def _resolve_conditions(request: RecommendationRequest) -> List[str]:
    """Merge explicit condition keys with those detected in free text."""
    conditions = [key for key in request.conditions if key in HEALTH_CONDITIONS]
    if request.text:
        for key in parse_conditions(request.text):
            if key not in conditions:
                conditions.append(key)
    return conditions


@app.get("/api/conditions")
def list_conditions() -> List[Dict[str, Any]]:
    return [
        {
            "key": key,
            "name": condition.name,
            "category": condition.category.value,
            "severity": condition.severity.value,
            "restrictions": list(condition.restrictions),
            "recommendations": list(condition.recommendations),
        }
        for key, condition in HEALTH_CONDITIONS.items()
    ]


@app.post("/api/recommendations")
def recommend(request: RecommendationRequest) -> Dict[str, Any]:
    try:
        recipe_db = RecipeDB(recipes_path)
        conditions = _resolve_conditions(request)
        min_score = request.min_score if request.min_score is not None else settings.min_overall_score
        limit = request.limit if request.limit is not None else settings.recommendation_limit

        scored = recommend_recipes(
            recipe_db.get_all_recipes(), conditions, min_overall=min_score, limit=limit
        )
        return format_recommendations_json(scored, conditions, generate_health_advice(conditions))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/shopping-list")
def shopping_list(request: ShoppingListRequest) -> Dict[str, Any]:
    try:
        recipe_db = RecipeDB(recipes_path)
        if request.recipe_ids:
            recipes = recipe_db.get_recipes_by_ids(request.recipe_ids)
        else:
            recipes = recipe_db.get_all_recipes()

        aggregator = ShoppingListAggregator()
        items = aggregator.aggregate_recipes(recipes)
        for custom in request.custom_items:
            category = get_category(custom.category) if custom.category else None
            items.append(aggregator.create_custom_item(custom.ingredient, category, custom.notes))

        return format_shopping_list_json(items)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UnknownCategoryError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/recipes")
def list_recipes() -> List[Dict[str, str]]:
    try:
        recipe_db = RecipeDB(recipes_path)
        return [{"id": r.id, "title": r.title} for r in recipe_db.get_all_recipes()]
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
