"""Health-aware recipe scoring and ranking."""

from .condition_parser import parse_conditions, generate_health_advice
from .nutrition_estimator import estimate_nutritional_profile
from .health_scorer import HealthScorer, ScoreAdjustments
from .recipe_ranker import rank_recipes, recommend_recipes

__all__ = [
    "parse_conditions",
    "generate_health_advice",
    "estimate_nutritional_profile",
    "HealthScorer",
    "ScoreAdjustments",
    "rank_recipes",
    "recommend_recipes",
]
