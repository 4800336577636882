"""Ranking and filtering of recipes by health score."""
from typing import Iterable, List, Optional, Sequence

from mealwise.data_layer.models import Recipe, ScoredRecipe
from mealwise.health.health_scorer import HealthScorer


def rank_recipes(recipes: Iterable[Recipe],
                 condition_keys: Sequence[str],
                 scorer: Optional[HealthScorer] = None) -> List[ScoredRecipe]:
    """Score every recipe and sort by overall score, best first.

    Ties keep their input order.

    Args:
        recipes: Recipes to rank
        condition_keys: Canonical condition keys
        scorer: HealthScorer to use (defaults to one with standard deltas)

    Returns:
        ScoredRecipe list sorted descending by overall score
    """
    scorer = scorer or HealthScorer()
    scored = [
        ScoredRecipe(recipe=recipe, health_score=scorer.score_recipe(recipe, condition_keys))
        for recipe in recipes
    ]
    # sorted() is stable, so equal scores stay in input order
    return sorted(scored, key=lambda s: s.health_score.overall, reverse=True)


def recommend_recipes(recipes: Iterable[Recipe],
                      condition_keys: Sequence[str],
                      min_overall: int,
                      limit: Optional[int] = None,
                      scorer: Optional[HealthScorer] = None) -> List[ScoredRecipe]:
    """Rank recipes and keep those scoring strictly above a threshold.

    Args:
        recipes: Candidate recipes
        condition_keys: Canonical condition keys
        min_overall: Recipes with overall <= this value are dropped
        limit: Optional maximum number of results
        scorer: HealthScorer to use

    Returns:
        Ranked, filtered ScoredRecipe list
    """
    ranked = rank_recipes(recipes, condition_keys, scorer)
    kept = [s for s in ranked if s.health_score.overall > min_overall]
    if limit is not None:
        kept = kept[:limit]
    return kept
