"""Health-aware recipe scoring."""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from mealwise.data_layer.condition_lexicon import HEALTH_CONDITIONS
from mealwise.data_layer.models import (
    ConditionCategory,
    HealthCondition,
    HealthScore,
    NutritionalProfile,
    Recipe,
)
from mealwise.health.nutrition_estimator import estimate_nutritional_profile

logger = logging.getLogger(__name__)

BASE_SCORE = 70
MAX_DETAILS = 3

# Condition categories that move a score axis; digestive/other move none
_CATEGORY_AXIS = {
    ConditionCategory.CARDIOVASCULAR: "cardiovascular",
    ConditionCategory.METABOLIC: "metabolic",
    ConditionCategory.INFLAMMATORY: "inflammatory",
}


@dataclass(frozen=True)
class ScoreAdjustments:
    """Point deltas applied when condition keywords are found.

    Magnitudes only; restrictions subtract and recommendations add.
    """
    restriction_overall: int = 15
    restriction_axis: int = 20
    recommendation_overall: int = 10
    recommendation_axis: int = 15

    def __post_init__(self):
        """Validate all deltas are non-negative."""
        deltas = [self.restriction_overall, self.restriction_axis,
                  self.recommendation_overall, self.recommendation_axis]
        if any(d < 0 for d in deltas):
            raise ValueError("All score adjustments must be non-negative")


def clamp_score(score: float) -> int:
    """Clamp a score to the 0-100 range."""
    return int(max(0, min(100, score)))


class HealthScorer:
    """Scores recipes against a list of health conditions."""

    def __init__(self,
                 adjustments: Optional[ScoreAdjustments] = None,
                 conditions: Optional[Mapping[str, HealthCondition]] = None,
                 estimator: Callable[[Recipe], NutritionalProfile] = estimate_nutritional_profile):
        """Initialize health scorer.

        Args:
            adjustments: Optional custom keyword deltas
            conditions: Condition lexicon (defaults to HEALTH_CONDITIONS)
            estimator: Function producing the nutrition estimate for a recipe
        """
        self.adjustments = adjustments or ScoreAdjustments()
        self.conditions = HEALTH_CONDITIONS if conditions is None else conditions
        self.estimator = estimator

    def score_recipe(self, recipe: Recipe, condition_keys: Sequence[str]) -> HealthScore:
        """Score a recipe for a set of health conditions.

        Every axis starts at 70. Condition keywords found in the recipe's
        title, description and tags move the overall score and the axis of
        the condition's category; the nutrition estimate then adjusts the
        axes regardless of conditions.

        Args:
            recipe: Recipe to score
            condition_keys: Canonical condition keys; unknown keys are skipped

        Returns:
            HealthScore with every axis in [0, 100] and at most 3 details
        """
        scores: Dict[str, float] = {
            "overall": BASE_SCORE,
            "cardiovascular": BASE_SCORE,
            "metabolic": BASE_SCORE,
            "inflammatory": BASE_SCORE,
            "weight_management": BASE_SCORE,
        }
        details: List[str] = []
        search_text = self._search_text(recipe)

        for key in condition_keys:
            condition = self.conditions.get(key)
            if condition is None:
                logger.debug("Skipping unknown condition key %r", key)
                continue
            self._score_condition(condition, search_text, scores, details)

        self._score_nutrition(self.estimator(recipe), scores, details)

        return HealthScore(
            overall=clamp_score(scores["overall"]),
            cardiovascular=clamp_score(scores["cardiovascular"]),
            metabolic=clamp_score(scores["metabolic"]),
            inflammatory=clamp_score(scores["inflammatory"]),
            weight_management=clamp_score(scores["weight_management"]),
            details=details[:MAX_DETAILS],
        )

    @staticmethod
    def _search_text(recipe: Recipe) -> str:
        parts = [recipe.title or "", recipe.description or ""] + recipe.all_tags()
        return " ".join(parts).lower()

    def _score_condition(self,
                         condition: HealthCondition,
                         search_text: str,
                         scores: Dict[str, float],
                         details: List[str]) -> None:
        """Apply restriction and recommendation deltas for one condition."""
        axis = _CATEGORY_AXIS.get(condition.category)

        for restriction in condition.restrictions:
            if restriction in search_text:
                scores["overall"] -= self.adjustments.restriction_overall
                if axis:
                    scores[axis] -= self.adjustments.restriction_axis
                details.append(f"Contains {restriction} (not recommended for {condition.name})")

        for recommendation in condition.recommendations:
            if recommendation in search_text:
                scores["overall"] += self.adjustments.recommendation_overall
                if axis:
                    scores[axis] += self.adjustments.recommendation_axis
                details.append(f"Contains {recommendation} (good for {condition.name})")

    @staticmethod
    def _score_nutrition(nutrition: NutritionalProfile,
                         scores: Dict[str, float],
                         details: List[str]) -> None:
        """Apply condition-independent adjustments from the nutrition estimate."""
        if nutrition.sodium < 300:
            scores["cardiovascular"] += 10
            details.append("Low sodium content")
        elif nutrition.sodium > 800:
            scores["cardiovascular"] -= 15
            details.append("High sodium content")

        if nutrition.fiber > 8:
            scores["metabolic"] += 10
            scores["weight_management"] += 10
            details.append("High fiber content")

        if nutrition.protein > 20:
            scores["weight_management"] += 10
            details.append("High protein content")

        if nutrition.calories < 400:
            scores["weight_management"] += 15
            details.append("Low calorie option")
        elif nutrition.calories > 600:
            scores["weight_management"] -= 10
            details.append("Higher calorie content")
