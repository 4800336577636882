"""Canonical health conditions and the phrases that refer to them.

The lexicon is built once at import time and exposed through read-only
mappings. Declaration order matters: the condition parser reports keys in
the order they are declared here, and synonyms are scanned in the order of
CONDITION_SYNONYMS.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from mealwise.data_layer.models import ConditionCategory, HealthCondition, Severity


def _condition(key, name, restrictions, recommendations, severity, category) -> HealthCondition:
    return HealthCondition(
        key=key,
        name=name,
        restrictions=tuple(restrictions),
        recommendations=tuple(recommendations),
        severity=severity,
        category=category,
    )


_CONDITIONS = (
    _condition(
        "diabetes",
        "Diabetes",
        ["high sugar", "refined carbs", "sweetened beverages", "white bread", "candy"],
        ["low glycemic", "complex carbs", "fiber-rich", "lean proteins", "non-starchy vegetables"],
        Severity.HIGH,
        ConditionCategory.METABOLIC,
    ),
    _condition(
        "high blood pressure",
        "High Blood Pressure",
        ["high sodium", "processed meats", "canned foods", "fast food", "pickled foods"],
        ["potassium-rich", "low sodium", "whole grains", "lean proteins", "fruits", "vegetables"],
        Severity.HIGH,
        ConditionCategory.CARDIOVASCULAR,
    ),
    _condition(
        "uric acid",
        "High Uric Acid / Gout",
        ["high purine", "organ meats", "shellfish", "anchovies", "sardines", "beer", "wine"],
        ["low purine", "dairy", "whole grains", "vegetables", "cherries", "water"],
        Severity.MEDIUM,
        ConditionCategory.INFLAMMATORY,
    ),
    _condition(
        "weight loss",
        "Weight Management",
        ["high calorie", "fried foods", "sugary drinks", "processed snacks", "refined carbs"],
        ["low calorie", "high fiber", "lean proteins", "vegetables", "portion control"],
        Severity.MEDIUM,
        ConditionCategory.METABOLIC,
    ),
    _condition(
        "high cholesterol",
        "High Cholesterol",
        ["saturated fat", "trans fat", "fried foods", "full-fat dairy", "processed meats"],
        ["omega-3", "fiber-rich", "plant sterols", "lean proteins", "nuts", "olive oil"],
        Severity.HIGH,
        ConditionCategory.CARDIOVASCULAR,
    ),
    _condition(
        "acid reflux",
        "Acid Reflux / GERD",
        ["spicy foods", "citrus fruits", "tomatoes", "caffeine", "alcohol", "mint"],
        ["alkaline foods", "lean proteins", "non-citrus fruits", "vegetables", "whole grains"],
        Severity.MEDIUM,
        ConditionCategory.DIGESTIVE,
    ),
    _condition(
        "ibs",
        "Irritable Bowel Syndrome",
        # Mixed-case entries never match the lowercased search text
        ["high FODMAP", "beans", "onions", "garlic", "wheat", "dairy"],
        ["low FODMAP", "rice", "quinoa", "lean proteins", "carrots", "spinach"],
        Severity.MEDIUM,
        ConditionCategory.DIGESTIVE,
    ),
)

HEALTH_CONDITIONS: Mapping[str, HealthCondition] = MappingProxyType(
    {condition.key: condition for condition in _CONDITIONS}
)

# Alternate phrases per condition, scanned after direct key matches
CONDITION_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "uric acid": ("gout", "uric", "purine"),
    "weight loss": ("lose weight", "losing weight", "diet", "overweight"),
    "diabetes": ("diabetic", "blood sugar", "glucose"),
    "high cholesterol": ("cholesterol",),
    "acid reflux": ("gerd", "heartburn", "reflux"),
    "ibs": ("irritable bowel", "bowel syndrome"),
    "high blood pressure": ("hypertension", "blood pressure"),
})


def get_condition(key: str) -> Optional[HealthCondition]:
    """Look up a condition by its canonical key.

    Args:
        key: Condition key (e.g., "diabetes")

    Returns:
        HealthCondition if the key is known, None otherwise
    """
    return HEALTH_CONDITIONS.get(key)
