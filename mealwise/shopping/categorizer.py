"""Ingredient categorization for shopping list sections."""
from typing import Sequence, Tuple

from mealwise.data_layer.category_lexicon import (
    CATEGORIES_BY_ID,
    INGREDIENT_CATEGORY_KEYWORDS,
    OTHER_CATEGORY,
)
from mealwise.data_layer.models import ShoppingCategory


def categorize_ingredient(
    name: str,
    keywords: Sequence[Tuple[str, str]] = INGREDIENT_CATEGORY_KEYWORDS,
) -> ShoppingCategory:
    """Find the store section for an ingredient name.

    Args:
        name: Ingredient name (any casing)
        keywords: Ordered (keyword, category id) pairs; first match wins

    Returns:
        The matching ShoppingCategory, or the "other" category
    """
    lower_name = (name or "").lower()
    for keyword, category_id in keywords:
        if keyword in lower_name:
            return CATEGORIES_BY_ID.get(category_id, OTHER_CATEGORY)
    return OTHER_CATEGORY
