"""Shopping list generation from recipe ingredients."""

from .ingredient_parser import IngredientParser, parse_quantity
from .categorizer import categorize_ingredient
from .aggregator import (
    ShoppingListAggregator,
    generate_shopping_list,
    create_custom_item,
)
from .sections import (
    group_items_by_category,
    pending_items,
    summarize_items,
    toggle_item,
)

__all__ = [
    "IngredientParser",
    "parse_quantity",
    "categorize_ingredient",
    "ShoppingListAggregator",
    "generate_shopping_list",
    "create_custom_item",
    "group_items_by_category",
    "pending_items",
    "summarize_items",
    "toggle_item",
]
