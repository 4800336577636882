"""Output formatting for shopping lists and recommendations."""

from mealwise.output.formatters import (
    format_quantity,
    format_shopping_list_text,
    format_shopping_list_json,
    format_recommendations_json,
    format_recommendations_markdown,
    to_json_string,
)

__all__ = [
    "format_quantity",
    "format_shopping_list_text",
    "format_shopping_list_json",
    "format_recommendations_json",
    "format_recommendations_markdown",
    "to_json_string",
]
