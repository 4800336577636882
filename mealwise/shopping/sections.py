"""Category sections and progress tracking for shopping lists."""
import dataclasses
from typing import Dict, Iterable, List

from mealwise.data_layer.models import (
    ShoppingCategory,
    ShoppingListItem,
    ShoppingListSection,
    ShoppingListSummary,
)


def group_items_by_category(items: Iterable[ShoppingListItem]) -> List[ShoppingListSection]:
    """Split items into one section per category present.

    Sections follow category order; items keep their input order within a
    section. Categories without items are left out.

    Args:
        items: Shopping list items

    Returns:
        Non-empty sections ordered by category order
    """
    categories: Dict[str, ShoppingCategory] = {}
    grouped: Dict[str, List[ShoppingListItem]] = {}

    for item in items:
        category_id = item.category.id
        if category_id not in grouped:
            categories[category_id] = item.category
            grouped[category_id] = []
        grouped[category_id].append(item)

    ordered_ids = sorted(grouped, key=lambda cid: categories[cid].order)
    return [
        ShoppingListSection(category=categories[cid], items=grouped[cid])
        for cid in ordered_ids
    ]


def pending_items(items: Iterable[ShoppingListItem]) -> List[ShoppingListItem]:
    """Return unchecked items in input order."""
    return [item for item in items if not item.checked]


def summarize_items(items: List[ShoppingListItem]) -> ShoppingListSummary:
    """Count checked and remaining items.

    Args:
        items: Shopping list items

    Returns:
        ShoppingListSummary with a rounded completion percentage
    """
    total = len(items)
    completed = sum(1 for item in items if item.checked)
    progress = round(completed / total * 100) if total else 0
    return ShoppingListSummary(
        total=total,
        completed=completed,
        remaining=total - completed,
        progress=progress,
    )


def toggle_item(items: Iterable[ShoppingListItem], item_id: str) -> List[ShoppingListItem]:
    """Return a copy of the list with one item's checked flag flipped.

    The input items are left untouched. Unknown ids leave the list as is.
    """
    return [
        dataclasses.replace(item, checked=not item.checked) if item.id == item_id else item
        for item in items
    ]
