"""Formatters for shopping lists and recipe recommendations (text, JSON, Markdown)."""

import json
import math
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from mealwise.data_layer.condition_lexicon import HEALTH_CONDITIONS
from mealwise.data_layer.models import (
    HealthScore,
    ScoredRecipe,
    ShoppingCategory,
    ShoppingListItem,
)
from mealwise.shopping.sections import (
    group_items_by_category,
    pending_items,
    summarize_items,
)

HEAVY_RULE = "═" * 63


def format_quantity(quantity: float) -> str:
    """Format a quantity without a trailing ".0" (e.g., 4.0 -> "4", 1.25 -> "1.25")."""
    if not math.isfinite(quantity):
        return str(quantity)
    if quantity == int(quantity):
        return str(int(quantity))
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_item_line(item: ShoppingListItem) -> str:
    """Format an item as "quantity unit ingredient" (e.g., "4 cups flour")."""
    return f"{format_quantity(item.quantity)} {item.unit} {item.ingredient}"


def format_shopping_list_text(items: List[ShoppingListItem],
                              generated_on: Optional[date] = None) -> str:
    """Render a shopping list as a plain-text export document.

    Pending items are grouped by category in category order, each with the
    recipes that need it. Checked items are listed separately, followed by
    a progress summary.

    Args:
        items: Shopping list items
        generated_on: Date printed in the header (default: today)

    Returns:
        Export document as a string
    """
    generated_on = generated_on or date.today()
    pending = pending_items(items)
    completed = [item for item in items if item.checked]
    summary = summarize_items(items)
    sections = group_items_by_category(pending)

    lines = [
        "SHOPPING LIST",
        f"Generated on {generated_on.isoformat()}",
        f"{len(pending)} items to buy • {len(completed)} completed",
        "",
    ]

    if sections:
        lines.append("ITEMS TO BUY (by category):")
        lines.append(HEAVY_RULE)
        lines.append("")
        for section_index, section in enumerate(sections):
            lines.append(f"{section.category.icon} {section.category.name.upper()}")
            lines.append("─" * (len(section.category.name) + 2))
            for index, item in enumerate(section.items, 1):
                line = f"  {index}. {format_item_line(item)}"
                if item.notes:
                    line += f" ({item.notes})"
                lines.append(line)
                if item.recipes:
                    lines.append(f"     For: {', '.join(item.recipes)}")
            if section_index < len(sections) - 1:
                lines.append("")

    if completed:
        lines.append("")
        lines.append("")
        lines.append("COMPLETED ITEMS:")
        lines.append(HEAVY_RULE)
        for item in completed:
            lines.append(f"  ✓ {format_item_line(item)}")

    lines.append("")
    lines.append("")
    lines.append("📊 SUMMARY:")
    lines.append(f"Total Items: {summary.total}")
    lines.append(f"Remaining: {summary.remaining}")
    lines.append(f"Completed: {summary.completed}")
    lines.append(f"Progress: {summary.progress}%")

    return "\n".join(lines)


def _category_json(category: ShoppingCategory) -> Dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "icon": category.icon,
        "order": category.order,
    }


def format_item_json(item: ShoppingListItem) -> Dict[str, Any]:
    """Format one shopping list item as a JSON-ready dict."""
    return {
        "id": item.id,
        "ingredient": item.ingredient,
        "amount": item.amount,
        "unit": item.unit,
        "quantity": item.quantity,
        "category": item.category.id,
        "recipes": list(item.recipes),
        "checked": item.checked,
        "is_custom": item.is_custom,
        "notes": item.notes,
        "display": format_item_line(item),
    }


def format_shopping_list_json(items: List[ShoppingListItem]) -> Dict[str, Any]:
    """Format a shopping list as sections for API/JSON output.

    Args:
        items: Shopping list items

    Returns:
        Dictionary with ordered sections and a progress summary
    """
    summary = summarize_items(items)
    return {
        "sections": [
            {
                "category": _category_json(section.category),
                "items": [format_item_json(item) for item in section.items],
            }
            for section in group_items_by_category(items)
        ],
        "summary": {
            "total": summary.total,
            "completed": summary.completed,
            "remaining": summary.remaining,
            "progress": summary.progress,
        },
    }


def format_health_score_json(score: HealthScore) -> Dict[str, Any]:
    """Format a HealthScore as a JSON-ready dict."""
    return {
        "overall": score.overall,
        "cardiovascular": score.cardiovascular,
        "metabolic": score.metabolic,
        "inflammatory": score.inflammatory,
        "weight_management": score.weight_management,
        "details": list(score.details),
    }


def format_recommendations_json(scored: Sequence[ScoredRecipe],
                                conditions: Sequence[str],
                                advice: Sequence[str]) -> Dict[str, Any]:
    """Format ranked recipes, detected conditions, and advice as a dict."""
    return {
        "conditions": [
            {"key": key, "name": HEALTH_CONDITIONS[key].name}
            for key in conditions
            if key in HEALTH_CONDITIONS
        ],
        "advice": list(advice),
        "recipes": [
            {
                "id": entry.recipe.id,
                "title": entry.recipe.title,
                "health_score": format_health_score_json(entry.health_score),
            }
            for entry in scored
        ],
    }


def format_recommendations_markdown(scored: Sequence[ScoredRecipe],
                                    conditions: Sequence[str],
                                    advice: Sequence[str]) -> str:
    """Format ranked recipes as a Markdown report.

    Args:
        scored: Ranked recipes with scores
        conditions: Detected condition keys
        advice: Advice sentences

    Returns:
        Markdown string
    """
    lines = ["# Recipe Recommendations\n"]

    if conditions:
        names = [HEALTH_CONDITIONS[key].name for key in conditions if key in HEALTH_CONDITIONS]
        lines.append(f"**Health considerations:** {', '.join(names)}\n")
    else:
        lines.append("**Health considerations:** none detected\n")

    if advice:
        lines.append("## Advice\n")
        for sentence in advice:
            lines.append(f"- {sentence}")
        lines.append("")

    if not scored:
        lines.append("_No recipes matched the health criteria._")
        lines.append("")
        return "\n".join(lines)

    for rank, entry in enumerate(scored, 1):
        score = entry.health_score
        lines.append(f"## {rank}. {entry.recipe.title}")
        lines.append(f"**Overall:** {score.overall}/100")
        lines.append(
            f"**Cardiovascular:** {score.cardiovascular} | "
            f"**Metabolic:** {score.metabolic} | "
            f"**Inflammatory:** {score.inflammatory} | "
            f"**Weight Management:** {score.weight_management}"
        )
        for detail in score.details:
            lines.append(f"- {detail}")
        lines.append("")

    return "\n".join(lines)


def to_json_string(data: Dict[str, Any], indent: int = 2) -> str:
    """Serialize formatter output as a JSON string."""
    return json.dumps(data, indent=indent, ensure_ascii=False)
