#!/usr/bin/env python3
"""Command-line interface for health-aware recommendations and shopping lists."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mealwise.app_logging import configure_logging
from mealwise.data_layer.category_lexicon import get_category
from mealwise.data_layer.condition_lexicon import HEALTH_CONDITIONS
from mealwise.data_layer.exceptions import (
    RecipeDataError,
    RecipeNotFoundError,
    SettingsError,
    UnknownCategoryError,
)
from mealwise.data_layer.recipe_db import RecipeDB
from mealwise.data_layer.settings import Settings, SettingsLoader
from mealwise.health.condition_parser import generate_health_advice, parse_conditions
from mealwise.health.recipe_ranker import recommend_recipes
from mealwise.output.formatters import (
    format_recommendations_json,
    format_recommendations_markdown,
    format_shopping_list_json,
    format_shopping_list_text,
    to_json_string,
)
from mealwise.shopping.aggregator import ShoppingListAggregator

logger = logging.getLogger(__name__)

DEFAULT_RECIPES_PATH = "data/recipes/recipes.json"
DEFAULT_CONFIG_PATH = "config/settings.yaml"


def parse_custom_item(spec: str):
    """Split a "--add" value of the form "text" or "text@category_id"."""
    text, _, category_id = spec.partition("@")
    category = get_category(category_id.strip()) if category_id.strip() else None
    return text.strip(), category


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="mealwise",
        description="Rank recipes for health conditions and build shopping lists",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG_PATH})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    recommend = subparsers.add_parser("recommend", help="Rank recipes for health conditions")
    recommend.add_argument(
        "--conditions",
        type=str,
        required=True,
        help='Free-text description, e.g. "I have diabetes and high blood pressure"',
    )
    recommend.add_argument("--recipes", type=str, default=DEFAULT_RECIPES_PATH,
                           help=f"Path to recipes JSON file (default: {DEFAULT_RECIPES_PATH})")
    recommend.add_argument("--min-score", type=int, default=None,
                           help="Drop recipes scoring at or below this (default: from settings)")
    recommend.add_argument("--limit", type=int, default=None,
                           help="Maximum number of recipes (default: from settings)")
    recommend.add_argument("--output", choices=["markdown", "json"], default="markdown",
                           help="Output format: markdown (default) or json")

    shopping = subparsers.add_parser("shopping-list", help="Build a shopping list")
    shopping.add_argument("--recipes", type=str, default=DEFAULT_RECIPES_PATH,
                          help=f"Path to recipes JSON file (default: {DEFAULT_RECIPES_PATH})")
    shopping.add_argument("--recipe-id", action="append", default=[], dest="recipe_ids",
                          help="Recipe id to include (repeatable; default: all recipes)")
    shopping.add_argument("--add", action="append", default=[], dest="custom_items",
                          help='Extra item, optionally with a category: "2 lbs apples@produce"')
    shopping.add_argument("--output", choices=["text", "json"], default="text",
                          help="Output format: text (default) or json")
    shopping.add_argument("--output-file", type=str,
                          help="Optional file path to save output (default: print to stdout)")

    subparsers.add_parser("conditions", help="List the known health conditions")
    return parser


def load_settings(config_path: str) -> Settings:
    """Load settings, falling back to defaults when the file is absent."""
    return SettingsLoader(config_path).load()


def load_recipe_db(recipes_path: str) -> RecipeDB:
    """Open the recipe database, exiting if the file is missing."""
    path = Path(recipes_path)
    if not path.exists():
        print(f"Error: Recipes file not found: {path}", file=sys.stderr)
        sys.exit(1)
    return RecipeDB(str(path))


def run_recommend(args, settings: Settings) -> str:
    """Run the recommend subcommand and return its output."""
    recipe_db = load_recipe_db(args.recipes)
    conditions = parse_conditions(args.conditions)
    if not conditions:
        logger.info("No health conditions detected; ranking on nutrition only")

    min_score = args.min_score if args.min_score is not None else settings.min_overall_score
    limit = args.limit if args.limit is not None else settings.recommendation_limit

    scored = recommend_recipes(
        recipe_db.get_all_recipes(), conditions, min_overall=min_score, limit=limit
    )
    advice = generate_health_advice(conditions)
    logger.info("%d recipes scored above %d", len(scored), min_score)

    if args.output == "json":
        return to_json_string(format_recommendations_json(scored, conditions, advice))
    return format_recommendations_markdown(scored, conditions, advice)


def run_shopping_list(args) -> str:
    """Run the shopping-list subcommand and return its output."""
    recipe_db = load_recipe_db(args.recipes)
    if args.recipe_ids:
        recipes = recipe_db.get_recipes_by_ids(args.recipe_ids)
    else:
        recipes = recipe_db.get_all_recipes()

    aggregator = ShoppingListAggregator()
    items = aggregator.aggregate_recipes(recipes)
    for spec in args.custom_items:
        text, category = parse_custom_item(spec)
        items.append(aggregator.create_custom_item(text, category))
    logger.info("Shopping list has %d items from %d recipes", len(items), len(recipes))

    if args.output == "json":
        return to_json_string(format_shopping_list_json(items))
    return format_shopping_list_text(items)


def run_conditions() -> str:
    """List condition keys with their display names and categories."""
    return "\n".join(
        f"{key}: {condition.name} ({condition.category.value}, {condition.severity.value})"
        for key, condition in HEALTH_CONDITIONS.items()
    )


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings.log_level)

    try:
        if args.command == "recommend":
            output = run_recommend(args, settings)
        elif args.command == "shopping-list":
            output = run_shopping_list(args)
        else:
            output = run_conditions()
    except (RecipeNotFoundError, RecipeDataError, UnknownCategoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    output_file = getattr(args, "output_file", None)
    if output_file:
        Path(output_file).write_text(output, encoding="utf-8")
        print(f"Output saved to {output_file}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
