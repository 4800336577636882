"""Shopping list aggregation across recipes."""
import logging
import secrets
import string
from typing import Callable, Dict, Iterable, List, Optional

from mealwise.data_layer.models import Recipe, ShoppingCategory, ShoppingListItem
from mealwise.shopping.categorizer import categorize_ingredient
from mealwise.shopping.ingredient_parser import IngredientParser

logger = logging.getLogger(__name__)

ITEM_ID_LENGTH = 9
_ID_ALPHABET = string.ascii_lowercase + string.digits

IdFactory = Callable[[], str]


def generate_item_id() -> str:
    """Return a random 9-character lowercase alphanumeric item id."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ITEM_ID_LENGTH))


def normalize_key(name: str) -> str:
    """Return the key used to detect duplicate ingredients."""
    return name.lower().strip()


def sort_items(items: Iterable[ShoppingListItem]) -> List[ShoppingListItem]:
    """Sort items by category order, then by ingredient name."""
    return sorted(items, key=lambda item: (item.category.order, item.ingredient.lower()))


class ShoppingListAggregator:
    """Aggregator for combining recipe ingredients into a shopping list."""

    def __init__(self,
                 parser: Optional[IngredientParser] = None,
                 id_factory: Optional[IdFactory] = None):
        """Initialize aggregator.

        Args:
            parser: IngredientParser instance
            id_factory: Callable returning a fresh item id
        """
        self.parser = parser or IngredientParser()
        self.id_factory = id_factory or generate_item_id

    def aggregate_recipes(self, recipes: Iterable[Recipe]) -> List[ShoppingListItem]:
        """Merge the ingredients of several recipes into one list.

        Entries whose names match after lowercasing and trimming become one
        item: quantities are summed and each recipe title is recorded once.
        The first occurrence fixes the item's casing, amount text, and unit.

        Args:
            recipes: Recipes to shop for

        Returns:
            Items sorted by category order, then ingredient name
        """
        items: Dict[str, ShoppingListItem] = {}

        for recipe in recipes:
            for entry in recipe.ingredients:
                parsed = self.parser.parse(entry)
                key = normalize_key(parsed.name)

                existing = items.get(key)
                if existing is not None:
                    existing.quantity += parsed.quantity
                    if recipe.title not in existing.recipes:
                        existing.recipes.append(recipe.title)
                    logger.debug("Merged %r into %r", parsed.name, existing.ingredient)
                    continue

                items[key] = ShoppingListItem(
                    id=self.id_factory(),
                    ingredient=parsed.name,
                    amount=parsed.amount,
                    unit=parsed.unit,
                    quantity=parsed.quantity,
                    category=categorize_ingredient(parsed.name),
                    recipes=[recipe.title],
                    checked=False,
                    is_custom=False,
                )

        return sort_items(items.values())

    def create_custom_item(self,
                           ingredient: str,
                           category: Optional[ShoppingCategory] = None,
                           notes: Optional[str] = None) -> ShoppingListItem:
        """Create a user-added shopping list item.

        Args:
            ingredient: Free-text entry (e.g., "2 lbs apples")
            category: Optional category override
            notes: Optional note shown next to the item

        Returns:
            ShoppingListItem with is_custom=True and no recipe attribution
        """
        parsed = self.parser.parse_text(ingredient)
        return ShoppingListItem(
            id=self.id_factory(),
            ingredient=parsed.name,
            amount=parsed.amount,
            unit=parsed.unit,
            quantity=parsed.quantity,
            category=category or categorize_ingredient(parsed.name),
            recipes=[],
            checked=False,
            is_custom=True,
            notes=notes,
        )


def generate_shopping_list(recipes: Iterable[Recipe],
                           parser: Optional[IngredientParser] = None,
                           id_factory: Optional[IdFactory] = None) -> List[ShoppingListItem]:
    """Build a deduplicated, sorted shopping list for recipes."""
    return ShoppingListAggregator(parser, id_factory).aggregate_recipes(recipes)


def create_custom_item(ingredient: str,
                       category: Optional[ShoppingCategory] = None,
                       notes: Optional[str] = None,
                       id_factory: Optional[IdFactory] = None) -> ShoppingListItem:
    """Build a single user-added item."""
    return ShoppingListAggregator(id_factory=id_factory).create_custom_item(
        ingredient, category, notes
    )
