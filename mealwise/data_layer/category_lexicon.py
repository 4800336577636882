"""Shopping categories and the keyword table used to classify ingredients.

INGREDIENT_CATEGORY_KEYWORDS is scanned front to back and the first
keyword contained in an ingredient name wins, so the order of entries is
part of the classification behavior ("bell pepper" is produce only because
it comes before "pepper").
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from mealwise.data_layer.exceptions import UnknownCategoryError
from mealwise.data_layer.models import ShoppingCategory

SHOPPING_CATEGORIES: Tuple[ShoppingCategory, ...] = (
    ShoppingCategory(id="produce", name="Produce", icon="🥬", order=1),
    ShoppingCategory(id="meat", name="Meat & Seafood", icon="🥩", order=2),
    ShoppingCategory(id="dairy", name="Dairy & Eggs", icon="🥛", order=3),
    ShoppingCategory(id="pantry", name="Pantry", icon="🥫", order=4),
    ShoppingCategory(id="bakery", name="Bakery", icon="🍞", order=5),
    ShoppingCategory(id="frozen", name="Frozen", icon="🧊", order=6),
    ShoppingCategory(id="spices", name="Spices & Condiments", icon="🧂", order=7),
    ShoppingCategory(id="beverages", name="Beverages", icon="🥤", order=8),
    ShoppingCategory(id="other", name="Other", icon="🛒", order=9),
)

CATEGORIES_BY_ID: Mapping[str, ShoppingCategory] = MappingProxyType(
    {category.id: category for category in SHOPPING_CATEGORIES}
)

OTHER_CATEGORY = CATEGORIES_BY_ID["other"]


def _keywords(category_id: str, *keywords: str) -> Tuple[Tuple[str, str], ...]:
    return tuple((keyword, category_id) for keyword in keywords)


# (keyword, category id) pairs in match priority order
INGREDIENT_CATEGORY_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    _keywords(
        "produce",
        "tomato", "cucumber", "onion", "garlic", "lemon", "lime", "avocado",
        "lettuce", "spinach", "carrot", "bell pepper", "jalapeño", "cilantro",
        "basil", "parsley", "ginger", "mushroom", "potato", "sweet potato",
    )
    + _keywords(
        "meat",
        "chicken", "beef", "pork", "salmon", "fish", "turkey", "lamb",
        "shrimp", "crab", "tofu",
    )
    + _keywords(
        "dairy",
        "milk", "cheese", "yogurt", "butter", "cream", "egg", "mozzarella",
        "parmesan", "cheddar", "gruyère", "feta",
    )
    + _keywords(
        "pantry",
        "rice", "quinoa", "pasta", "flour", "sugar", "beans", "lentils",
        "chickpeas", "nuts", "almonds", "walnuts", "pecans", "pine nuts",
        "oats", "barley", "cornmeal",
    )
    + _keywords(
        "bakery",
        "bread", "bagel", "tortilla", "pita", "croissant", "buns", "rolls",
    )
    + _keywords(
        "spices",
        "salt", "pepper", "paprika", "cumin", "oregano", "thyme", "rosemary",
        "sage", "cinnamon", "nutmeg", "vanilla", "soy sauce", "fish sauce",
        "oyster sauce", "vinegar", "olive oil", "vegetable oil", "sesame oil",
        "tahini", "mustard", "ketchup", "mayonnaise", "hot sauce",
    )
    + _keywords(
        "beverages",
        "water", "juice", "soda", "tea", "coffee", "wine", "beer", "broth",
        "stock",
    )
)


def get_category(category_id: str) -> ShoppingCategory:
    """Return the registered category with the given id.

    Args:
        category_id: Category id (e.g., "produce")

    Returns:
        The matching ShoppingCategory

    Raises:
        UnknownCategoryError: If the id is not registered
    """
    try:
        return CATEGORIES_BY_ID[category_id]
    except KeyError:
        raise UnknownCategoryError(category_id) from None
