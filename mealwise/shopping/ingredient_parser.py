"""Ingredient parser for extracting amounts, units, and names."""
import logging
import math
import re
from typing import Any, Mapping, Optional, Tuple, Union

from mealwise.data_layer.models import ParsedIngredient, RecipeIngredient

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT = "1"
DEFAULT_UNIT = "item"
DEFAULT_QUANTITY = 1.0
UNKNOWN_INGREDIENT = "Unknown ingredient"

# Leading amount: mixed number, simple fraction, decimal or integer
_AMOUNT_PATTERN = re.compile(
    r"^(?P<amount>\d+\s+\d+/\d+|\d+/\d+|\d*\.\d+|\d+)\s*(?P<rest>.*)$"
)
_NUMBER_PREFIX = re.compile(r"^\d*\.?\d+")
_MIXED_NUMBER = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION = re.compile(r"^(\d+)/(\d+)$")


class IngredientParser:
    """Parser for recipe ingredient entries into ParsedIngredient objects."""

    # Words recognized as a unit when they precede the ingredient name
    KNOWN_UNITS = frozenset([
        "g", "gram", "grams", "kg", "kilogram", "kilograms",
        "mg", "ml", "l", "liter", "liters", "litre", "litres",
        "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
        "cup", "cups", "tsp", "teaspoon", "teaspoons",
        "tbsp", "tablespoon", "tablespoons", "pint", "pints", "quart", "quarts",
        "clove", "cloves", "can", "cans", "jar", "jars", "bottle", "bottles",
        "package", "packages", "pkg", "bunch", "bunches", "head", "heads",
        "slice", "slices", "piece", "pieces", "stick", "sticks",
        "sprig", "sprigs", "pinch", "dash", "handful", "scoop", "scoops",
        "serving", "servings", "large", "medium", "small",
    ])

    def parse(self, entry: Union[str, RecipeIngredient, Mapping[str, Any], None]) -> ParsedIngredient:
        """Parse an ingredient entry.

        Structured entries keep their unit and amount text; free text goes
        through extract_quantity_and_unit. Nothing here raises: bad amounts
        become quantity 1 and blank names become "Unknown ingredient".

        Args:
            entry: Free-text line ("2 cups flour"), RecipeIngredient, or a
                mapping with name/amount/unit keys

        Returns:
            ParsedIngredient with name, original amount text, unit, quantity
        """
        if isinstance(entry, RecipeIngredient):
            return self.parse_structured(entry.name, entry.amount, entry.unit)
        if isinstance(entry, Mapping):
            return self.parse_structured(entry.get("name"), entry.get("amount"), entry.get("unit"))
        return self.parse_text(entry if isinstance(entry, str) else "")

    def parse_structured(self,
                         name: Optional[str],
                         amount: Optional[Any],
                         unit: Optional[str]) -> ParsedIngredient:
        """Parse an ingredient given as separate name, amount, and unit.

        Args:
            name: Ingredient name
            amount: Amount text or number (e.g., "2", "1/2", 1.5)
            unit: Unit text (e.g., "cups")

        Returns:
            ParsedIngredient; amount defaults to "1" and unit to "item"
        """
        amount_text = str(amount).strip() if amount not in (None, "") else DEFAULT_AMOUNT
        clean_name = (name or "").strip()
        if not clean_name:
            clean_name = UNKNOWN_INGREDIENT

        return ParsedIngredient(
            name=clean_name,
            amount=amount_text,
            unit=(unit or "").strip() or DEFAULT_UNIT,
            quantity=parse_quantity(amount_text),
        )

    def parse_text(self, ingredient_string: str) -> ParsedIngredient:
        """Parse a free-text ingredient line.

        Args:
            ingredient_string: Raw line (e.g., "1 1/2 cups rolled oats")

        Returns:
            ParsedIngredient
        """
        text = (ingredient_string or "").strip()
        if not text:
            logger.debug("Empty ingredient line, using placeholder name")
            return self._fallback(UNKNOWN_INGREDIENT)

        amount, unit, name = self.extract_quantity_and_unit(text)
        if not name:
            logger.debug("Could not split ingredient line %r", text)
            return self._fallback(re.sub(r"\s+", " ", text))

        return ParsedIngredient(
            name=name,
            amount=amount,
            unit=unit,
            quantity=parse_quantity(amount),
        )

    def extract_quantity_and_unit(self, ingredient_string: str) -> Tuple[str, str, str]:
        """Extract amount text, unit, and remaining name from a line.

        Args:
            ingredient_string: Raw ingredient string

        Returns:
            Tuple of (amount: str, unit: str, name: str); name is empty when
            the line holds no ingredient text after the amount
        """
        ingredient_string = ingredient_string.strip()

        amount = DEFAULT_AMOUNT
        rest = ingredient_string
        match = _AMOUNT_PATTERN.match(ingredient_string)
        if match:
            amount = re.sub(r"\s+", " ", match.group("amount"))
            rest = match.group("rest")

        unit = DEFAULT_UNIT
        words = rest.split(None, 1)
        if len(words) == 2 and self._is_unit(words[0]):
            unit = words[0].rstrip(".")
            rest = words[1]

        # "2 cups of flour" names the flour, not "of flour"
        name = re.sub(r"^of\s+", "", rest.strip(), flags=re.IGNORECASE)
        name = re.sub(r"\s+", " ", name)
        return (amount, unit, name)

    def _is_unit(self, word: str) -> bool:
        return word.lower().rstrip(".") in self.KNOWN_UNITS

    @staticmethod
    def _fallback(name: str) -> ParsedIngredient:
        return ParsedIngredient(
            name=name,
            amount=DEFAULT_AMOUNT,
            unit=DEFAULT_UNIT,
            quantity=DEFAULT_QUANTITY,
        )


def parse_quantity(amount: Any) -> float:
    """Convert amount text to a number.

    Accepts integers, decimals, simple fractions ("1/2") and mixed numbers
    ("1 1/2"); otherwise uses the leading number ("2-3" gives 2). Anything
    unparsable, zero, too large to represent, or absent gives 1.

    Args:
        amount: Amount text or number

    Returns:
        Parsed quantity, always finite and positive
    """
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        return _usable(amount)

    text = str(amount or "").strip()

    try:
        mixed = _MIXED_NUMBER.match(text)
        if mixed:
            whole, numerator, denominator = (int(g) for g in mixed.groups())
            if denominator:
                return _usable(whole + numerator / denominator)
            return _usable(whole)

        fraction = _FRACTION.match(text)
        if fraction:
            numerator, denominator = (int(g) for g in fraction.groups())
            if denominator:
                return _usable(numerator / denominator)
            return DEFAULT_QUANTITY

        prefix = _NUMBER_PREFIX.match(text)
        if prefix:
            return _usable(float(prefix.group(0)))
    except (OverflowError, ValueError):
        logger.debug("Amount %r is out of range, using %s", text[:20], DEFAULT_QUANTITY)
    return DEFAULT_QUANTITY


def _usable(value: Union[int, float]) -> float:
    """Return value as a float if it is finite and positive, else the default."""
    try:
        value = float(value)
    except (OverflowError, ValueError):
        return DEFAULT_QUANTITY
    if math.isfinite(value) and value > 0:
        return value
    return DEFAULT_QUANTITY
