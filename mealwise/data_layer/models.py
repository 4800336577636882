"""Data models for health scoring and shopping list generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class Severity(Enum):
    """Severity tag of a health condition (carried, not used for weighting)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ConditionCategory(Enum):
    """Body system a health condition belongs to."""

    CARDIOVASCULAR = "cardiovascular"
    METABOLIC = "metabolic"
    DIGESTIVE = "digestive"
    INFLAMMATORY = "inflammatory"
    OTHER = "other"


@dataclass(frozen=True)
class HealthCondition:
    """A canonical health condition with its dietary keyword lists."""

    key: str  # Lexicon key (e.g., "diabetes")
    name: str  # Display name (e.g., "Diabetes")
    restrictions: Tuple[str, ...]  # Keywords to avoid
    recommendations: Tuple[str, ...]  # Keywords to favor
    severity: Severity
    category: ConditionCategory


@dataclass
class RecipeIngredient:
    """Structured ingredient entry as stored on a recipe."""

    name: str
    amount: str = ""  # Original text, e.g. "2" or "1/2"
    unit: str = ""


@dataclass
class NutritionFacts:
    """Authoritative nutrition values stored on a recipe."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    # Micronutrients (cholesterol, iron, vitaminC, ...) keyed as in the source record
    extra: Dict[str, float] = field(default_factory=dict)


# An ingredient is either a free-text line or a structured entry
IngredientEntry = Union[str, RecipeIngredient]


@dataclass
class Recipe:
    """Recipe record consumed read-only by the scoring and shopping pipelines."""

    id: str
    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    dietary_tags: List[str] = field(default_factory=list)
    ingredients: List[IngredientEntry] = field(default_factory=list)
    nutrition: NutritionFacts = field(default_factory=NutritionFacts)
    cuisine: str = ""
    prep_time: int = 0  # Minutes
    cook_time: int = 0  # Minutes
    servings: int = 1
    meal_types: List[str] = field(default_factory=list)

    def all_tags(self) -> List[str]:
        """Return recipe tags followed by dietary tags, lowercased."""
        return [tag.lower() for tag in list(self.tags) + list(self.dietary_tags)]


@dataclass
class NutritionalProfile:
    """Heuristic, scoring-only nutrition estimate for a recipe."""

    protein: float
    carbs: float
    fat: float
    fiber: float
    sodium: float
    sugar: float
    calories: float


@dataclass
class HealthScore:
    """Multi-axis health score, every axis in [0, 100]."""

    overall: int
    cardiovascular: int
    metabolic: int
    inflammatory: int
    weight_management: int
    details: List[str] = field(default_factory=list)  # At most 3 entries


@dataclass
class ScoredRecipe:
    """A recipe annotated with its computed health score."""

    recipe: Recipe
    health_score: HealthScore


@dataclass(frozen=True)
class ShoppingCategory:
    """Store section used to group shopping list items."""

    id: str
    name: str
    icon: str
    order: int


@dataclass
class ParsedIngredient:
    """Normalized ingredient entry produced by the ingredient parser."""

    name: str
    amount: str  # Original amount text, display only
    unit: str
    quantity: float


@dataclass
class ShoppingListItem:
    """One deduplicated line of a shopping list."""

    id: str
    ingredient: str
    amount: str
    unit: str
    quantity: float
    category: ShoppingCategory
    recipes: List[str] = field(default_factory=list)  # Recipe titles, no duplicates
    checked: bool = False
    is_custom: bool = False
    notes: Optional[str] = None


@dataclass
class ShoppingListSection:
    """Items of a shopping list that share one category."""

    category: ShoppingCategory
    items: List[ShoppingListItem]


@dataclass
class ShoppingListSummary:
    """Progress counts for a shopping list."""

    total: int
    completed: int
    remaining: int
    progress: int  # Percentage of checked items, 0-100
