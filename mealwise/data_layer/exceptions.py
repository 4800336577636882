"""Custom exceptions for the recipe and settings adapters."""


class RecipeNotFoundError(Exception):
    """Raised when a recipe id is not present in the recipe database."""

    def __init__(self, recipe_id: str):
        """Initialize exception with recipe id.

        Args:
            recipe_id: Id of the recipe that was not found
        """
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found in recipe database")


class RecipeDataError(Exception):
    """Raised when a recipe record in the JSON source is malformed."""

    def __init__(self, index: int, reason: str):
        """Initialize exception with record position and reason.

        Args:
            index: Position of the offending record in the recipes array
            reason: Human-readable description of the problem
        """
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid recipe record at index {index}: {reason}")


class UnknownCategoryError(Exception):
    """Raised when a shopping category id is not in the category registry."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Unknown shopping category '{category_id}'")


class SettingsError(Exception):
    """Raised when the settings file contains invalid values."""
