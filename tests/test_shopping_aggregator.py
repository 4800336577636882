"""Tests for shopping list aggregation."""
import itertools

import pytest

from mealwise.data_layer.category_lexicon import get_category
from mealwise.data_layer.models import Recipe, RecipeIngredient
from mealwise.shopping.aggregator import (
    ITEM_ID_LENGTH,
    ShoppingListAggregator,
    create_custom_item,
    generate_item_id,
    generate_shopping_list,
)
from mealwise.shopping.ingredient_parser import IngredientParser


def counter_ids():
    counter = itertools.count(1)
    return lambda: f"item-{next(counter)}"


def make_recipe(title, ingredients):
    return Recipe(id=title.lower().replace(" ", "-"), title=title, ingredients=ingredients)


class TestShoppingListAggregator:
    """Tests for ShoppingListAggregator.aggregate_recipes."""

    @pytest.fixture
    def aggregator(self):
        return ShoppingListAggregator(id_factory=counter_ids())

    def test_merges_case_insensitive_names(self, aggregator):
        recipe_a = make_recipe("Pancakes", [RecipeIngredient(name="flour", amount="2", unit="cups")])
        recipe_b = make_recipe("Waffles", [RecipeIngredient(name="Flour", amount="2", unit="cups")])

        items = aggregator.aggregate_recipes([recipe_a, recipe_b])

        assert len(items) == 1
        item = items[0]
        assert item.ingredient == "flour"
        assert item.quantity == 4.0
        assert item.unit == "cups"
        assert item.recipes == ["Pancakes", "Waffles"]
        assert item.category.id == "pantry"
        assert item.checked is False
        assert item.is_custom is False

    def test_recipe_attributed_once(self, aggregator):
        recipe = make_recipe("Soup", ["1 tsp salt", "salt", "2 tsp Salt "])
        items = aggregator.aggregate_recipes([recipe])

        assert len(items) == 1
        assert items[0].recipes == ["Soup"]
        assert items[0].quantity == 4.0

    def test_quantity_conservation_across_entry_forms(self, aggregator):
        recipes = [
            make_recipe("Cookies", ["1/2 cup sugar", RecipeIngredient(name="butter", amount="1", unit="cup")]),
            make_recipe("Cake", [RecipeIngredient(name="Sugar ", amount="1", unit="cup")]),
            make_recipe("Frosting", [{"name": "sugar", "amount": "2", "unit": "cups"}]),
        ]
        items = aggregator.aggregate_recipes(recipes)
        by_key = {item.ingredient.lower().strip(): item for item in items}

        assert by_key["sugar"].quantity == 3.5
        assert by_key["sugar"].recipes == ["Cookies", "Cake", "Frosting"]
        assert by_key["butter"].quantity == 1.0

    def test_first_seen_fields_kept(self, aggregator):
        recipes = [
            make_recipe("A", [RecipeIngredient(name="Flour", amount="2", unit="cups")]),
            make_recipe("B", [RecipeIngredient(name="flour", amount="100", unit="g")]),
        ]
        item = aggregator.aggregate_recipes(recipes)[0]
        assert item.ingredient == "Flour"
        assert item.unit == "cups"
        assert item.amount == "2"
        assert item.quantity == 102.0

    def test_similar_names_do_not_merge(self, aggregator):
        recipe = make_recipe("Stir Fry", ["garlic", "3 cloves garlic", "garlic cloves"])
        items = aggregator.aggregate_recipes([recipe])
        assert sorted(item.ingredient for item in items) == ["garlic", "garlic cloves"]

    def test_sorted_by_category_then_name(self, aggregator):
        recipe = make_recipe("Dinner", ["salt", "chicken", "apple", "lemon", "Basil"])
        items = aggregator.aggregate_recipes([recipe])
        assert [item.ingredient for item in items] == ["Basil", "lemon", "chicken", "salt", "apple"]

    def test_ids_come_from_factory(self, aggregator):
        recipe = make_recipe("Dinner", ["salt", "pepper", "salt"])
        items = aggregator.aggregate_recipes([recipe])
        assert {item.id for item in items} == {"item-1", "item-2"}

    def test_empty_recipe_list(self, aggregator):
        assert aggregator.aggregate_recipes([]) == []

    def test_recipe_without_ingredients(self, aggregator):
        assert aggregator.aggregate_recipes([make_recipe("Air", [])]) == []

    def test_inputs_not_mutated(self, aggregator):
        entry = RecipeIngredient(name=" Flour ", amount="2", unit="cups")
        recipe = make_recipe("Bread", [entry, "1 cup flour"])
        aggregator.aggregate_recipes([recipe])
        assert entry.name == " Flour "
        assert recipe.ingredients == [entry, "1 cup flour"]


class TestCustomItems:
    """Tests for user-added items."""

    def test_create_custom_item(self):
        aggregator = ShoppingListAggregator(id_factory=counter_ids())
        item = aggregator.create_custom_item("3 avocados", notes="ripe")

        assert item.id == "item-1"
        assert item.ingredient == "avocados"
        assert item.quantity == 3.0
        assert item.unit == "item"
        assert item.category.id == "produce"
        assert item.recipes == []
        assert item.is_custom is True
        assert item.checked is False
        assert item.notes == "ripe"

    def test_category_override(self):
        item = create_custom_item("2 bags peas", category=get_category("frozen"))
        assert item.category.id == "frozen"

    def test_module_helper_keeps_notes(self):
        item = create_custom_item("1 bag ice", notes="for the cooler", id_factory=counter_ids())
        assert item.notes == "for the cooler"
        assert item.id == "item-1"
        assert item.is_custom is True

    def test_uncategorized_custom_item(self):
        item = create_custom_item("paper towels")
        assert item.category.id == "other"
        assert item.ingredient == "paper towels"


class TestItemIds:
    """Tests for generated item ids."""

    def test_generate_item_id_format(self):
        item_id = generate_item_id()
        assert len(item_id) == ITEM_ID_LENGTH
        assert item_id.isalnum()
        assert item_id == item_id.lower()

    def test_default_ids_unique(self):
        recipe = make_recipe("Salad", ["lettuce", "tomato", "cucumber", "feta", "olive oil"])
        items = generate_shopping_list([recipe])
        assert len({item.id for item in items}) == 5

    def test_generate_shopping_list_accepts_parser(self):
        items = generate_shopping_list(
            [make_recipe("Toast", ["2 slices bread"])],
            parser=IngredientParser(),
            id_factory=counter_ids(),
        )
        assert items[0].id == "item-1"
        assert items[0].unit == "slices"
        assert items[0].category.id == "bakery"
