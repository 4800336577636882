"""Tests for data layer components."""
import json

import pytest

from mealwise.data_layer.exceptions import (
    RecipeDataError,
    RecipeNotFoundError,
    SettingsError,
)
from mealwise.data_layer.models import RecipeIngredient
from mealwise.data_layer.recipe_db import RecipeDB
from mealwise.data_layer.settings import LOG_LEVEL_ENV_VAR, Settings, SettingsLoader


class TestRecipeDB:
    """Tests for RecipeDB."""

    def test_load_recipes_from_json(self, recipes_file):
        db = RecipeDB(str(recipes_file))
        recipes = db.get_all_recipes()

        assert [r.id for r in recipes] == ["quinoa-bowl", "club-sandwich", "lemon-chicken"]
        bowl = recipes[0]
        assert bowl.title == "Quinoa Bowl"
        assert bowl.dietary_tags == ["vegetarian", "high-fiber", "low-sodium"]
        assert bowl.ingredients[0] == RecipeIngredient(name="quinoa", amount="1", unit="cup")
        assert bowl.prep_time == 15
        assert bowl.cook_time == 20
        assert bowl.servings == 2
        assert bowl.meal_types == ["lunch"]

    def test_nutrition_fields(self, recipes_file):
        bowl = RecipeDB(str(recipes_file)).get_recipe_by_id("quinoa-bowl")
        assert bowl.nutrition.calories == 420.0
        assert bowl.nutrition.sodium == 280.0
        assert bowl.nutrition.extra == {"iron": 3.5}

    def test_string_ingredients_kept(self, recipes_file):
        sandwich = RecipeDB(str(recipes_file)).get_recipe_by_id("club-sandwich")
        assert sandwich.ingredients == ["3 slices white bread", "4 oz ham", "1 tbsp butter"]
        assert sandwich.nutrition.protein == 0.0

    def test_get_recipe_by_id_missing(self, recipes_file):
        assert RecipeDB(str(recipes_file)).get_recipe_by_id("nope") is None

    def test_get_recipes_by_ids(self, recipes_file):
        db = RecipeDB(str(recipes_file))
        recipes = db.get_recipes_by_ids(["lemon-chicken", "quinoa-bowl"])
        assert [r.id for r in recipes] == ["lemon-chicken", "quinoa-bowl"]

    def test_get_recipes_by_ids_unknown(self, recipes_file):
        db = RecipeDB(str(recipes_file))
        with pytest.raises(RecipeNotFoundError) as exc_info:
            db.get_recipes_by_ids(["quinoa-bowl", "nope"])
        assert exc_info.value.recipe_id == "nope"

    def test_get_all_recipes_returns_copy(self, recipes_file):
        db = RecipeDB(str(recipes_file))
        db.get_all_recipes().clear()
        assert len(db.get_all_recipes()) == 3

    def test_missing_title(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"recipes": [{"id": "x"}]}))
        with pytest.raises(RecipeDataError) as exc_info:
            RecipeDB(str(path))
        assert exc_info.value.index == 0

    def test_bad_ingredient_entry(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"recipes": [{"id": "x", "title": "X", "ingredients": [42]}]}))
        with pytest.raises(RecipeDataError):
            RecipeDB(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RecipeDB(str(tmp_path / "missing.json"))


class TestSettingsLoader:
    """Tests for SettingsLoader."""

    @pytest.fixture(autouse=True)
    def clear_env(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = SettingsLoader(str(tmp_path / "missing.yaml")).load()
        assert settings == Settings()
        assert settings.min_overall_score == 40
        assert settings.recommendation_limit == 5
        assert settings.log_level == "INFO"

    def test_load_values(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "recommendations:\n"
            "  min_overall_score: 60\n"
            "  limit: null\n"
            "logging:\n"
            "  level: debug\n"
        )
        settings = SettingsLoader(str(path)).load()
        assert settings.min_overall_score == 60
        assert settings.recommendation_limit is None
        assert settings.log_level == "DEBUG"

    def test_env_overrides_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
        settings = SettingsLoader(str(tmp_path / "missing.yaml")).load()
        assert settings.log_level == "WARNING"

    def test_out_of_range_score(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("recommendations:\n  min_overall_score: 150\n")
        with pytest.raises(SettingsError, match="between 0 and 100"):
            SettingsLoader(str(path)).load()

    def test_non_numeric_score(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("recommendations:\n  min_overall_score: lots\n")
        with pytest.raises(SettingsError):
            SettingsLoader(str(path)).load()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("recommendations: [unclosed\n")
        with pytest.raises(SettingsError, match="Invalid YAML"):
            SettingsLoader(str(path)).load()

    def test_section_must_be_mapping(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("logging: verbose\n")
        with pytest.raises(SettingsError, match="must be a mapping"):
            SettingsLoader(str(path)).load()

    def test_unknown_log_level(self):
        with pytest.raises(SettingsError, match="Unknown log level"):
            Settings(log_level="chatty")
