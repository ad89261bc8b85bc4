"""
Tests for recipe and filter models.
"""

import pytest
from pydantic import ValidationError

from recipe_dashboard.errors import MissingNutrientError
from recipe_dashboard.models import CalorieRange, FilterSpec, Recipe


@pytest.fixture
def api_payload():
    """One entry of a Spoonacular complexSearch `results` array."""
    return {
        "id": 716429,
        "title": "Pasta with Garlic, Scallions, Cauliflower & Breadcrumbs",
        "image": "https://img.spoonacular.com/recipes/716429-312x231.jpg",
        "imageType": "jpg",
        "readyInMinutes": 45,
        "servings": 2,
        "diets": ["lacto ovo vegetarian"],
        "cuisines": [],
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 584.46, "unit": "kcal", "percentOfDailyNeeds": 29.22},
                {"name": "Fat", "amount": 19.8, "unit": "g", "percentOfDailyNeeds": 30.46},
            ]
        },
    }


class TestRecipeFromApi:
    """Test Recipe.from_api."""

    def test_maps_fields(self, api_payload):
        recipe = Recipe.from_api(api_payload)
        assert recipe.id == 716429
        assert recipe.title.startswith("Pasta with Garlic")
        assert recipe.image == api_payload["image"]
        assert recipe.ready_in_minutes == 45
        assert recipe.diets == ("lacto ovo vegetarian",)
        assert recipe.cuisines == ()
        assert recipe.calories == pytest.approx(584.46)

    def test_missing_optional_fields_default(self):
        recipe = Recipe.from_api({"id": 1, "title": "Toast", "readyInMinutes": 5})
        assert recipe.image is None
        assert recipe.ready_in_minutes == 5
        assert recipe.diets == ()
        assert recipe.nutrients == ()

    @pytest.mark.parametrize("ready_in_minutes", [None, "soon"])
    def test_unusable_cooking_time_is_invalid(self, api_payload, ready_in_minutes):
        """A recipe without a cooking time cannot be bucketed or averaged."""
        api_payload["readyInMinutes"] = ready_in_minutes
        with pytest.raises(ValidationError):
            Recipe.from_api(api_payload)

    def test_missing_cooking_time_is_invalid(self, api_payload):
        del api_payload["readyInMinutes"]
        with pytest.raises(ValidationError):
            Recipe.from_api(api_payload)

    def test_missing_id_is_invalid(self, api_payload):
        del api_payload["id"]
        with pytest.raises(ValidationError):
            Recipe.from_api(api_payload)

    def test_negative_cooking_time_is_invalid(self, api_payload):
        api_payload["readyInMinutes"] = -5
        with pytest.raises(ValidationError):
            Recipe.from_api(api_payload)

    def test_accepts_api_alias(self, api_payload):
        recipe = Recipe.model_validate({"id": 2, "title": "Soup", "readyInMinutes": 12})
        assert recipe.ready_in_minutes == 12


class TestRecipeCalories:
    """Test calorie extraction."""

    def test_missing_calories_raises(self, api_payload):
        api_payload["nutrition"]["nutrients"] = [{"name": "Fat", "amount": 10, "unit": "g"}]
        recipe = Recipe.from_api(api_payload)
        with pytest.raises(MissingNutrientError) as exc_info:
            recipe.calories
        assert exc_info.value.recipe_id == 716429
        assert exc_info.value.nutrient == "Calories"
        assert "716429" in str(exc_info.value)

    def test_nutrient_name_match_is_exact(self, api_payload):
        api_payload["nutrition"]["nutrients"] = [{"name": "calories", "amount": 100, "unit": "kcal"}]
        with pytest.raises(MissingNutrientError):
            Recipe.from_api(api_payload).calories

    def test_recipe_is_frozen_and_hashable(self, api_payload):
        recipe = Recipe.from_api(api_payload)
        with pytest.raises(ValidationError):
            recipe.title = "Changed"
        assert hash(recipe) == hash(Recipe.from_api(api_payload))


class TestFilterSpec:
    """Test FilterSpec defaults."""

    def test_defaults(self):
        spec = FilterSpec()
        assert spec.search_term == ""
        assert spec.diet is None
        assert spec.cuisine is None
        assert spec.calorie_range == CalorieRange(min=0, max=1000)
        assert spec.cooking_time_bucket is None

    def test_calorie_range_contains_is_inclusive(self):
        calorie_range = CalorieRange(min=100, max=200)
        assert calorie_range.contains(100)
        assert calorie_range.contains(200)
        assert not calorie_range.contains(99.9)
