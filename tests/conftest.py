"""
Shared fixtures for recipe dashboard tests.

Provides a recipe factory so each test can build exactly the records it needs.
"""

from typing import Optional, Sequence

import pytest

from recipe_dashboard.models import Nutrient, Recipe


def build_recipe(
    id: int = 1,
    title: str = "Recipe",
    calories: Optional[float] = 300.0,
    ready_in_minutes: int = 20,
    diets: Sequence[str] = (),
    cuisines: Sequence[str] = (),
) -> Recipe:
    """Build a Recipe; calories=None leaves out the "Calories" nutrient entirely."""
    nutrients = [Nutrient(name="Protein", amount=12.0, unit="g")]
    if calories is not None:
        nutrients.insert(0, Nutrient(name="Calories", amount=calories, unit="kcal"))
    return Recipe(
        id=id,
        title=title,
        image=f"https://img.spoonacular.com/recipes/{id}-312x231.jpg",
        ready_in_minutes=ready_in_minutes,
        diets=tuple(diets),
        cuisines=tuple(cuisines),
        nutrients=tuple(nutrients),
    )


@pytest.fixture
def make_recipe():
    """Factory fixture returning build_recipe."""
    return build_recipe


@pytest.fixture
def sample_recipes():
    """A small, varied recipe set."""
    return [
        build_recipe(id=1, title="Creamy Pasta Primavera", calories=620.0, ready_in_minutes=25,
                     diets=["vegetarian"], cuisines=["Italian"]),
        build_recipe(id=2, title="Green Salad", calories=150.0, ready_in_minutes=10,
                     diets=["gluten free", "vegan", "vegetarian"], cuisines=[]),
        build_recipe(id=3, title="Chicken Tacos", calories=480.0, ready_in_minutes=30,
                     diets=["gluten free"], cuisines=["Mexican"]),
        build_recipe(id=4, title="Beef Stew", calories=850.0, ready_in_minutes=120,
                     diets=[], cuisines=["American"]),
        build_recipe(id=5, title="Keto Salmon Bowl", calories=540.0, ready_in_minutes=15,
                     diets=["ketogenic", "gluten free"], cuisines=["Asian"]),
    ]
