"""
Recipe and filter models for the recipe dashboard.

This module defines the canonical schemas used throughout the dashboard.
The Spoonacular connector maps each raw `results` entry into a Recipe via
Recipe.from_api(); the Streamlit frontend builds a FilterSpec from its widgets;
the pipeline returns an AggregateResult computed over the filtered recipes.

# NOTE: All models are frozen. A FilterSpec or AggregateResult is a value, never
    a piece of mutable state, so a new instance is built whenever an input changes.

Spoonacular field mapping (complexSearch with addRecipeNutrition=true):
- id, title, image              -> id, title, image
- readyInMinutes                -> ready_in_minutes
- diets, cuisines               -> diets, cuisines (lists become tuples)
- nutrition.nutrients[]         -> nutrients (name, amount, unit)
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from recipe_dashboard.errors import MissingNutrientError

CALORIES_NUTRIENT = "Calories"

DEFAULT_CALORIE_MIN = 0
DEFAULT_CALORIE_MAX = 1000


class Nutrient(BaseModel):
    """One entry of a recipe's nutrient list."""
    name: str = Field(..., description="Nutrient name as reported by the API (e.g. 'Calories')")
    amount: float = Field(..., ge=0, description="Amount per serving")
    unit: Optional[str] = Field(None, description="Unit of the amount (kcal, g, mg, ...)")

    model_config = ConfigDict(frozen=True)


class Recipe(BaseModel):
    """
    Read-only recipe record as sourced from the recipe-search API.

    Calories are not stored as a field: they are derived from the nutrient list
    on access, so a record without a "Calories" entry is still a valid Recipe
    and only fails when calorie-based logic asks for it.
    """
    id: int = Field(..., description="Recipe identifier, unique within one fetch")
    title: str = Field(..., description="Recipe title")
    image: Optional[str] = Field(None, description="URL to the recipe image")
    ready_in_minutes: int = Field(..., ge=0, alias="readyInMinutes", description="Total cooking time in minutes")
    diets: Tuple[str, ...] = Field(default_factory=tuple, description="Diet tags (e.g. 'vegan', 'gluten free')")
    cuisines: Tuple[str, ...] = Field(default_factory=tuple, description="Cuisine tags (e.g. 'Italian')")
    nutrients: Tuple[Nutrient, ...] = Field(default_factory=tuple, description="Nutrient entries per serving")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Recipe":
        """
        Build a Recipe from one entry of the API `results` array.

        Args:
            payload: Raw recipe dictionary from Spoonacular

        Returns:
            Recipe instance

        Raises:
            pydantic.ValidationError: If required fields (id, readyInMinutes) are
                missing, null or invalid
        """
        nutrition = payload.get("nutrition") or {}
        return cls(
            id=payload.get("id"),
            title=payload.get("title") or "",
            image=payload.get("image"),
            ready_in_minutes=payload.get("readyInMinutes"),
            diets=tuple(payload.get("diets") or ()),
            cuisines=tuple(payload.get("cuisines") or ()),
            nutrients=tuple(nutrition.get("nutrients") or ()),
        )

    def find_nutrient(self, name: str) -> Nutrient:
        """
        Return the first nutrient entry with exactly this name.

        Raises:
            MissingNutrientError: If the recipe has no such entry
        """
        for nutrient in self.nutrients:
            if nutrient.name == name:
                return nutrient
        raise MissingNutrientError(self.id, name)

    @property
    def calories(self) -> float:
        """Calories per serving. Raises MissingNutrientError if not reported."""
        return self.find_nutrient(CALORIES_NUTRIENT).amount


class CalorieRange(BaseModel):
    """Inclusive calorie bounds."""
    min: float = Field(DEFAULT_CALORIE_MIN, description="Lower bound (inclusive)")
    max: float = Field(DEFAULT_CALORIE_MAX, description="Upper bound (inclusive)")

    model_config = ConfigDict(frozen=True)

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class FilterSpec(BaseModel):
    """
    User-chosen filters applied to the recipe set.

    Empty strings and None both mean "no filter" for diet, cuisine and
    cooking_time_bucket. A FilterSpec with every field at its default matches
    every recipe that reports calories within 0-1000.
    """
    search_term: str = Field("", description="Case-insensitive substring matched against the title")
    diet: Optional[str] = Field(None, description="Exact diet tag to require")
    cuisine: Optional[str] = Field(None, description="Exact cuisine tag to require")
    calorie_range: CalorieRange = Field(default_factory=CalorieRange, description="Inclusive calorie bounds")
    cooking_time_bucket: Optional[str] = Field(None, description="Inclusive 'min-max' minutes range")

    model_config = ConfigDict(frozen=True)


class AggregateResult(BaseModel):
    """Summary statistics over a filtered recipe set."""
    count: int = Field(0, ge=0, description="Number of recipes in the filtered set")
    average_calories: float = Field(0.0, description="Mean calories, 0 when empty")
    median_calories: float = Field(0.0, description="Median calories, 0 when empty")
    average_cooking_time: float = Field(0.0, description="Mean ready_in_minutes, 0 when empty")
    most_common_diet: Optional[str] = Field(None, description="Most frequent diet tag, None when no tags")

    model_config = ConfigDict(frozen=True)


class PipelineResult(BaseModel):
    """Filtered recipes together with their aggregate statistics."""
    recipes: Tuple[Recipe, ...] = Field(default_factory=tuple)
    stats: AggregateResult = Field(default_factory=AggregateResult)

    model_config = ConfigDict(frozen=True)
