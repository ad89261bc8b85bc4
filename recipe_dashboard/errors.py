"""
Exception types raised by the recipe dashboard core.

Fetch errors are recovered at the UI boundary and shown as one generic message.
Pipeline errors (missing nutrient, malformed time bucket) are recovered per
record or per field and never abort a whole computation.
"""

from typing import Optional


class RecipeDashboardError(Exception):
    """Base class for all recipe dashboard errors."""


class FetchError(RecipeDashboardError):
    """Raised when recipes could not be fetched from the recipe source."""

    user_message = "Failed to fetch recipes. Please try again later."


class MissingNutrientError(RecipeDashboardError, KeyError):
    """Raised when a recipe has no entry for a required nutrient (e.g. "Calories")."""

    def __init__(self, recipe_id: Optional[int], nutrient: str) -> None:
        self.recipe_id = recipe_id
        self.nutrient = nutrient
        super().__init__(f"Recipe {recipe_id} has no '{nutrient}' nutrient entry")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MalformedTimeBucketError(RecipeDashboardError, ValueError):
    """Raised when a cooking-time bucket is not two integers separated by '-'."""

    def __init__(self, bucket: str) -> None:
        self.bucket = bucket
        super().__init__(f"Malformed cooking-time bucket: {bucket!r} (expected 'min-max')")
