"""
Recipe filtering predicates.

Each predicate takes (recipe, spec) and returns True when the recipe passes.
filter_recipes() applies PREDICATES in order and keeps a recipe only if all of
them pass. Predicates are independent, so the order never changes the result,
but it is kept fixed so intermediate behavior can be tested predicate by predicate.

Key functions:
- parse_time_bucket: Parses a "min-max" cooking-time bucket
- filter_recipes: Applies all predicates, preserving input order
"""

import logging
from typing import Callable, Iterable, List, Tuple

from recipe_dashboard.errors import MalformedTimeBucketError, MissingNutrientError
from recipe_dashboard.models import FilterSpec, Recipe

logger = logging.getLogger(__name__)

Predicate = Callable[[Recipe, FilterSpec], bool]


def parse_time_bucket(bucket: str) -> Tuple[int, int]:
    """
    Parse a cooking-time bucket such as "16-30" into (16, 30).

    Args:
        bucket: String of two integers separated by a single '-'

    Returns:
        Tuple of (min_minutes, max_minutes)

    Raises:
        MalformedTimeBucketError: If the string is not exactly two integers

    Examples:
        >>> parse_time_bucket("16-30")
        (16, 30)
        >>> parse_time_bucket(" 61 - 1000 ")
        (61, 1000)
    """
    parts = bucket.split("-")
    if len(parts) != 2:
        raise MalformedTimeBucketError(bucket)
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError as e:
        raise MalformedTimeBucketError(bucket) from e


def matches_search_term(recipe: Recipe, spec: FilterSpec) -> bool:
    """Title contains the search term, case-insensitive. Empty term matches all."""
    return spec.search_term.lower() in recipe.title.lower()


def matches_diet(recipe: Recipe, spec: FilterSpec) -> bool:
    """Recipe carries the selected diet tag exactly (case-sensitive)."""
    if not spec.diet:
        return True
    return spec.diet in recipe.diets


def matches_cuisine(recipe: Recipe, spec: FilterSpec) -> bool:
    """Recipe carries the selected cuisine tag exactly (case-sensitive)."""
    if not spec.cuisine:
        return True
    return spec.cuisine in recipe.cuisines


def matches_calorie_range(recipe: Recipe, spec: FilterSpec) -> bool:
    """
    Recipe calories lie within the inclusive calorie range.

    Recipes without a "Calories" nutrient are excluded and logged.
    """
    try:
        calories = recipe.calories
    except MissingNutrientError as e:
        logger.warning("Excluding recipe %s (%r): %s", recipe.id, recipe.title, e)
        return False
    return spec.calorie_range.contains(calories)


def matches_cooking_time(recipe: Recipe, spec: FilterSpec) -> bool:
    """
    Recipe ready_in_minutes lies within the inclusive cooking-time bucket.

    No bucket passes unconditionally. A malformed bucket fails open.
    """
    if not spec.cooking_time_bucket:
        return True
    try:
        min_minutes, max_minutes = parse_time_bucket(spec.cooking_time_bucket)
    except MalformedTimeBucketError as e:
        logger.warning("Ignoring cooking-time filter: %s", e)
        return True
    return min_minutes <= recipe.ready_in_minutes <= max_minutes


PREDICATES: List[Predicate] = [
    matches_search_term,
    matches_diet,
    matches_cuisine,
    matches_calorie_range,
    matches_cooking_time,
]


def filter_recipes(recipes: Iterable[Recipe], spec: FilterSpec) -> List[Recipe]:
    """
    Return the recipes that pass every predicate, in input order.

    Args:
        recipes: Recipes to filter (not mutated)
        spec: Filter specification

    Returns:
        New list with the matching recipes

    Examples:
        >>> filter_recipes([], FilterSpec())
        []
    """
    # Resolve the bucket once so a malformed one is reported once, not per recipe
    if spec.cooking_time_bucket:
        try:
            parse_time_bucket(spec.cooking_time_bucket)
        except MalformedTimeBucketError as e:
            logger.warning("Ignoring cooking-time filter: %s", e)
            spec = spec.model_copy(update={"cooking_time_bucket": None})

    return [
        recipe for recipe in recipes
        if all(predicate(recipe, spec) for predicate in PREDICATES)
    ]
