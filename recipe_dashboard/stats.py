"""
Aggregate statistics over a recipe set.

The helpers here are pure functions over in-memory sequences. Empty inputs never
raise: mean and median return 0.0 and most_common returns None, which the
frontend renders as "N/A".

Tie-breaking for most_common: the value with the highest count wins; if several
values share that count, the one that appears first in the input wins.
"""

import logging
from collections import Counter
from typing import Hashable, Iterable, List, Optional, Sequence

from recipe_dashboard.errors import MissingNutrientError
from recipe_dashboard.models import AggregateResult, Recipe

logger = logging.getLogger(__name__)


def mean(values: Sequence[float]) -> float:
    """
    Arithmetic mean, 0.0 for an empty sequence.

    Examples:
        >>> mean([100, 200])
        150.0
        >>> mean([])
        0.0
    """
    if not values:
        return 0.0
    return sum(values) / len(values)


def median(values: Iterable[float]) -> float:
    """
    Median of the values, 0.0 for an empty input.

    For an even count the result is the mean of the two middle values.

    Examples:
        >>> median([300, 100, 200])
        200
        >>> median([100, 200])
        150.0
    """
    ordered = sorted(values)
    if not ordered:
        return 0.0
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def most_common(items: Iterable[Hashable]) -> Optional[Hashable]:
    """
    Most frequent item, ties going to the item seen first. None when empty.

    Counter preserves first-insertion order and most_common() orders equal
    counts by that insertion order, so the result is deterministic.

    Examples:
        >>> most_common(["vegan", "vegan", "vegetarian", "vegetarian"])
        'vegan'
        >>> most_common([]) is None
        True
    """
    counts = Counter(items)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def calorie_values(recipes: Iterable[Recipe]) -> List[float]:
    """
    Calories of each recipe, skipping recipes without a "Calories" nutrient.

    Args:
        recipes: Recipes to read calories from

    Returns:
        List of calorie amounts in input order
    """
    values: List[float] = []
    for recipe in recipes:
        try:
            values.append(recipe.calories)
        except MissingNutrientError as e:
            logger.warning("Skipping recipe %s in calorie statistics: %s", recipe.id, e)
    return values


def aggregate(recipes: Sequence[Recipe]) -> AggregateResult:
    """
    Compute summary statistics over a (typically already filtered) recipe set.

    Args:
        recipes: Recipes to summarize

    Returns:
        AggregateResult with count, average/median calories, average cooking
        time and the most common diet tag across all recipes' diets
    """
    calories = calorie_values(recipes)
    return AggregateResult(
        count=len(recipes),
        average_calories=mean(calories),
        median_calories=median(calories),
        average_cooking_time=mean([recipe.ready_in_minutes for recipe in recipes]),
        most_common_diet=most_common(diet for recipe in recipes for diet in recipe.diets),
    )
