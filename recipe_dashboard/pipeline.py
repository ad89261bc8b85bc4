"""
Filter-and-aggregate pipeline entry point.

run_pipeline() is the single function the frontend calls on every filter change:
it filters the fetched recipes and computes the summary statistics over the
filtered subset. It performs no I/O and keeps no state, so callers are free to
memoize it on (recipes, spec).

Flow: Streamlit widgets -> FilterSpec -> run_pipeline() -> filter_recipes() -> aggregate() -> PipelineResult
"""

import logging
from typing import Sequence

from recipe_dashboard.filters import filter_recipes
from recipe_dashboard.models import FilterSpec, PipelineResult, Recipe
from recipe_dashboard.stats import aggregate

logger = logging.getLogger(__name__)


def run_pipeline(recipes: Sequence[Recipe], spec: FilterSpec) -> PipelineResult:
    """
    Filter recipes with the given spec and summarize the result.

    Args:
        recipes: Full recipe set as fetched from the source
        spec: Filter specification chosen by the user

    Returns:
        PipelineResult with the filtered recipes (input order preserved) and
        their AggregateResult

    Examples:
        >>> result = run_pipeline([], FilterSpec())
        >>> result.stats.count
        0
    """
    filtered = filter_recipes(recipes, spec)
    stats = aggregate(filtered)
    logger.debug(
        "Pipeline: input=%d filtered=%d search_term=%r diet=%r cuisine=%r calories=%s-%s bucket=%r",
        len(recipes), len(filtered), spec.search_term, spec.diet, spec.cuisine,
        spec.calorie_range.min, spec.calorie_range.max, spec.cooking_time_bucket,
    )
    return PipelineResult(recipes=tuple(filtered), stats=stats)
