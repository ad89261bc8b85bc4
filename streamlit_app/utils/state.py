"""
Dashboard State Management Module.

This module wraps Streamlit's session_state to provide a clean API for:
- The fetched recipe set (fetched once per browser session)
- The filter widgets, read back into an immutable FilterSpec on every rerun
- The memoized pipeline result for the current (recipes, FilterSpec) pair

# NOTE: Filter state lives only in session_state. Refreshing the page starts a
    new session with default filters and a fresh fetch.
"""

from typing import Any, List, Mapping, Optional, Tuple

import streamlit as st

from recipe_dashboard.models import (
    DEFAULT_CALORIE_MAX,
    DEFAULT_CALORIE_MIN,
    CalorieRange,
    FilterSpec,
    PipelineResult,
    Recipe,
)
from recipe_dashboard.pipeline import run_pipeline

# Session state keys for the fetch result
RECIPES_KEY = "recipes"
FETCH_ERROR_KEY = "fetch_error"

# Session state keys for filter widgets
SEARCH_TERM_KEY = "filter_search_term"
DIET_KEY = "filter_diet"
CUISINE_KEY = "filter_cuisine"
CALORIE_RANGE_KEY = "filter_calorie_range"
COOKING_TIME_KEY = "filter_cooking_time"

# Widget options as (value, label). An empty value means "no filter".
DIET_OPTIONS: List[Tuple[str, str]] = [
    ("", "All Diets"),
    ("gluten free", "Gluten Free"),
    ("ketogenic", "Ketogenic"),
    ("vegetarian", "Vegetarian"),
    ("vegan", "Vegan"),
]

CUISINE_OPTIONS: List[Tuple[str, str]] = [
    ("", "All Cuisines"),
    ("Italian", "Italian"),
    ("Mexican", "Mexican"),
    ("Asian", "Asian"),
    ("American", "American"),
]

COOKING_TIME_OPTIONS: List[Tuple[str, str]] = [
    ("", "All Cooking Times"),
    ("0-15", "Quick (0-15 minutes)"),
    ("16-30", "Medium (16-30 minutes)"),
    ("31-60", "Long (31-60 minutes)"),
    ("61-1000", "Very Long (60+ minutes)"),
]


def has_fetched() -> bool:
    """True once a fetch has completed in this session, successfully or not."""
    return RECIPES_KEY in st.session_state or FETCH_ERROR_KEY in st.session_state


def store_fetch_result(recipes: List[Recipe], error: Optional[str]) -> None:
    """
    Store the outcome of the recipe fetch.

    Args:
        recipes: Fetched recipes (empty on error)
        error: User-facing error message, or None on success
    """
    if error:
        st.session_state.pop(RECIPES_KEY, None)
        st.session_state[FETCH_ERROR_KEY] = error
    else:
        st.session_state.pop(FETCH_ERROR_KEY, None)
        st.session_state[RECIPES_KEY] = tuple(recipes)


def get_recipes() -> Tuple[Recipe, ...]:
    """Get the fetched recipes, or an empty tuple if none are stored."""
    return st.session_state.get(RECIPES_KEY, ())


def get_fetch_error() -> Optional[str]:
    """Get the stored fetch error message, if the last fetch failed."""
    return st.session_state.get(FETCH_ERROR_KEY)


def reset_fetch() -> None:
    """Forget the fetch result so the next rerun fetches again."""
    st.session_state.pop(RECIPES_KEY, None)
    st.session_state.pop(FETCH_ERROR_KEY, None)


def init_filter_state() -> None:
    """
    Ensure every filter widget key exists in session state with its default.

    Call this before rendering the filter widgets.
    """
    defaults = {
        SEARCH_TERM_KEY: "",
        DIET_KEY: "",
        CUISINE_KEY: "",
        CALORIE_RANGE_KEY: (DEFAULT_CALORIE_MIN, DEFAULT_CALORIE_MAX),
        COOKING_TIME_KEY: "",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def build_filter_spec(state: Optional[Mapping[str, Any]] = None) -> FilterSpec:
    """
    Build an immutable FilterSpec from the filter widget values.

    Args:
        state: Mapping holding the widget keys (defaults to st.session_state)

    Returns:
        FilterSpec reflecting the current widget values. Missing keys fall back
        to the FilterSpec defaults.
    """
    if state is None:
        state = st.session_state

    calorie_min, calorie_max = state.get(CALORIE_RANGE_KEY, (DEFAULT_CALORIE_MIN, DEFAULT_CALORIE_MAX))
    return FilterSpec(
        search_term=state.get(SEARCH_TERM_KEY, "") or "",
        diet=state.get(DIET_KEY) or None,
        cuisine=state.get(CUISINE_KEY) or None,
        calorie_range=CalorieRange(min=calorie_min, max=calorie_max),
        cooking_time_bucket=state.get(COOKING_TIME_KEY) or None,
    )


@st.cache_data(show_spinner=False, max_entries=64)
def compute_dashboard(recipes: Tuple[Recipe, ...], spec: FilterSpec) -> PipelineResult:
    """
    Memoized pipeline call.

    Recomputed only when the recipe set or the filter spec changes.
    """
    return run_pipeline(recipes, spec)
