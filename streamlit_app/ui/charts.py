"""
Chart builders for the recipe dashboard.

Provides the diet-tag frequency bars and the calorie distribution histogram
shown above the recipe list. All charts share the same minimal theme.
"""

from collections import Counter
from typing import Sequence

import altair as alt
import pandas as pd

from recipe_dashboard.models import Recipe
from recipe_dashboard.stats import calorie_values


COLORS = {
    "primary": "#3b82f6",      # Muted blue
    "secondary": "#64748b",    # Slate gray
    "accent": "#22c55e",       # Muted green
    "text": "#1e293b",         # Dark slate
    "background": "#ffffff",   # White
    "grid": "#f1f5f9",         # Very light gray
}


def apply_modern_theme(chart: alt.Chart) -> alt.Chart:
    """
    Apply a unified minimal theme to an Altair chart.

    Args:
        chart: Altair chart to theme

    Returns:
        Themed chart with consistent styling
    """
    return chart.configure_view(
        strokeWidth=0,
        fill=COLORS["background"],
    ).configure_axis(
        grid=True,
        gridColor=COLORS["grid"],
        gridOpacity=0.3,
        domain=False,
        labelColor=COLORS["text"],
        labelFontSize=11,
        titleColor=COLORS["text"],
        titleFontSize=12,
        titleFontWeight="normal",
        ticks=False,
    ).configure(
        padding={"left": 10, "top": 10, "right": 10, "bottom": 10},
        background=COLORS["background"],
    )


def diet_counts_frame(recipes: Sequence[Recipe]) -> pd.DataFrame:
    """
    Count diet tags across recipes.

    Returns:
        DataFrame with columns 'diet' and 'count', most frequent first
        (ties keep first-seen order)
    """
    counts = Counter(diet for recipe in recipes for diet in recipe.diets)
    return pd.DataFrame(counts.most_common(), columns=["diet", "count"])


def build_diet_bars(recipes: Sequence[Recipe]) -> alt.Chart:
    """
    Build horizontal bars of diet-tag frequency.

    Args:
        recipes: Filtered recipes

    Returns:
        Themed bar chart (an empty placeholder when no recipe has diet tags)
    """
    df = diet_counts_frame(recipes)
    if df.empty:
        df = pd.DataFrame({"diet": ["No diet tags"], "count": [0]})

    chart = alt.Chart(df).mark_bar(
        cornerRadiusEnd=4,
        color=COLORS["accent"],
    ).encode(
        x=alt.X("count:Q", title="Recipes", axis=alt.Axis(tickMinStep=1)),
        y=alt.Y("diet:N", title=None, sort="-x"),
        tooltip=[
            alt.Tooltip("diet:N", title="Diet"),
            alt.Tooltip("count:Q", title="Recipes"),
        ],
    ).properties(height=max(120, 28 * len(df)))
    return apply_modern_theme(chart)


def build_calorie_histogram(recipes: Sequence[Recipe], bins: int = 20) -> alt.Chart:
    """
    Build a histogram of calories per serving.

    Recipes without a "Calories" nutrient are left out.

    Args:
        recipes: Filtered recipes
        bins: Maximum number of bins

    Returns:
        Themed histogram
    """
    df = pd.DataFrame({"calories": calorie_values(recipes)}, dtype="float64")

    chart = alt.Chart(df).mark_bar(
        color=COLORS["primary"],
        cornerRadiusTopLeft=3,
        cornerRadiusTopRight=3,
    ).encode(
        x=alt.X("calories:Q", bin=alt.Bin(maxbins=bins), title="Calories per serving"),
        y=alt.Y("count():Q", title="Recipes"),
        tooltip=[alt.Tooltip("count():Q", title="Recipes")],
    ).properties(height=220)
    return apply_modern_theme(chart)
