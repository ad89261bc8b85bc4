"""
Layout primitives for consistent page structure.

Provides reusable components for page headers, sections, KPI rows and recipe cards.
"""

from typing import Optional
import streamlit as st

from recipe_dashboard.errors import MissingNutrientError
from recipe_dashboard.models import Recipe


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown('<div class="rd-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def kpi_row(kpis: list[dict]) -> None:
    """
    Render a row of KPI metrics.

    Args:
        kpis: List of dicts with keys:
            - label: KPI label text
            - value: KPI value (number or string)
            - icon: Optional emoji or icon prefix
    """
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            icon = kpi.get("icon", "")
            label = kpi.get("label", "")
            st.metric(
                label=f"{icon} {label}" if icon else label,
                value=kpi.get("value", ""),
            )


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="rd-section-caption">{caption}</div>', unsafe_allow_html=True)


def format_calories(recipe: Recipe) -> str:
    """Calories with two decimals, or "N/A" when the recipe reports none."""
    try:
        return f"{recipe.calories:.2f}"
    except MissingNutrientError:
        return "N/A"


def recipe_card(recipe: Recipe) -> None:
    """
    Render a single recipe card.

    Shows title, image, calories, cooking time, diets and cuisines.
    """
    with st.container(border=True):
        st.markdown(f"### {recipe.title}")
        if recipe.image:
            st.image(recipe.image, use_container_width=True)
        st.markdown(f"**Calories:** {format_calories(recipe)}")
        st.markdown(f"**Cooking Time:** {recipe.ready_in_minutes} minutes")
        st.markdown(f"**Diets:** {', '.join(recipe.diets) or 'None'}")
        st.markdown(f"**Cuisines:** {', '.join(recipe.cuisines) or 'None'}")
