"""
Recipe Dashboard - Streamlit Frontend Main Entry Point.

This single-page app fetches up to 100 recipes from Spoonacular once per session,
lets the user filter them (search, diet, cuisine, calorie range, cooking time),
and shows summary statistics, charts and the filtered recipe cards.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_dashboard
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_dashboard.config import configure_logging

import streamlit as st

from utils import state
from utils.api_client import load_recipes
from ui.styles import load_global_styles
from ui.layout import page_header, section, kpi_row, recipe_card
from ui.feedback import show_error, show_empty_state, working_spinner
from ui.charts import build_diet_bars, build_calorie_histogram

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Spoonacular Recipe Dashboard",
    page_icon="🍲",
    layout="wide",
    initial_sidebar_state="expanded"
)

load_global_styles()

page_header(
    "Spoonacular Recipe Dashboard",
    subtitle="Filter recipes by diet, cuisine, calories and cooking time."
)

# Fetch once per session
if not state.has_fetched():
    with working_spinner("Loading recipes..."):
        recipes, error = load_recipes()
    state.store_fetch_result(recipes, error)

fetch_error = state.get_fetch_error()
if fetch_error:
    show_error(fetch_error)
    if st.button("Reload recipes", type="primary"):
        state.reset_fetch()
        st.rerun()
    st.stop()

# Sidebar filters
state.init_filter_state()
with st.sidebar:
    st.markdown("### 🔎 **Filters**")

    st.text_input("Search recipes", key=state.SEARCH_TERM_KEY, placeholder="Search recipes...")

    diet_labels = dict(state.DIET_OPTIONS)
    st.selectbox(
        "Diet",
        options=list(diet_labels),
        format_func=diet_labels.get,
        key=state.DIET_KEY,
    )

    cuisine_labels = dict(state.CUISINE_OPTIONS)
    st.selectbox(
        "Cuisine",
        options=list(cuisine_labels),
        format_func=cuisine_labels.get,
        key=state.CUISINE_KEY,
    )

    cooking_labels = dict(state.COOKING_TIME_OPTIONS)
    st.selectbox(
        "Cooking time",
        options=list(cooking_labels),
        format_func=cooking_labels.get,
        key=state.COOKING_TIME_KEY,
    )

    st.slider(
        "Calorie range",
        min_value=0,
        max_value=1000,
        key=state.CALORIE_RANGE_KEY,
    )
    calorie_min, calorie_max = st.session_state[state.CALORIE_RANGE_KEY]
    st.caption(f"{calorie_min} - {calorie_max} calories")

    st.divider()
    if st.button("Reload recipes", use_container_width=True):
        state.reset_fetch()
        st.rerun()

spec = state.build_filter_spec()
result = state.compute_dashboard(state.get_recipes(), spec)
stats = result.stats

# Summary statistics
kpi_row([
    {"label": "Total Recipes", "value": stats.count, "icon": "📋"},
    {"label": "Average Calories", "value": f"{stats.average_calories:.2f}", "icon": "🔥"},
    {"label": "Median Calories", "value": f"{stats.median_calories:.2f}", "icon": "📊"},
    {"label": "Most Common Diet", "value": stats.most_common_diet or "N/A", "icon": "🥗"},
    {"label": "Average Cooking Time", "value": f"{stats.average_cooking_time:.2f} minutes", "icon": "⏱️"},
])

st.divider()

if not result.recipes:
    show_empty_state("No recipes match these filters", subtitle="Try widening the calorie range or clearing a filter.")
    st.stop()

chart_col1, chart_col2 = st.columns(2, gap="medium")
with chart_col1:
    section("Diets", caption="How often each diet tag appears in the filtered recipes.")
    st.altair_chart(build_diet_bars(result.recipes), use_container_width=True)
with chart_col2:
    section("Calories", caption="Calories per serving across the filtered recipes.")
    st.altair_chart(build_calorie_histogram(result.recipes), use_container_width=True)

section("Recipes", caption=f"{stats.count} recipes")
columns = st.columns(3, gap="medium")
for index, recipe in enumerate(result.recipes):
    with columns[index % 3]:
        recipe_card(recipe)
