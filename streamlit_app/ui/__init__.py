"""
UI Styling and Components Module.

This module provides global CSS styling and reusable layout, feedback and chart
components for the Recipe Dashboard Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section, kpi_row, recipe_card

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "kpi_row",
    "recipe_card",
]
