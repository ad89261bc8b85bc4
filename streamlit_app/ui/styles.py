"""
Global CSS Styling for the Recipe Dashboard.

This module provides load_global_styles() to inject consistent styling:
typography, spacing, card borders and the page header.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Dashboard app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets global styles for headings, paragraphs and metrics
    - Creates a slightly narrower content width on large screens
    - Applies rounded corners and subtle borders to recipe cards
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h1 {
            font-size: 2.5rem !important;
            margin-bottom: 1rem !important;
        }

        h3 {
            font-size: 1.25rem !important;
            margin-top: 0.25rem !important;
            margin-bottom: 0.5rem !important;
        }

        p, .stMarkdown p {
            line-height: 1.6 !important;
            margin-bottom: 0.5rem !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Page header subtitle */
        .rd-page-header .subtitle {
            color: #64748b;
            font-size: 1.05rem;
            margin-bottom: 1rem;
        }

        .rd-section-caption {
            color: #64748b;
            font-size: 0.9rem;
            margin-bottom: 0.75rem;
        }

        /* KPI metrics */
        [data-testid="stMetric"] {
            background: white;
            border-radius: 12px;
            padding: 0.75rem 1rem;
            border: 1px solid rgba(12, 138, 123, 0.1);
        }

        /* Recipe card images */
        [data-testid="stImage"] img {
            border-radius: 8px;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
