"""
Recipe Source Client Module.

This module is the **single source of truth** for fetching recipes in the
Streamlit app. All calls to the recipe source go through load_recipes().

Key principles:
- One fetch per browser session (the caller stores the result in session_state)
- One generic user-facing message for every fetch failure
- Never let exceptions bubble up to crash the Streamlit app
"""

import logging
from typing import List, Optional, Tuple

from recipe_dashboard.config import SpoonacularConfig
from recipe_dashboard.connectors import SpoonacularConnector
from recipe_dashboard.errors import FetchError
from recipe_dashboard.models import Recipe

logger = logging.getLogger("recipe_dashboard.streamlit")


def load_recipes() -> Tuple[List[Recipe], Optional[str]]:
    """
    Fetch recipes from Spoonacular.

    Returns:
        Tuple of (recipes, error_message). On success error_message is None.
        On failure recipes is empty and error_message is the text to show.
    """
    try:
        connector = SpoonacularConnector()
    except RuntimeError as e:
        logger.error("Spoonacular connector disabled: %s", e)
        return [], FetchError.user_message

    try:
        recipes = connector.fetch_recipes(page_size=SpoonacularConfig.get_page_size())
    except FetchError as e:
        logger.error("Recipe fetch failed: %s", e)
        return [], FetchError.user_message

    return recipes, None
