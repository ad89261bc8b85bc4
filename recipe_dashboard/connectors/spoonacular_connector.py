"""
Spoonacular connector using the complexSearch REST endpoint.

This connector fetches one page of recipes (with nutrition data) from Spoonacular
and normalizes each result into a Recipe.

The connector:
- Reads SPOONACULAR_API_KEY (and optional base URL / timeout) via recipe_dashboard.config
- Performs a single GET to /recipes/complexSearch with apiKey, number and addRecipeNutrition=true
- Makes one attempt with a timeout; there is no retry
- Raises FetchError for every failure (network, timeout, non-2xx, bad JSON)
- Skips individual results that cannot be parsed, logging each one

Requires SPOONACULAR_API_KEY in the environment or the .env file.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from recipe_dashboard.config import SpoonacularConfig
from recipe_dashboard.errors import FetchError
from recipe_dashboard.models import Recipe

from .base import BaseRecipeSource

logger = logging.getLogger(__name__)

COMPLEX_SEARCH_PATH = "/recipes/complexSearch"


class SpoonacularConnector(BaseRecipeSource):
    """
    Recipe source backed by the Spoonacular recipe-search API.

    The API key is supplied at construction (or read once from the environment)
    and never embedded in code.
    """
    source = "spoonacular"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the Spoonacular connector.

        Args:
            api_key: Spoonacular API key (optional, reads SPOONACULAR_API_KEY if not provided)
            base_url: API base URL (optional, reads SPOONACULAR_BASE_URL or uses the public API)
            timeout: Request timeout in seconds (optional, reads SPOONACULAR_TIMEOUT_SECONDS)

        Raises:
            RuntimeError: If no API key is configured.
        """
        key = api_key or SpoonacularConfig.get_api_key()
        if not key:
            raise RuntimeError(
                "SPOONACULAR_API_KEY is not set. Please add it to your .env file at the project root:\n"
                "SPOONACULAR_API_KEY=your_spoonacular_key_here\n\n"
                "For production, set SPOONACULAR_API_KEY in your deployment environment."
            )

        self.api_key = key
        self.base_url = (base_url or SpoonacularConfig.get_base_url()).rstrip("/")
        self.timeout = timeout or SpoonacularConfig.get_timeout()

    def fetch_recipes(self, page_size: int = 100) -> List[Recipe]:
        """
        Fetch one page of recipes with nutrition information.

        Args:
            page_size: Number of recipes to request (the API caps this at 100)

        Returns:
            List of Recipe objects in API order. Results that fail validation
            are skipped.

        Raises:
            FetchError: If the request fails, times out, returns a non-2xx
                status, or the body is not a JSON object with a `results` list.
        """
        if page_size <= 0:
            return []

        params = {
            "apiKey": self.api_key,
            "number": page_size,
            "addRecipeNutrition": "true",
        }

        logger.info("Fetching %d recipes from %s%s", page_size, self.base_url, COMPLEX_SEARCH_PATH)
        try:
            response = requests.get(
                f"{self.base_url}{COMPLEX_SEARCH_PATH}",
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            # Do not log the URL: it carries the API key
            logger.error("Spoonacular request failed: %s", type(e).__name__)
            raise FetchError("Failed to fetch recipes") from e
        except ValueError as e:
            logger.error("Spoonacular returned a non-JSON body: %s", e)
            raise FetchError("Failed to fetch recipes") from e

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            logger.error("Unexpected response format from Spoonacular: missing 'results' list")
            raise FetchError("Failed to fetch recipes")

        recipes = self._normalize_results(data["results"])
        logger.info("Spoonacular returned %d results, %d parsed", len(data["results"]), len(recipes))
        return recipes

    @staticmethod
    def _normalize_results(results: List[Dict[str, Any]]) -> List[Recipe]:
        """Map raw result dictionaries to Recipe, skipping invalid entries."""
        recipes: List[Recipe] = []
        for item in results:
            if not isinstance(item, dict):
                logger.warning("Skipping non-object recipe result: %r", item)
                continue
            try:
                recipes.append(Recipe.from_api(item))
            except ValidationError as e:
                logger.warning(
                    "Skipping recipe %s that failed validation: %d error(s)",
                    item.get("id"), e.error_count(),
                )
        return recipes
