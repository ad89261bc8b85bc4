"""
Base class for recipe sources.

A recipe source supplies a finite, fully materialized list of Recipe records.
All sources must:
- Implement the source attribute (e.g., "spoonacular")
- Provide a fetch_recipes method that normalizes raw records into Recipe
- Raise FetchError (and only FetchError) when the fetch does not succeed
"""

from abc import ABC, abstractmethod
from typing import List

from recipe_dashboard.models import Recipe


class BaseRecipeSource(ABC):
    """
    Abstract base class for all recipe sources.

    Attributes:
        source: String identifier for the source (e.g., "spoonacular")
    """
    source: str

    @abstractmethod
    def fetch_recipes(self, page_size: int = 100) -> List[Recipe]:
        """
        Fetch one page of recipes.

        Args:
            page_size: Maximum number of recipes to return

        Returns:
            List of Recipe objects in source order

        Raises:
            FetchError: If the fetch failed for any reason
        """
        pass
