"""Recipe source connectors."""

from .base import BaseRecipeSource
from .spoonacular_connector import SpoonacularConnector

__all__ = ["BaseRecipeSource", "SpoonacularConnector"]
