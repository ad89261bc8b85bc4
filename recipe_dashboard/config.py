"""
Configuration management for the Recipe Dashboard.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by the Streamlit app (streamlit_app/app.py)
so .env is loaded before any other code reads environment variables.

In production .env will usually not exist; load_dotenv() is safe to call and
will no-op, and the platform environment is used instead.

Environment Variables:
- SPOONACULAR_API_KEY: Required to fetch recipes
- SPOONACULAR_BASE_URL: Optional, defaults to "https://api.spoonacular.com"
- SPOONACULAR_PAGE_SIZE: Optional, defaults to 100 (clamped to 1..100)
- SPOONACULAR_TIMEOUT_SECONDS: Optional, defaults to 15
- LOG_LEVEL: Optional, defaults to "INFO"
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.spoonacular.com"
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100
DEFAULT_TIMEOUT_SECONDS = 15.0


def load_env_file() -> None:
    """
    Load environment variables from the .env file at the project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values from .env (override=False).
    """
    # recipe_dashboard/config.py -> recipe_dashboard/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class SpoonacularConfig:
    """Configuration for the Spoonacular recipe source."""

    @staticmethod
    def get_api_key() -> Optional[str]:
        """
        Get the Spoonacular API key from the environment.

        Returns:
            API key string or None if not set

        Note:
            This does not raise an error - the connector validates it.
        """
        return os.getenv("SPOONACULAR_API_KEY") or None

    @staticmethod
    def get_base_url() -> str:
        """Get the API base URL with any trailing slash removed."""
        return os.getenv("SPOONACULAR_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_page_size() -> int:
        """
        Get the number of recipes to request in the single fetch.

        Returns:
            Page size clamped to 1..100. Invalid values fall back to the default.
        """
        raw = os.getenv("SPOONACULAR_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            size = int(raw)
        except ValueError:
            return DEFAULT_PAGE_SIZE
        return max(1, min(size, MAX_PAGE_SIZE))

    @staticmethod
    def get_timeout() -> float:
        """
        Get the HTTP timeout in seconds for the fetch.

        Returns:
            Positive timeout. Invalid or non-positive values fall back to the default.
        """
        raw = os.getenv("SPOONACULAR_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout = float(raw)
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
        return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS


def get_required_env_vars() -> dict:
    """
    Get a dictionary of all required environment variables and their status.

    Returns:
        Dictionary with keys:
        - spoonacular_api_key: bool (True if set)
    """
    return {
        "spoonacular_api_key": SpoonacularConfig.get_api_key() is not None,
    }


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Raises:
        RuntimeError: If any required configuration is missing
    """
    missing = [name for name, present in get_required_env_vars().items() if not present]
    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n" +
            "\n".join(f"  - {name.upper()}" for name in missing) +
            "\n\nPlease create a .env file at the project root with these variables."
        )


def configure_logging() -> None:
    """
    Apply LOG_LEVEL to the recipe_dashboard logger hierarchy.

    Adds a single stream handler the first time it is called; later calls only
    update the level.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    package_logger = logging.getLogger("recipe_dashboard")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
