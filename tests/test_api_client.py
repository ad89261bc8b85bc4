"""
Tests for the Streamlit recipe fetch wrapper.

load_recipes() must never raise: every failure becomes an empty recipe list
plus the one generic FetchError.user_message, with the detail left in the log.
HTTP is mocked at requests.get inside the connector module.
"""

import logging
import os
from unittest.mock import Mock, patch

import requests

from recipe_dashboard.errors import FetchError
from streamlit_app.utils.api_client import load_recipes

REQUESTS_GET = "recipe_dashboard.connectors.spoonacular_connector.requests.get"


def _response(json_data=None, status_code=200):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    response.json.return_value = json_data
    return response


def _result(id, title="Recipe"):
    return {
        "id": id,
        "title": title,
        "readyInMinutes": 25,
        "diets": ["vegetarian"],
        "cuisines": [],
        "nutrition": {"nutrients": [{"name": "Calories", "amount": 410.0, "unit": "kcal"}]},
    }


class TestLoadRecipesSuccess:
    """Tests for a successful fetch."""

    @patch.dict(os.environ, {"SPOONACULAR_API_KEY": "test-key"}, clear=True)
    @patch(REQUESTS_GET)
    def test_returns_recipes_and_no_error(self, mock_get):
        mock_get.return_value = _response({"results": [_result(7, "Lentil Curry"), _result(8)]})

        recipes, error = load_recipes()

        assert error is None
        assert [r.id for r in recipes] == [7, 8]
        assert recipes[0].title == "Lentil Curry"
        mock_get.assert_called_once()

    @patch.dict(os.environ, {"SPOONACULAR_API_KEY": "test-key", "SPOONACULAR_PAGE_SIZE": "5"}, clear=True)
    @patch(REQUESTS_GET)
    def test_page_size_comes_from_config(self, mock_get):
        mock_get.return_value = _response({"results": []})

        assert load_recipes() == ([], None)
        assert mock_get.call_args.kwargs["params"]["number"] == 5


class TestLoadRecipesFailure:
    """Every failure maps to the same user-facing message."""

    @patch.dict(os.environ, {"SPOONACULAR_API_KEY": "test-key"}, clear=True)
    @patch(REQUESTS_GET)
    def test_connection_error(self, mock_get, caplog):
        mock_get.side_effect = requests.exceptions.ConnectionError("DNS failure")

        with caplog.at_level(logging.ERROR, logger="recipe_dashboard.streamlit"):
            assert load_recipes() == ([], FetchError.user_message)
        assert "Recipe fetch failed" in caplog.text

    @patch.dict(os.environ, {"SPOONACULAR_API_KEY": "test-key"}, clear=True)
    @patch(REQUESTS_GET)
    def test_server_error_status(self, mock_get):
        mock_get.return_value = _response({"message": "boom"}, status_code=500)

        assert load_recipes() == ([], FetchError.user_message)

    @patch.dict(os.environ, {"SPOONACULAR_API_KEY": "test-key"}, clear=True)
    @patch(REQUESTS_GET)
    def test_missing_results_list(self, mock_get):
        mock_get.return_value = _response({"status": "failure"})

        assert load_recipes() == ([], FetchError.user_message)

    @patch.dict(os.environ, {}, clear=True)
    @patch(REQUESTS_GET)
    def test_missing_api_key_shows_generic_message(self, mock_get, caplog):
        with caplog.at_level(logging.ERROR, logger="recipe_dashboard.streamlit"):
            recipes, error = load_recipes()

        assert recipes == []
        assert error == FetchError.user_message
        assert "SPOONACULAR_API_KEY" not in error
        assert "SPOONACULAR_API_KEY" in caplog.text
        mock_get.assert_not_called()
