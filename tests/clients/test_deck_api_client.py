# tests/clients/test_deck_api_client.py
from unittest.mock import MagicMock, patch

import pytest
import requests

from clients.python.deck_api_client import DeckDesignerClient

BASE_URL = "http://localhost:8000"


def _response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def api_client():
    return DeckDesignerClient(BASE_URL + "/", "dev_key")


def test_base_url_is_normalized(api_client):
    assert api_client.base_url == BASE_URL
    assert api_client.headers == {"X-API-Key": "dev_key"}


class TestCheckConnection:

    @patch("clients.python.deck_api_client.requests.get")
    def test_success(self, mock_get, api_client):
        mock_get.return_value = _response(200)
        assert api_client.check_connection() == (True, "Connection successful")

    @patch("clients.python.deck_api_client.requests.get")
    def test_bad_status(self, mock_get, api_client):
        mock_get.return_value = _response(503)
        ok, message = api_client.check_connection()
        assert not ok
        assert "503" in message

    @patch("clients.python.deck_api_client.requests.get")
    def test_connection_error(self, mock_get, api_client):
        mock_get.side_effect = requests.ConnectionError("refused")
        ok, message = api_client.check_connection()
        assert not ok
        assert message.startswith("Connection error")


class TestDesignPayload:

    def test_points_in_any_form(self):
        payload = DeckDesignerClient.design_payload([(0, 0), [10, 0], {"x": 10, "y": 10}])
        assert payload["points"] == [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}]

    def test_unset_spacings_are_left_to_the_server(self):
        payload = DeckDesignerClient.design_payload([], joist_spacing=0.4)
        assert payload["joist_spacing"] == 0.4
        assert "beam_spacing" not in payload
        assert payload["deck_color"] == "Driftwood"


class TestEndpoints:

    @patch("clients.python.deck_api_client.requests.post")
    def test_get_bom(self, mock_post, api_client):
        mock_post.return_value = _response(json_data={"total_boards": 170})
        bom = api_client.get_bom([(0, 0), (600, 0), (600, 600)], has_railings=True)
        assert bom["total_boards"] == 170

        args, kwargs = mock_post.call_args
        assert args[0] == f"{BASE_URL}/deck/bom"
        assert kwargs["json"]["has_railings"] is True
        assert kwargs["headers"] == {"X-API-Key": "dev_key"}

    @patch("clients.python.deck_api_client.requests.post")
    def test_download_bom_csv(self, mock_post, api_client):
        mock_post.return_value = _response(text="Item,Quantity,Unit,Details\n")
        assert api_client.download_bom_csv([]).startswith("Item,")
        assert mock_post.call_args[0][0].endswith("/deck/bom.csv")

    @patch("clients.python.deck_api_client.requests.post")
    def test_export_project_with_dimensions(self, mock_post, api_client):
        mock_post.return_value = _response(json_data={"version": "1.0"})
        api_client.export_project([], width_ft=12)
        payload = mock_post.call_args[1]["json"]
        assert payload["width_ft"] == 12
        assert "length_ft" not in payload

    @patch("clients.python.deck_api_client.requests.post")
    def test_http_error_is_raised(self, mock_post, api_client):
        mock_post.return_value = _response(status_code=401)
        with pytest.raises(requests.HTTPError):
            api_client.get_layout([])

    @patch("clients.python.deck_api_client.requests.get")
    def test_get_default_deck(self, mock_get, api_client):
        mock_get.return_value = _response(json_data={"points": [{"x": 0, "y": 0}]})
        assert api_client.get_default_deck(width_ft=16) == [{"x": 0, "y": 0}]
        assert mock_get.call_args[1]["params"] == {"width_ft": 16, "length_ft": 12}

    @patch("clients.python.deck_api_client.requests.post")
    def test_parse_feet(self, mock_post, api_client):
        mock_post.return_value = _response(json_data={"feet": 12.5})
        assert api_client.parse_feet("12 1/2", strict=True) == 12.5
        assert mock_post.call_args[1]["json"] == {"text": "12 1/2", "strict": True}
