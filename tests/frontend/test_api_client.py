"""
Tests for frontend/utils/api.py - backend HTTP client.
"""
from unittest.mock import MagicMock, patch

import requests

from frontend.utils.api import APIClient


def _response(status: int, body=None, text: str = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.text = text if text is not None else ("{}" if body is not None else "")
    resp.json.return_value = body
    return resp


class TestRequests:
    """Tests for the GET/POST wrappers."""

    def test_get_returns_status_and_body(self):
        client = APIClient("http://api")
        body = {"success": True, "data": {"databases": []}}

        with patch("frontend.utils.api.requests.get", return_value=_response(200, body)) as mock_get:
            result = client.get_databases()

        assert result == {"status": 200, "data": body}
        assert mock_get.call_args.args[0] == "http://api/databases"

    def test_connection_error(self):
        client = APIClient("http://api")

        with patch("frontend.utils.api.requests.get", side_effect=requests.exceptions.ConnectionError()):
            result = client.get_databases()

        assert result == {"status": 0, "error": "Cannot connect to backend"}

    def test_timeout_is_reported(self):
        client = APIClient("http://api")

        with patch("frontend.utils.api.requests.post", side_effect=requests.exceptions.Timeout("timed out")):
            result = client.create_database("reports")

        assert result == {"status": 0, "error": "timed out"}

    def test_non_json_body_kept_raw(self):
        client = APIClient("http://api")
        resp = _response(502, text="Bad Gateway")
        resp.json.side_effect = ValueError("no json")

        with patch("frontend.utils.api.requests.get", return_value=resp):
            result = client.health()

        assert result == {"status": 502, "data": {"raw": "Bad Gateway"}}


class TestEndpoints:
    """Tests for endpoint paths and payloads."""

    def test_database_endpoints(self):
        client = APIClient("http://api")

        with patch("frontend.utils.api.requests.get", return_value=_response(200, {})) as mock_get, \
                patch("frontend.utils.api.requests.post", return_value=_response(200, {})) as mock_post:
            client.get_database("shop")
            client.create_database("reports")
            client.delete_databases(["a", "b"])

        assert mock_get.call_args.args[0] == "http://api/databases/shop"
        create_call, delete_call = mock_post.call_args_list
        assert create_call.args[0] == "http://api/databases/create"
        assert create_call.kwargs["json"] == {"database": "reports"}
        assert delete_call.args[0] == "http://api/databases/delete"
        assert delete_call.kwargs["json"] == {"names": ["a", "b"]}

    def test_collection_endpoints_carry_database(self):
        client = APIClient("http://api")

        with patch("frontend.utils.api.requests.get", return_value=_response(200, {})) as mock_get, \
                patch("frontend.utils.api.requests.post", return_value=_response(200, {})) as mock_post:
            client.get_collections("shop")
            client.get_collection("shop", "users")
            client.create_collection("shop", "invoices")
            client.delete_collections("shop", ["users"])

        list_call, item_call = mock_get.call_args_list
        assert list_call.args[0] == "http://api/collections"
        assert list_call.kwargs["params"] == {"database": "shop"}
        assert item_call.args[0] == "http://api/collections/users"
        assert item_call.kwargs["params"] == {"database": "shop"}
        create_call, delete_call = mock_post.call_args_list
        assert create_call.kwargs["json"] == {"database": "shop", "collection": "invoices"}
        assert delete_call.kwargs["json"] == {"database": "shop", "names": ["users"]}
