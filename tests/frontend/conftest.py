"""
Frontend test fixtures and mocks.

Mocks the Streamlit session state and the API client responses for
isolated store testing.
"""
import pytest
from unittest.mock import MagicMock


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


def envelope(data: dict, status: int = 200) -> dict:
    """API client response carrying a success envelope."""
    return {"status": status, "data": {"success": True, "data": data}}


def error_envelope(errors: dict, status: int = 503) -> dict:
    """API client response carrying a failure envelope."""
    return {"status": status, "data": {"success": False, "errors": errors}}


@pytest.fixture
def mock_session_state():
    """Provide a mock session state for testing."""
    return MockSessionState()


@pytest.fixture
def sample_databases() -> list[dict]:
    """Database list as returned by GET /databases."""
    return [
        {"id": 0, "name": "admin", "stats": {"db": "admin", "objects": 1}, "collections": []},
        {"id": 1, "name": "logs", "stats": {}, "collections": [{"id": 0, "name": "events"}]},
        {"id": 2, "name": "shop", "stats": {"db": "shop", "objects": 2}, "collections": [{"id": 0, "name": "users"}]},
    ]


@pytest.fixture
def sample_database() -> dict:
    """Single database as returned by GET /databases/shop."""
    return {
        "name": "shop",
        "stats": {"db": "shop", "objects": 2, "dataSize": 2048.0},
        "collections": [
            {"id": 0, "name": "users", "objects": [{"_id": {"$oid": "507f1f77bcf86cd799439011"}}], "count": 1},
            {"id": 1, "name": "orders", "objects": [], "count": 0},
        ],
    }


@pytest.fixture
def mock_api_responses(sample_databases, sample_database):
    """Common API response fixtures."""
    return {
        "databases": envelope({"databases": sample_databases}),
        "database": envelope({"database": sample_database}),
        "created": envelope({"database": {"id": 4, "name": "reports", "stats": {}, "collections": []}}),
        "dropped": envelope({"status": [{"admin": "success"}, {"logs": "success"}]}),
        "partially_dropped": envelope({"status": [{"admin": "success"}, {"logs": "failed"}]}),
        "driver_error": error_envelope({"error": "connection refused"}),
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }


@pytest.fixture
def mock_api(mock_api_responses):
    """API client mock answering every call successfully."""
    api = MagicMock()
    api.get_databases.return_value = mock_api_responses["databases"]
    api.get_database.return_value = mock_api_responses["database"]
    api.create_database.return_value = mock_api_responses["created"]
    api.delete_databases.return_value = mock_api_responses["dropped"]
    return api
