"""
Tests for health check endpoints.

These tests verify:
- Basic health endpoint returns 200
- Readiness check reports database connection status
- Health degrades gracefully when MongoDB is down
"""

from unittest.mock import AsyncMock, MagicMock, patch


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_endpoint_returns_200_when_api_running(self, client):
        """Basic health check should return 200 if API is up."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_root_describes_api(self, client):
        response = client.get("/")

        assert response.json()["name"] == "Mongo Admin API"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    def test_readiness_returns_healthy_when_mongodb_answers(self, client):
        """Readiness check should report healthy when ping succeeds."""
        with patch("mongoadmin.routers.health.open_driver") as mock_open:
            mock_driver = MagicMock()
            mock_driver.ping = AsyncMock(return_value={"ok": 1})
            mock_open.return_value = mock_driver

            response = client.get("/health/ready")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["checks"]["mongodb"] == "healthy"
            mock_driver.close.assert_called_once()

    def test_readiness_reports_mongodb_unhealthy_when_ping_fails(self, client):
        """Readiness should report MongoDB unhealthy and still close the connection."""
        with patch("mongoadmin.routers.health.open_driver") as mock_open:
            mock_driver = MagicMock()
            mock_driver.ping = AsyncMock(side_effect=Exception("Connection refused"))
            mock_open.return_value = mock_driver

            response = client.get("/health/ready")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "degraded"
            assert "unhealthy" in data["checks"]["mongodb"]
            mock_driver.close.assert_called_once()

    def test_readiness_reports_unconfigured_server(self, client):
        """A missing server URI degrades readiness instead of failing."""
        from mongoadmin.core.exceptions import DriverUnavailableError

        with patch("mongoadmin.routers.health.open_driver") as mock_open:
            mock_open.side_effect = DriverUnavailableError("No MongoDB server is configured")

            response = client.get("/health/ready")

            assert response.json()["status"] == "degraded"
