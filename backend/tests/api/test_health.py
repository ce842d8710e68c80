"""Tests for health check endpoints."""

from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, patch

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    def test_readiness_without_database(self):
        """The API stays up, degraded, when the user store is unreachable."""
        with patch("api.routes.health.is_connected", return_value=False):
            response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "degraded",
            "database": "unavailable",
            "catalog": "32 products",
        }

    def test_readiness_with_database(self):
        with patch("api.routes.health.is_connected", return_value=True):
            response = client.get("/api/ready")
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "connected"

    def test_unknown_route_uses_error_shape(self):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestLifespan:
    def test_startup_loads_catalog_and_bootstraps_store(self):
        with patch("api.app.bootstrap_database", new=AsyncMock(return_value=None)) as mock_bootstrap, \
             patch("api.app.configure_logging"):
            with TestClient(app) as lifespan_client:
                assert len(lifespan_client.app.state.catalog) == 32
                assert lifespan_client.get("/api/health").status_code == 200
        mock_bootstrap.assert_awaited_once()

    def test_shutdown_cancels_pending_retry(self):
        retry_task = MagicMock()
        retry_task.done.return_value = False
        with patch("api.app.bootstrap_database", new=AsyncMock(return_value=retry_task)), \
             patch("api.app.configure_logging"):
            with TestClient(app):
                pass
        retry_task.cancel.assert_called_once()
