"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from api.app import app


class TestHealthEndpoints:
    def test_health_check(self):
        """Health check should return healthy status."""
        with TestClient(app) as client:
            response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_readiness_check(self):
        """Readiness check should report the database as connected."""
        with TestClient(app) as client:
            response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}

    @patch("api.routes.health.ping", new_callable=AsyncMock)
    def test_readiness_store_down(self, mock_ping):
        mock_ping.side_effect = OSError("connection refused")
        with TestClient(app) as client:
            response = client.get("/api/ready")
        assert response.status_code == 503
        assert response.json() == {"status": "not_ready", "database": "unavailable"}

    def test_security_headers(self):
        with TestClient(app) as client:
            response = client.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Referrer-Policy"] == "no-referrer"
