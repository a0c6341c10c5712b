"""
Tests for service info and health endpoints
"""
import pytest
from unittest.mock import AsyncMock, patch


class TestHome:

    def test_root_returns_service_info(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["docs"] == "/docs"
        assert "version" in body


class TestHealth:

    def test_liveness(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_with_database(self, client):
        response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_readiness_without_database(self, client):
        database = client.app.state.database
        with patch.object(database, "ping", AsyncMock(return_value=False)):
            response = client.get("/api/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not ready"

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
