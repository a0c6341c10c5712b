"""
Tests for the single-origin CORS policy
"""
import pytest

from product_api.middleware.cors import check_origin

FRONTEND_URL = "http://localhost:5173"


class TestCheckOrigin:
    """Pure origin decision"""

    def test_matching_origin_is_allowed(self):
        decision = check_origin(FRONTEND_URL, FRONTEND_URL)
        assert decision.allowed is True
        assert decision.reason is None

    def test_other_origin_is_denied(self):
        decision = check_origin("http://evil.example", FRONTEND_URL)
        assert decision.allowed is False
        assert "http://evil.example" in decision.reason
        assert FRONTEND_URL in decision.reason

    def test_missing_origin_is_denied_when_frontend_configured(self):
        decision = check_origin(None, FRONTEND_URL)
        assert decision.allowed is False
        assert FRONTEND_URL in decision.reason

    def test_comparison_is_exact(self):
        assert check_origin(FRONTEND_URL + "/", FRONTEND_URL).allowed is False
        assert check_origin(FRONTEND_URL.upper(), FRONTEND_URL).allowed is False

    def test_unconfigured_frontend(self):
        assert check_origin("http://localhost:5173", None).allowed is False
        assert check_origin(None, None).allowed is True


class TestOriginPolicyMiddleware:
    """CORS enforcement in front of the router"""

    def test_allowed_origin_gets_cors_headers(self, client):
        response = client.get("/api/products", headers={"Origin": FRONTEND_URL})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == FRONTEND_URL
        assert "Origin" in response.headers["vary"]

    def test_request_without_origin_is_rejected(self, app_without_origin):
        with app_without_origin(FRONTEND_URL) as client:
            response = client.get("/api/products")

        assert response.status_code == 403
        assert "CORS" in response.json()["error"]

    def test_request_without_origin_passes_when_frontend_unset(self, app_without_origin):
        with app_without_origin(None) as client:
            assert client.get("/api/products").status_code == 200
            assert client.get("/api/products", headers={"Origin": FRONTEND_URL}).status_code == 403

    def test_foreign_origin_is_rejected_before_routing(self, client):
        response = client.post(
            "/api/products",
            json={"name": "Monitor", "price": 10},
            headers={"Origin": "http://evil.example"},
        )

        assert response.status_code == 403
        assert "CORS" in response.json()["error"]
        assert "access-control-allow-origin" not in response.headers

        # nothing was created
        assert client.get("/api/products").json() == {"data": []}

    def test_rejection_happens_before_validation(self, client):
        response = client.get("/api/products/not-a-number", headers={"Origin": "http://evil.example"})

        assert response.status_code == 403
        assert "errors" not in response.json()

    def test_preflight_from_allowed_origin(self, client):
        response = client.options(
            "/api/products/1",
            headers={
                "Origin": FRONTEND_URL,
                "Access-Control-Request-Method": "DELETE",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == FRONTEND_URL
        assert "DELETE" in response.headers["access-control-allow-methods"]
        assert response.headers["access-control-allow-headers"] == "content-type"

    def test_preflight_from_foreign_origin(self, client):
        response = client.options(
            "/api/products",
            headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 403

    def test_responses_carry_correlation_id(self, client):
        response = client.get("/api/products", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["x-correlation-id"] == "abc-123"
