"""
Tests for health check endpoint.
"""


class TestHealthEndpoints:

    def test_health_check(self, client):
        """Health endpoint should return healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_needs_no_token(self, client, auth_service):
        response = client.get("/health")
        assert "www-authenticate" not in response.headers
