"""End-to-end tests for health endpoint."""

from fastapi.testclient import TestClient

from src.main import app


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_endpoint_returns_200(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_endpoint_with_client(self):
        client = TestClient(app)
        response = client.get("/health")

        assert response.status_code == 200
