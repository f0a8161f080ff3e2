"""
Tests for health and monitoring endpoints.
"""

from fastapi.testclient import TestClient


def test_health_check(test_client: TestClient):
    """Test health endpoint returns correct structure."""
    response = test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert data["openai_configured"] is False
    assert data["storage_backend"] == "memory"
    assert data["storage_connected"] is True
    assert "service" in data
    assert "version" in data


def test_root_endpoint(test_client: TestClient):
    """Test root endpoint returns service info."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert "service" in data
    assert data["health"] == "/api/v1/health"


def test_metrics_endpoint(test_client: TestClient, patient_headers: dict):
    """Test analysis counters are exported."""
    test_client.post(
        "/api/v1/symptom-analysis",
        json={"symptoms": "cough"},
        headers=patient_headers
    )

    response = test_client.get("/api/v1/metrics")

    assert response.status_code == 200
    assert 'telehealth_symptom_analyses_total{source="local_analysis"}' in response.text
    assert "telehealth_remote_analysis_failures_total" in response.text
