"""
Tests for health endpoint
"""
from app.constants import SERVICE_NAME


def test_health_endpoint(client):
    """Health check answers without authentication"""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": SERVICE_NAME}
