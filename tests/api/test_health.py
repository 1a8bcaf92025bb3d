import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from course_registry.api.main import create_app
from course_registry.boundary.db import get_async_db


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "message": "Course Registration API is running",
    }


def test_health_check_db(client):
    session = AsyncMock()
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    session.execute.assert_awaited_once()


def test_health_check_db_failure(client):
    session = AsyncMock()
    session.execute.side_effect = ConnectionError("refused")
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "unhealthy", "message": "Database connection failed"}


def test_correlation_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/api/v1/health")

    assert response.headers["X-Correlation-ID"]
