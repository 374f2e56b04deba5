from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from interview_prep.api.main import create_app
from interview_prep.boundary.db import get_async_db


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client):
    db = AsyncMock(spec=AsyncSession)
    client.app.dependency_overrides[get_async_db] = lambda: db

    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    db.execute.assert_awaited_once()


def test_health_check_db_unreachable(client):
    db = AsyncMock(spec=AsyncSession)
    db.execute.side_effect = ConnectionRefusedError("connection refused")
    client.app.dependency_overrides[get_async_db] = lambda: db

    response = client.get("/health/db")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_response_carries_correlation_id(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
