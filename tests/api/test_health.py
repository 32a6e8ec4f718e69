from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from grammar_fixer.api.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_echoes_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "trace-123"})
    assert response.status_code == 200
    assert response.headers["X-Correlation-ID"] == "trace-123"


def test_health_check_generates_correlation_id(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]


def test_health_check_db(client, monkeypatch):
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=NullPool)
    monkeypatch.setattr("grammar_fixer.api.routers.health.get_async_engine", lambda: engine)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json()["message"] == "Database connection OK"


def test_health_check_db_unreachable(client, monkeypatch):
    engine = MagicMock()
    engine.connect.side_effect = OSError("connection refused")
    monkeypatch.setattr("grammar_fixer.api.routers.health.get_async_engine", lambda: engine)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Database unreachable"}


def test_unknown_route_returns_404(client):
    response = client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
