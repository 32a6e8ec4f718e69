from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from grammar_fixer.api import main
from grammar_fixer.api.deps import get_grammar_fix_service
from grammar_fixer.configs import Settings


@pytest.fixture
def client():
    app = main.create_app()
    service = AsyncMock()
    app.dependency_overrides[get_grammar_fix_service] = lambda: service
    return TestClient(app)


def test_debug_follows_settings(monkeypatch):
    monkeypatch.setattr(main, "get_settings", lambda: Settings(_env_file=None, debug=True))
    assert main.create_app().debug is True

    monkeypatch.setattr(main, "get_settings", lambda: Settings(_env_file=None, debug=False))
    assert main.create_app().debug is False


def test_malformed_body_renders_envelope(client):
    response = client.post(
        "/api/v1/grammar-sessions",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"
    assert response.headers["X-Correlation-ID"]


def test_array_body_with_identity_renders_invalid_input(client):
    response = client.post(
        "/api/v1/grammar-sessions",
        json=["I has a dog"],
        headers={"X-User-Id": "user-alice"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
