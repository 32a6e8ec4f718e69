"""
Test suite for dependency injection container.

Tests identity resolution from request headers and service creation.

System role: Verification of DI container
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from grammar_fixer.api.deps import get_current_user, get_grammar_fix_service, get_settings_dependency
from grammar_fixer.application.services import GrammarFixService
from grammar_fixer.configs import Settings
from grammar_fixer.configs.auth import AuthSettings
from grammar_fixer.core.identity import AuthenticatedUser


def _request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, auth=AuthSettings(_env_file=None, identity_header="X-User-Id"))


class TestGetCurrentUser:
    """Test suite for get_current_user."""

    def test_should_return_user_from_header(self, settings: Settings) -> None:
        user = get_current_user(_request({"X-User-Id": "user-alice"}), settings)

        assert user == AuthenticatedUser(id="user-alice")

    def test_should_strip_whitespace(self, settings: Settings) -> None:
        user = get_current_user(_request({"X-User-Id": "  user-alice  "}), settings)

        assert user.id == "user-alice"

    @pytest.mark.parametrize("headers", [{}, {"X-User-Id": ""}, {"X-User-Id": "   "}])
    def test_should_return_none_without_identity(self, settings: Settings, headers) -> None:
        assert get_current_user(_request(headers), settings) is None

    def test_should_honour_configured_header(self) -> None:
        settings = Settings(
            _env_file=None, auth=AuthSettings(_env_file=None, identity_header="X-Forwarded-User")
        )

        assert get_current_user(_request({"X-User-Id": "ignored"}), settings) is None
        assert get_current_user(_request({"X-Forwarded-User": "u7"}), settings).id == "u7"


class TestGetGrammarFixService:
    """Test suite for get_grammar_fix_service factory."""

    def test_should_bind_service_to_session(self) -> None:
        # Arrange
        db = AsyncMock(spec=AsyncSession)

        # Act
        service = get_grammar_fix_service(db=db)

        # Assert
        assert isinstance(service, GrammarFixService)
        assert service.db is db


class TestGetSettingsDependency:
    """Test suite for get_settings_dependency."""

    def test_should_return_cached_settings(self) -> None:
        assert get_settings_dependency() is get_settings_dependency()
