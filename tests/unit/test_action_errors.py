"""
Test suite for access layer input parsing and the error decorator.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from grammar_fixer.application.services.action_errors import handle_action_errors, parse_input
from grammar_fixer.core.exceptions import ErrorCode, InvalidInputError, SessionNotFoundError
from grammar_fixer.core.identity import AuthenticatedUser
from grammar_fixer.models.common import ActionFailure
from grammar_fixer.models.grammar_session import CreateSessionRequest, UpdateSessionRequest


class TestParseInput:
    """Test suite for parse_input."""

    def test_should_return_validated_model(self) -> None:
        request = parse_input(
            CreateSessionRequest, {"originalText": "I has a dog", "correctedText": "I have a dog"}
        )

        assert isinstance(request, CreateSessionRequest)
        assert request.corrected_text == "I have a dog"

    def test_should_name_offending_field(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_input(CreateSessionRequest, {"originalText": "", "correctedText": "x"})

        assert exc_info.value.field == "originalText"
        assert exc_info.value.message.startswith("originalText: ")

    def test_none_payload_should_fail_as_invalid_input(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_input(CreateSessionRequest, None)

    def test_model_level_error_should_have_no_field(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_input(UpdateSessionRequest, {"id": "s1"})

        assert exc_info.value.field is None
        assert exc_info.value.message == "At least one field must be provided to update."


class _Operations:
    """Minimal holder for decorated operations."""

    def __init__(self, action) -> None:
        self.action = action

    @handle_action_errors
    async def run(self, user, payload=None):
        return await self.action(user, payload)


class TestHandleActionErrors:
    """Test suite for handle_action_errors."""

    async def test_should_pass_through_result(self) -> None:
        # Arrange
        ops = _Operations(AsyncMock(return_value="ok"))

        # Act
        result = await ops.run(AuthenticatedUser(id="u1"), {"a": 1})

        # Assert
        assert result == "ok"
        ops.action.assert_awaited_once()

    async def test_should_convert_domain_error_to_failure(self, caplog) -> None:
        # Arrange
        ops = _Operations(AsyncMock(side_effect=SessionNotFoundError("s1")))

        # Act
        with caplog.at_level(logging.WARNING):
            result = await ops.run(AuthenticatedUser(id="u1"))

        # Assert
        assert isinstance(result, ActionFailure)
        assert result.code is ErrorCode.NOT_FOUND
        assert "Grammar fix action rejected" in caplog.text

    async def test_should_reraise_unexpected_errors(self) -> None:
        ops = _Operations(AsyncMock(side_effect=RuntimeError("connection reset")))

        with pytest.raises(RuntimeError, match="connection reset"):
            await ops.run(AuthenticatedUser(id="u1"))

    def test_should_preserve_function_name(self) -> None:
        assert _Operations.run.__name__ == "run"
