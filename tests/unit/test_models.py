"""
Test suite for request/response schemas.

Covers camelCase wire names, required-field rules and the partial
update contract.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from grammar_fixer.models.common import ActionSuccess, ListPayload
from grammar_fixer.models.grammar_issue import CreateIssueRequest, GrammarIssueResponse
from grammar_fixer.models.grammar_session import (
    CreateSessionRequest,
    GrammarSessionResponse,
    SessionPayload,
    UpdateSessionRequest,
)


class TestCreateSessionRequest:
    """Test suite for CreateSessionRequest."""

    def test_should_accept_camel_case_keys(self) -> None:
        request = CreateSessionRequest.model_validate(
            {"originalText": "I has a dog", "correctedText": "I have a dog", "language": "en"}
        )

        assert request.original_text == "I has a dog"
        assert request.corrected_text == "I have a dog"
        assert request.language == "en"
        assert request.overall_comment is None

    def test_should_accept_snake_case_keys(self) -> None:
        request = CreateSessionRequest.model_validate(
            {"original_text": "a", "corrected_text": "b"}
        )

        assert request.original_text == "a"

    @pytest.mark.parametrize("field", ["originalText", "correctedText"])
    def test_should_reject_empty_required_text(self, field: str) -> None:
        payload = {"originalText": "x", "correctedText": "y", field: ""}

        with pytest.raises(ValidationError):
            CreateSessionRequest.model_validate(payload)

    def test_should_reject_missing_corrected_text(self) -> None:
        with pytest.raises(ValidationError):
            CreateSessionRequest.model_validate({"originalText": "x"})


class TestUpdateSessionRequest:
    """Test suite for UpdateSessionRequest."""

    def test_should_reject_request_without_any_field(self) -> None:
        with pytest.raises(ValidationError, match="At least one field must be provided"):
            UpdateSessionRequest.model_validate({"id": "s1"})

    def test_should_treat_null_as_not_supplied(self) -> None:
        with pytest.raises(ValidationError, match="At least one field must be provided"):
            UpdateSessionRequest.model_validate({"id": "s1", "language": None})

    def test_should_reject_empty_id(self) -> None:
        with pytest.raises(ValidationError):
            UpdateSessionRequest.model_validate({"id": "", "language": "en"})

    def test_should_reject_empty_corrected_text(self) -> None:
        with pytest.raises(ValidationError):
            UpdateSessionRequest.model_validate({"id": "s1", "correctedText": ""})

    def test_changes_should_only_contain_supplied_fields(self) -> None:
        request = UpdateSessionRequest.model_validate(
            {"id": "s1", "overallComment": "clear, minor issues"}
        )

        assert request.changes() == {"overall_comment": "clear, minor issues"}

    def test_changes_should_keep_empty_optional_comment(self) -> None:
        request = UpdateSessionRequest.model_validate({"id": "s1", "overallComment": ""})

        assert request.changes() == {"overall_comment": ""}


class TestCreateIssueRequest:
    """Test suite for CreateIssueRequest."""

    def test_should_accept_session_id_only(self) -> None:
        request = CreateIssueRequest.model_validate({"sessionId": "s1"})

        assert request.session_id == "s1"
        assert request.issue_type is None
        assert request.severity is None

    def test_should_reject_missing_session_id(self) -> None:
        with pytest.raises(ValidationError):
            CreateIssueRequest.model_validate({"issueType": "grammar"})


class TestResponses:
    """Test suite for response serialization."""

    def test_session_response_should_build_from_attributes(self) -> None:
        now = datetime.now(timezone.utc)
        row = SimpleNamespace(
            id="s1",
            owner_id="u1",
            language=None,
            original_text="I has a dog",
            corrected_text="I have a dog",
            overall_comment=None,
            created_at=now,
            updated_at=now,
        )

        response = GrammarSessionResponse.model_validate(row)

        assert response.owner_id == "u1"
        assert response.created_at == now

    def test_envelope_should_serialize_camel_case(self) -> None:
        now = datetime.now(timezone.utc)
        session = GrammarSessionResponse(
            id="s1",
            owner_id="u1",
            language="en",
            original_text="a",
            corrected_text="b",
            overall_comment=None,
            created_at=now,
            updated_at=now,
        )

        body = ActionSuccess(data=SessionPayload(session=session)).model_dump(
            mode="json", by_alias=True
        )

        assert body["success"] is True
        assert body["data"]["session"]["originalText"] == "a"
        assert body["data"]["session"]["ownerId"] == "u1"
        assert "original_text" not in body["data"]["session"]

    def test_list_payload_total_should_match_items(self) -> None:
        now = datetime.now(timezone.utc)
        issues = [
            GrammarIssueResponse(
                id=f"i{n}",
                session_id="s1",
                issue_type=None,
                original_fragment=None,
                corrected_fragment=None,
                explanation=None,
                severity=None,
                created_at=now,
            )
            for n in range(3)
        ]

        payload = ListPayload[GrammarIssueResponse].from_items(issues)

        assert payload.total == 3
        assert len(payload.items) == 3
