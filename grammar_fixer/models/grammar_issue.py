"""
Grammar issue schemas.

Request/response schemas for issue operations.

Dependencies: pydantic
System role: Issue API contracts
"""

from datetime import datetime

from pydantic import Field

from grammar_fixer.models.common import CamelModel


class CreateIssueRequest(CamelModel):
    """Request schema for attaching an issue to a session. Every annotation field is optional."""

    session_id: str = Field(min_length=1, description="Parent session ID")
    issue_type: str | None = Field(default=None, description="spelling, grammar, style, punctuation, ...")
    original_fragment: str | None = None
    corrected_fragment: str | None = None
    explanation: str | None = None
    severity: str | None = Field(default=None, description="minor, moderate, major, ...")


class ListIssuesRequest(CamelModel):
    """Request schema for listing the issues of a session."""

    session_id: str = Field(min_length=1, description="Parent session ID")


class GrammarIssueResponse(CamelModel):
    """Response schema for a stored issue."""

    id: str
    session_id: str
    issue_type: str | None
    original_fragment: str | None
    corrected_fragment: str | None
    explanation: str | None
    severity: str | None
    created_at: datetime


class IssuePayload(CamelModel):
    """Data payload wrapping a single issue."""

    issue: GrammarIssueResponse
