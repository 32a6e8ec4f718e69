"""
Grammar fix session schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime

from pydantic import Field, model_validator

from grammar_fixer.models.common import CamelModel

UPDATABLE_SESSION_FIELDS = ("language", "original_text", "corrected_text", "overall_comment")


class CreateSessionRequest(CamelModel):
    """Request schema for creating a new grammar fix session."""

    language: str | None = Field(default=None, description="Language tag, e.g. 'en'")
    original_text: str = Field(min_length=1, description="Text as submitted")
    corrected_text: str = Field(min_length=1, description="Best corrected version")
    overall_comment: str | None = Field(default=None, description="Summary feedback")


class UpdateSessionRequest(CamelModel):
    """
    Request schema for a partial session update.

    Omitted (or null) fields keep their stored values.
    """

    id: str = Field(min_length=1, description="Session ID")
    language: str | None = None
    original_text: str | None = Field(default=None, min_length=1)
    corrected_text: str | None = Field(default=None, min_length=1)
    overall_comment: str | None = None

    @model_validator(mode="after")
    def require_any_field(self) -> "UpdateSessionRequest":
        if all(getattr(self, name) is None for name in UPDATABLE_SESSION_FIELDS):
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict[str, str]:
        """Supplied fields keyed by column name."""
        return {
            name: getattr(self, name)
            for name in UPDATABLE_SESSION_FIELDS
            if getattr(self, name) is not None
        }


class SessionLookupRequest(CamelModel):
    """Request schema addressing one session by ID."""

    id: str = Field(min_length=1, description="Session ID")


class GrammarSessionResponse(CamelModel):
    """Response schema for a stored session."""

    id: str
    owner_id: str
    language: str | None
    original_text: str
    corrected_text: str
    overall_comment: str | None
    created_at: datetime
    updated_at: datetime


class SessionPayload(CamelModel):
    """Data payload wrapping a single session."""

    session: GrammarSessionResponse
