"""
Exception hierarchy for the Grammar Fixer application.

Provides the typed failure taxonomy raised inside the access layer.
Each exception carries an ErrorCode so it can be turned into a failure
envelope without inspecting message text.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

import enum
from typing import Any


class ErrorCode(str, enum.Enum):
    """
    Failure kinds surfaced to callers.

    UNAUTHORIZED: No authenticated identity attached to the call
    NOT_FOUND: Referenced session missing or owned by someone else
    INVALID_INPUT: Structural validation of the request failed
    """

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


class GrammarFixerException(Exception):
    """Base exception for all Grammar Fixer application errors."""

    code: ErrorCode

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnauthorizedError(GrammarFixerException):
    """Raised when an operation is called without an authenticated identity."""

    code = ErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "You must be signed in to perform this action.") -> None:
        super().__init__(message)


class SessionNotFoundError(GrammarFixerException):
    """
    Raised when a grammar fix session cannot be found for the caller.

    The message never says whether the row exists under another owner.
    The id is kept in details for server-side logs only.
    """

    code = ErrorCode.NOT_FOUND

    def __init__(self, session_id: str) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the session that was requested
        """
        super().__init__("Grammar fix session not found.", {"session_id": session_id})
        self.session_id = session_id


class InvalidInputError(GrammarFixerException):
    """Raised when input validation fails."""

    code = ErrorCode.INVALID_INPUT

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field
