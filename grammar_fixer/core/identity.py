"""
Caller identity and the authentication gate.

The identity is resolved upstream and handed to every access layer
operation as an explicit argument; nothing here verifies credentials.

Dependencies: pydantic
System role: Authentication gate for the access layer
"""

from pydantic import BaseModel, ConfigDict, Field

from grammar_fixer.core.exceptions import UnauthorizedError


class AuthenticatedUser(BaseModel):
    """Identity of the caller as resolved by the upstream auth layer."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Opaque user identifier")


def require_user(user: AuthenticatedUser | None) -> AuthenticatedUser:
    """
    Return the authenticated identity or fail.

    Args:
        user: Identity attached to the call, if any

    Returns:
        AuthenticatedUser: The same identity

    Raises:
        UnauthorizedError: If no identity is attached
    """
    if user is None:
        raise UnauthorizedError()
    return user
