"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: grammar_fixer.configs, grammar_fixer.application, grammar_fixer.boundary
System role: DI container for service and identity injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from grammar_fixer.application.services import GrammarFixService
from grammar_fixer.boundary.db import get_async_db
from grammar_fixer.configs import Settings, get_settings
from grammar_fixer.core.identity import AuthenticatedUser


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> AuthenticatedUser | None:
    """
    Read the upstream-resolved caller identity.

    Returns None when the identity header is missing or blank; the
    access layer turns that into an UNAUTHORIZED failure.

    Args:
        request: Incoming request
        settings: Application settings (injected)

    Returns:
        AuthenticatedUser | None: Caller identity if present
    """
    user_id = request.headers.get(settings.auth.identity_header, "").strip()
    if not user_id:
        return None
    return AuthenticatedUser(id=user_id)


def get_grammar_fix_service(db: AsyncSession = Depends(get_async_db)) -> GrammarFixService:
    """
    Get grammar fix service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        GrammarFixService: Access layer bound to the request's session
    """
    return GrammarFixService(db=db)
