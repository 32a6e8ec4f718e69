"""
Grammar fix session API endpoints.

Routes:
- POST /grammar-sessions - Create session
- GET /grammar-sessions - List caller's sessions
- GET /grammar-sessions/{session_id} - Get one session
- PATCH /grammar-sessions/{session_id} - Partially update session
- POST /grammar-sessions/{session_id}/issues - Attach issue
- GET /grammar-sessions/{session_id}/issues - List session issues

Bodies are passed to the access layer as raw JSON objects so that the
identity check always runs before validation. The envelope returned by
the service is the response body; failures pick the status code.

Dependencies: grammar_fixer.application.services, grammar_fixer.api.deps
System role: Grammar fix HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from grammar_fixer.api.deps import get_current_user, get_grammar_fix_service
from grammar_fixer.application.services import GrammarFixService
from grammar_fixer.core.exceptions import ErrorCode
from grammar_fixer.core.identity import AuthenticatedUser
from grammar_fixer.models.common import ActionFailure, ActionSuccess

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grammar-sessions", tags=["grammar-sessions"])

FAILURE_STATUS = {
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


def to_response(
    result: ActionSuccess[Any] | ActionFailure,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Render an access layer envelope as an HTTP response.

    Args:
        result: Envelope returned by GrammarFixService
        success_status: Status code for a success envelope

    Returns:
        JSONResponse: Envelope body with camelCase field names
    """
    if isinstance(result, ActionFailure):
        status_code = FAILURE_STATUS[result.code]
    else:
        status_code = success_status
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.post("")
async def create_session(
    payload: dict[str, Any] | None = Body(default=None),
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """
    Create a grammar fix session owned by the caller.

    Returns:
        201 with {success, data: {session}}, or 400/401
    """
    result = await service.create_session(user, payload)
    return to_response(result, status.HTTP_201_CREATED)


@router.get("")
async def list_sessions(
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """List the caller's sessions: {success, data: {items, total}}."""
    result = await service.list_sessions(user)
    return to_response(result)


@router.get("/{session_id}")
async def get_session(
    session_id: str,
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """Get one of the caller's sessions, or 404."""
    result = await service.get_session(user, {"id": session_id})
    return to_response(result)


@router.patch("/{session_id}")
async def update_session(
    session_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """
    Partially update one of the caller's sessions.

    The path id wins over any id in the body.

    Returns:
        200 with {success, data: {session}}, or 400/401/404
    """
    result = await service.update_session(user, {**(payload or {}), "id": session_id})
    return to_response(result)


@router.post("/{session_id}/issues")
async def create_issue(
    session_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """
    Attach an issue to one of the caller's sessions.

    Returns:
        201 with {success, data: {issue}}, or 400/401/404
    """
    result = await service.create_issue(user, {**(payload or {}), "sessionId": session_id})
    return to_response(result, status.HTTP_201_CREATED)


@router.get("/{session_id}/issues")
async def list_issues(
    session_id: str,
    user: AuthenticatedUser | None = Depends(get_current_user),
    service: GrammarFixService = Depends(get_grammar_fix_service),
) -> JSONResponse:
    """List the issues of one of the caller's sessions, or 404."""
    result = await service.list_issues(user, {"sessionId": session_id})
    return to_response(result)
