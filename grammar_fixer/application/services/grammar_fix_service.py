"""
Grammar fix service orchestrator.

The ownership-scoped access layer. Every operation authenticates the
caller, validates its input, resolves ownership of any referenced
session, performs one store read or write and returns an envelope.

Dependencies: grammar_fixer.boundary.db.CRUD, grammar_fixer.models
System role: Session and issue use case orchestration
"""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from grammar_fixer.application.services.action_errors import handle_action_errors, parse_input
from grammar_fixer.boundary.db.base import utc_now
from grammar_fixer.boundary.db.CRUD.grammar_issue_crud import grammar_issue_crud
from grammar_fixer.boundary.db.CRUD.grammar_session_crud import grammar_session_crud
from grammar_fixer.boundary.db.models.grammar_session_model import GrammarSessionModel
from grammar_fixer.core.exceptions import SessionNotFoundError
from grammar_fixer.core.identity import AuthenticatedUser, require_user
from grammar_fixer.models.common import ActionFailure, ActionSuccess, ListPayload
from grammar_fixer.models.grammar_issue import (
    CreateIssueRequest,
    GrammarIssueResponse,
    IssuePayload,
    ListIssuesRequest,
)
from grammar_fixer.models.grammar_session import (
    CreateSessionRequest,
    GrammarSessionResponse,
    SessionLookupRequest,
    SessionPayload,
    UpdateSessionRequest,
)

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | None


class GrammarFixService:
    """Grammar fix service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize grammar fix service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_owned_session(self, session_id: str, owner_id: str) -> GrammarSessionModel:
        """
        Load a session the caller owns.

        Raises:
            SessionNotFoundError: If no session has this id and owner
        """
        session = await grammar_session_crud.get_owned(self.db, session_id, owner_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    @handle_action_errors
    async def create_session(
        self,
        user: AuthenticatedUser | None,
        payload: Payload,
    ) -> ActionSuccess[SessionPayload] | ActionFailure:
        """
        Store a new correction session owned by the caller.

        Args:
            user: Caller identity
            payload: language?, originalText, correctedText, overallComment?

        Returns:
            Success envelope with the created session, or a failure envelope
        """
        owner = require_user(user)
        request = parse_input(CreateSessionRequest, payload)

        now = utc_now()
        session = await grammar_session_crud.create(
            self.db,
            owner_id=owner.id,
            language=request.language,
            original_text=request.original_text,
            corrected_text=request.corrected_text,
            overall_comment=request.overall_comment,
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Grammar fix session created",
            extra={"session_id": session.id, "user_id": owner.id},
        )
        return ActionSuccess(
            data=SessionPayload(session=GrammarSessionResponse.model_validate(session))
        )

    @handle_action_errors
    async def update_session(
        self,
        user: AuthenticatedUser | None,
        payload: Payload,
    ) -> ActionSuccess[SessionPayload] | ActionFailure:
        """
        Overwrite the supplied fields of an owned session.

        updated_at is refreshed on every successful call, even when the
        values are unchanged. Concurrent updates are last-write-wins.

        Args:
            user: Caller identity
            payload: id, plus at least one of language, originalText,
                correctedText, overallComment

        Returns:
            Success envelope with the full updated session, or a failure envelope
        """
        owner = require_user(user)
        request = parse_input(UpdateSessionRequest, payload)
        session = await self._get_owned_session(request.id, owner.id)

        changes = request.changes()
        session = await grammar_session_crud.update_instance(
            self.db,
            session,
            **changes,
            updated_at=utc_now(),
        )
        logger.info(
            "Grammar fix session updated",
            extra={"session_id": session.id, "user_id": owner.id, "updates": sorted(changes)},
        )
        return ActionSuccess(
            data=SessionPayload(session=GrammarSessionResponse.model_validate(session))
        )

    @handle_action_errors
    async def get_session(
        self,
        user: AuthenticatedUser | None,
        payload: Payload,
    ) -> ActionSuccess[SessionPayload] | ActionFailure:
        """Fetch one owned session by id."""
        owner = require_user(user)
        request = parse_input(SessionLookupRequest, payload)
        session = await self._get_owned_session(request.id, owner.id)
        return ActionSuccess(
            data=SessionPayload(session=GrammarSessionResponse.model_validate(session))
        )

    @handle_action_errors
    async def list_sessions(
        self,
        user: AuthenticatedUser | None,
        payload: Payload = None,
    ) -> ActionSuccess[ListPayload[GrammarSessionResponse]] | ActionFailure:
        """
        List every session the caller owns, oldest first.

        Args:
            user: Caller identity
            payload: Ignored; accepted for a uniform call shape

        Returns:
            Success envelope with items and total, or a failure envelope
        """
        owner = require_user(user)
        sessions = await grammar_session_crud.list_by_owner(self.db, owner.id)
        items = [GrammarSessionResponse.model_validate(s) for s in sessions]
        return ActionSuccess(data=ListPayload[GrammarSessionResponse].from_items(items))

    @handle_action_errors
    async def create_issue(
        self,
        user: AuthenticatedUser | None,
        payload: Payload,
    ) -> ActionSuccess[IssuePayload] | ActionFailure:
        """
        Attach an issue annotation to an owned session.

        Args:
            user: Caller identity
            payload: sessionId, plus optional issueType, originalFragment,
                correctedFragment, explanation, severity

        Returns:
            Success envelope with the created issue, or a failure envelope
        """
        owner = require_user(user)
        request = parse_input(CreateIssueRequest, payload)
        await self._get_owned_session(request.session_id, owner.id)

        issue = await grammar_issue_crud.create(
            self.db,
            session_id=request.session_id,
            issue_type=request.issue_type,
            original_fragment=request.original_fragment,
            corrected_fragment=request.corrected_fragment,
            explanation=request.explanation,
            severity=request.severity,
            created_at=utc_now(),
        )
        logger.info(
            "Grammar issue created",
            extra={"issue_id": issue.id, "session_id": request.session_id, "user_id": owner.id},
        )
        return ActionSuccess(data=IssuePayload(issue=GrammarIssueResponse.model_validate(issue)))

    @handle_action_errors
    async def list_issues(
        self,
        user: AuthenticatedUser | None,
        payload: Payload,
    ) -> ActionSuccess[ListPayload[GrammarIssueResponse]] | ActionFailure:
        """
        List the issues of an owned session, oldest first.

        Ownership is checked on the parent session before listing; issue
        rows carry no owner of their own.

        Args:
            user: Caller identity
            payload: sessionId

        Returns:
            Success envelope with items and total, or a failure envelope
        """
        owner = require_user(user)
        request = parse_input(ListIssuesRequest, payload)
        await self._get_owned_session(request.session_id, owner.id)

        issues = await grammar_issue_crud.list_by_session(self.db, request.session_id)
        items = [GrammarIssueResponse.model_validate(i) for i in issues]
        return ActionSuccess(data=ListPayload[GrammarIssueResponse].from_items(items))
