"""
Grammar issue CRUD operations.

Dependencies: sqlalchemy, grammar_fixer.boundary.db.models
System role: Issue persistence operations
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from grammar_fixer.boundary.db.models.grammar_issue_model import GrammarIssueModel
from grammar_fixer.boundary.db.CRUD.base_crud import BaseCRUD


class GrammarIssueCRUD(BaseCRUD[GrammarIssueModel]):
    """CRUD operations for GrammarIssueModel."""

    def __init__(self) -> None:
        """Initialize GrammarIssueCRUD with GrammarIssueModel."""
        super().__init__(GrammarIssueModel)

    async def list_by_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[GrammarIssueModel]:
        """
        Retrieve all issues attached to a session, oldest first.

        Callers must check session ownership first.

        Args:
            session: Async database session
            session_id: Parent session id

        Returns:
            Sequence of GrammarIssueModel
        """
        return await self.list_where(session, session_id=session_id)


grammar_issue_crud = GrammarIssueCRUD()
