"""
Grammar fix session CRUD operations.

Adds owner-scoped lookups to BaseCRUD. Ownership is part of the query
predicate, so a row owned by someone else is never loaded.

Dependencies: sqlalchemy, grammar_fixer.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from grammar_fixer.boundary.db.models.grammar_session_model import GrammarSessionModel
from grammar_fixer.boundary.db.CRUD.base_crud import BaseCRUD


class GrammarSessionCRUD(BaseCRUD[GrammarSessionModel]):
    """CRUD operations for GrammarSessionModel."""

    def __init__(self) -> None:
        """Initialize GrammarSessionCRUD with GrammarSessionModel."""
        super().__init__(GrammarSessionModel)

    async def get_owned(
        self,
        session: AsyncSession,
        id: str,
        owner_id: str,
    ) -> GrammarSessionModel | None:
        """
        Retrieve a session only if it belongs to owner_id.

        Args:
            session: Async database session
            id: Session id
            owner_id: Identity that must own the row

        Returns:
            GrammarSessionModel if id and owner both match, None otherwise
        """
        return await self.get_one_where(session, id=id, owner_id=owner_id)

    async def list_by_owner(
        self,
        session: AsyncSession,
        owner_id: str,
    ) -> Sequence[GrammarSessionModel]:
        """
        Retrieve every session owned by owner_id, oldest first.

        Args:
            session: Async database session
            owner_id: Owning identity

        Returns:
            Sequence of GrammarSessionModel
        """
        return await self.list_where(session, owner_id=owner_id)


grammar_session_crud = GrammarSessionCRUD()
