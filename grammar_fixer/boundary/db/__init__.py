"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IDMixin, CreatedAtMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - GrammarSessionModel, GrammarIssueModel: Core domain entities
  - grammar_session_crud, grammar_issue_crud: CRUD operation singletons

Dependencies: sqlalchemy, grammar_fixer.configs
System role: Database adapter providing persistent storage for correction
sessions and their issue annotations.
"""

from grammar_fixer.boundary.db.base import Base, CreatedAtMixin, IDMixin, TimestampMixin
from grammar_fixer.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from grammar_fixer.boundary.db.models import GrammarIssueModel, GrammarSessionModel
from grammar_fixer.boundary.db.CRUD import (
    BaseCRUD,
    GrammarIssueCRUD,
    GrammarSessionCRUD,
    grammar_issue_crud,
    grammar_session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "IDMixin",
    "TimestampMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "GrammarIssueModel",
    "GrammarSessionModel",
    # CRUD classes
    "BaseCRUD",
    "GrammarIssueCRUD",
    "GrammarSessionCRUD",
    # CRUD singletons
    "grammar_issue_crud",
    "grammar_session_crud",
]
