"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from grammar_fixer.boundary.db.CRUD import grammar_session_crud

    session = await grammar_session_crud.get_owned(db, session_id, user.id)
"""

from grammar_fixer.boundary.db.CRUD.base_crud import BaseCRUD
from grammar_fixer.boundary.db.CRUD.grammar_session_crud import GrammarSessionCRUD, grammar_session_crud
from grammar_fixer.boundary.db.CRUD.grammar_issue_crud import GrammarIssueCRUD, grammar_issue_crud

__all__ = [
    "BaseCRUD",
    "GrammarSessionCRUD",
    "grammar_session_crud",
    "GrammarIssueCRUD",
    "grammar_issue_crud",
]
