"""
Database models package.

Exports:
  - GrammarSessionModel: Grammar fix session ORM model
  - GrammarIssueModel: Grammar issue ORM model

Dependencies: sqlalchemy, grammar_fixer.boundary.db.base
System role: Database model definitions for domain entities
"""

from grammar_fixer.boundary.db.models.grammar_session_model import GrammarSessionModel
from grammar_fixer.boundary.db.models.grammar_issue_model import GrammarIssueModel

__all__ = [
    "GrammarSessionModel",
    "GrammarIssueModel",
]
