"""Service orchestrators."""

from .grammar_fix_service import GrammarFixService

__all__ = [
    "GrammarFixService",
]
