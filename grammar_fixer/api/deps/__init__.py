"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_current_user,
    get_grammar_fix_service,
    get_settings_dependency,
)

__all__ = [
    "get_current_user",
    "get_grammar_fix_service",
    "get_settings_dependency",
]
