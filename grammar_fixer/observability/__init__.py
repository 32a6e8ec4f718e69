"""
Observability package.

Logging configuration, correlation id propagation and request logging middleware.
"""

from grammar_fixer.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from grammar_fixer.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
