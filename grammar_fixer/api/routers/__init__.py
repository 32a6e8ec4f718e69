"""API routers."""

from .grammar_sessions import router as grammar_sessions_router
from .health import router as health_router

__all__ = [
    "grammar_sessions_router",
    "health_router",
]
