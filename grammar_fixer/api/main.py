"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, grammar_fixer.api, grammar_fixer.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grammar_fixer import __version__
from grammar_fixer.api import api_router
from grammar_fixer.api.errors import register_exception_handlers
from grammar_fixer.boundary.db.connection import dispose_engine
from grammar_fixer.boundary.db.create_tables import create_all_tables
from grammar_fixer.configs import get_settings
from grammar_fixer.observability.logger import configure_logging
from grammar_fixer.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, optionally creates tables, and disposes the
    engine's connection pool on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup", extra={"environment": settings.environment})

    if settings.database.auto_create_tables:
        await create_all_tables()

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Grammar Fixer API",
        description="Ownership-scoped storage for text correction sessions and issue annotations",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins_list(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "grammar_fixer.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )
