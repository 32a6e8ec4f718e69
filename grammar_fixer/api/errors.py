"""
Request-level error handlers.

FastAPI rejects bodies that are not JSON objects before a route runs.
These handlers render that rejection as the same failure envelope the
access layer returns, with the identity check applied first.

Dependencies: fastapi, grammar_fixer.configs, grammar_fixer.core
System role: Envelope rendering for errors raised outside the access layer
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from grammar_fixer.api.routers.grammar_sessions import to_response
from grammar_fixer.configs import get_settings
from grammar_fixer.core.exceptions import GrammarFixerException, InvalidInputError, UnauthorizedError
from grammar_fixer.models.common import ActionFailure

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Turn a rejected request body into a failure envelope.

    Returns 401 when the identity header is missing or blank, 400 otherwise.
    """
    identity_header = get_settings().auth.identity_header
    error: GrammarFixerException
    if not request.headers.get(identity_header, "").strip():
        error = UnauthorizedError()
    else:
        error = InvalidInputError("Request body must be a JSON object.", field="body")

    logger.warning(
        "Request rejected before reaching the access layer",
        extra={
            "path": request.url.path,
            "code": error.code.value,
            "error_types": [e.get("type") for e in exc.errors()],
        },
    )
    return to_response(ActionFailure.from_exception(error))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
