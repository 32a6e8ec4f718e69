"""
Access layer error handling utilities.

Provides input parsing that maps pydantic failures onto the domain
taxonomy, and a decorator that turns domain exceptions raised inside an
operation into failure envelopes.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from grammar_fixer.core.exceptions import GrammarFixerException, InvalidInputError
from grammar_fixer.models.common import ActionFailure

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def parse_input(schema: type[RequestT], payload: Mapping[str, Any] | None) -> RequestT:
    """
    Validate a raw payload against a request schema.

    Args:
        schema: Pydantic request model
        payload: Raw input (camelCase or snake_case keys); None means empty

    Returns:
        Validated request model

    Raises:
        InvalidInputError: Naming the first offending field
    """
    try:
        return schema.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        message = error["msg"].removeprefix("Value error, ")
        if field:
            message = f"{field}: {message}"
        raise InvalidInputError(message, field=field) from e


def handle_action_errors(func: F) -> F:
    """
    Decorator converting domain errors into ActionFailure envelopes.

    The wrapped method must take the caller identity as its first
    argument after self. Unclassified exceptions (store failures) are
    logged and propagate.
    """
    @functools.wraps(func)
    async def wrapper(self: Any, user: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, user, *args, **kwargs)

        except GrammarFixerException as e:
            logger.warning(
                "Grammar fix action rejected",
                extra={
                    "operation": func.__name__,
                    "code": e.code.value,
                    "user_id": getattr(user, "id", None),
                    "error": str(e),
                },
            )
            return ActionFailure.from_exception(e)

        except Exception as e:
            logger.exception(
                "Unexpected failure in grammar fix action",
                extra={"operation": func.__name__, "error": str(e)},
            )
            raise

    return wrapper  # type: ignore
