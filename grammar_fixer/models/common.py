"""
Common response models and utilities.

Success/failure envelopes returned by every access layer operation,
plus the list wrapper used by listing operations.

Dependencies: pydantic, grammar_fixer.core.exceptions
System role: Common API response structures
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from grammar_fixer.core.exceptions import ErrorCode, GrammarFixerException

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exposing camelCase names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ActionSuccess(BaseModel, Generic[T]):
    """Generic success envelope."""

    success: Literal[True] = True
    data: T


class ActionFailure(BaseModel):
    """Typed failure envelope."""

    success: Literal[False] = False
    code: ErrorCode = Field(description="Failure kind")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")

    @classmethod
    def from_exception(cls, exc: GrammarFixerException) -> "ActionFailure":
        """
        Build a failure envelope from a domain exception.

        Only validation failures expose details; not-found failures keep
        the requested id server-side.
        """
        details = None
        if exc.code is ErrorCode.INVALID_INPUT and exc.details:
            details = exc.details
        return cls(code=exc.code, message=exc.message, details=details)


class ListPayload(BaseModel, Generic[T]):
    """Unpaginated list with its length."""

    items: list[T]
    total: int

    @classmethod
    def from_items(cls, items: list[T]) -> "ListPayload[T]":
        return cls(items=items, total=len(items))
