"""ServiceResult and ServiceError — the boundary contract for host programs.

Use-cases return plain values and raise domain errors through ``Raise``.
A host program that needs a serializable envelope runs a use-case with
``either`` and converts the outcome with :func:`to_service_result`::

    outcome = either(lambda errors: service.follow(errors, a, b))
    result = to_service_result("follow", outcome)
"""

from __future__ import annotations

from typing import Any, assert_never

from pydantic import BaseModel, Field

from follownet.domain.errors import DomainError, UserAlreadyFollowed, UserNotFound
from follownet.domain.raising import Err, Ok, Outcome
from follownet.domain.users import User
from follownet.services.following import ALREADY_FOLLOWED_MESSAGE, USER_NOT_FOUND_MESSAGE


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Serializable envelope for a use-case outcome.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"follow"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def describe(error: DomainError) -> str:
    """Message for a domain error kind, worded as the use-cases word it."""
    match error:
        case UserNotFound():
            return USER_NOT_FOUND_MESSAGE
        case UserAlreadyFollowed():
            return ALREADY_FOLLOWED_MESSAGE
        case _:
            assert_never(error)


def to_service_result(op: str, outcome: Outcome[User | str, DomainError]) -> ServiceResult:
    """Convert a use-case outcome into a ServiceResult.

    ``User`` values are dumped in JSON mode under ``"user"``; strings are
    placed under ``"message"``.
    """
    match outcome:
        case Ok(User() as user):
            return ServiceResult(ok=True, op=op, data={"user": user.model_dump(mode="json")})
        case Ok(str() as message):
            return ServiceResult(ok=True, op=op, data={"message": message})
        case Err(error):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=error.code, message=describe(error)),
            )
        case _:
            assert_never(outcome)
