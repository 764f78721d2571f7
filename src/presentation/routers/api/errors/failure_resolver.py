"""Domain failure to HTTP outcome resolver.

Fixed, total mapping from DomainFailure to status code and body:
    - UserEmailAlreadyExists -> 409 Conflict
    - UserIdNotExists        -> 404 Not Found
    - RoleNotFound           -> 404 Not Found
    - everything else        -> 400 Bad Request

The body is the failure's own message, as text/plain.

The match ends in assert_never: adding a member to DomainFailure without a
case here is a type error (mypy).

Usage:
    match await service.get_user(user_id):
        case Success(value=user):
            ...
        case Failure(error=error):
            return failure_response(error)
"""

from dataclasses import dataclass
from typing import assert_never

from fastapi import status
from fastapi.responses import PlainTextResponse

from src.domain.errors import (
    AuthenticationError,
    CompanyNameError,
    DomainFailure,
    EmailError,
    PasswordError,
    PersonNameError,
    RoleNameInvalid,
    RoleNotFound,
    UserEmailAlreadyExists,
    UserIdNotExists,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class FailureOutcome:
    """HTTP status code and body for a domain failure."""

    status_code: int
    body: str


def resolve(failure: DomainFailure) -> FailureOutcome:
    """Map a domain failure to its HTTP outcome."""
    match failure:
        case UserEmailAlreadyExists():
            status_code = status.HTTP_409_CONFLICT
        case UserIdNotExists() | RoleNotFound():
            status_code = status.HTTP_404_NOT_FOUND
        case (
            EmailError()
            | PersonNameError()
            | PasswordError()
            | CompanyNameError()
            | RoleNameInvalid()
            | AuthenticationError()
        ):
            status_code = status.HTTP_400_BAD_REQUEST
        case _:
            assert_never(failure)

    return FailureOutcome(status_code=status_code, body=failure.message)


def failure_response(failure: DomainFailure) -> PlainTextResponse:
    """Render a domain failure as a plain-text HTTP response."""
    outcome = resolve(failure)
    return PlainTextResponse(content=outcome.body, status_code=outcome.status_code)
