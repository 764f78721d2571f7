"""Authentication domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error=...) instead)

Enumeration safety:
    An unknown email and a wrong password both produce InvalidCredentials
    with the same message. AccountDisabled and AccountLocked are only
    reported after the password has been verified, so they reveal nothing
    to a caller who does not already hold the credentials.

Usage:
    from src.domain.errors import InvalidCredentials
    from src.core.result import Failure

    if user is None or not password_ok:
        return Failure(error=InvalidCredentials())
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Base of the authentication family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidCredentials(AuthenticationError):
    code: ErrorCode = field(default=ErrorCode.INVALID_CREDENTIALS, init=False)
    message: str = field(default="Invalid email or password", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountDisabled(AuthenticationError):
    code: ErrorCode = field(default=ErrorCode.ACCOUNT_DISABLED, init=False)
    message: str = field(default="Account is disabled", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountLocked(AuthenticationError):
    code: ErrorCode = field(default=ErrorCode.ACCOUNT_LOCKED, init=False)
    message: str = field(default="Account is locked", init=False)
