"""User lifecycle errors.

UserEmailAlreadyExists is a conflict (registration uniqueness), while
UserIdNotExists is a lookup miss shared by every id-addressed operation.
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UserError(DomainError):
    """Base of the user family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class UserEmailAlreadyExists(UserError):
    """Another user is already registered with this email."""

    code: ErrorCode = field(default=ErrorCode.EMAIL_ALREADY_EXISTS, init=False)
    message: str = field(default="User with this email already exists.", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class UserIdNotExists(UserError):
    """No user record with the requested id."""

    code: ErrorCode = field(default=ErrorCode.USER_NOT_FOUND, init=False)
    message: str = field(default="User with this id does not exist.", init=False)
