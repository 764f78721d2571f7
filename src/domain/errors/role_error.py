"""Role errors.

RoleNameInvalid: the request named something outside the RoleName enum
(a validation failure). RoleNotFound: the name is a known enum member but
no such role is stored.
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleError(DomainError):
    """Base of the role family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleNotFound(RoleError):
    code: ErrorCode = field(default=ErrorCode.ROLE_NOT_FOUND, init=False)
    message: str = field(default="Role not found", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleNameInvalid(RoleError):
    code: ErrorCode = field(default=ErrorCode.ROLE_NAME_INVALID, init=False)
    message: str = field(default="Role name is invalid", init=False)
