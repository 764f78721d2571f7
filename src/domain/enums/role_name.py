"""Role names.

Closed set of roles a user can hold. Every member has exactly one stored
role row, seeded at startup.

Usage:
    from src.domain.enums import RoleName

    match RoleName.parse(raw):
        case Success(value=role_name):
            ...
"""

from enum import Enum

from src.core.result import Failure, Result, Success
from src.domain.errors.role_error import RoleNameInvalid


class RoleName(str, Enum):
    """Role names.

    String Enum:
        Inherits from str so values serialize directly into the database,
        JWT claims and API payloads.
    """

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"
    SUPER_ADMIN = "ROLE_SUPER_ADMIN"

    @classmethod
    def parse(cls, raw: str) -> Result["RoleName", RoleNameInvalid]:
        """Parse a raw role string.

        Matching is exact: "ROLE_USER" is valid, "role_user" and "USER" are
        not.

        Returns:
            Success(RoleName) or Failure(RoleNameInvalid).
        """
        try:
            return Success(value=cls(raw))
        except ValueError:
            return Failure(error=RoleNameInvalid())
