"""RoleRepository protocol for role lookup and seeding."""

from typing import Protocol

from src.domain.entities.role import Role
from src.domain.enums.role_name import RoleName


class RoleRepository(Protocol):
    """Role repository protocol (port).

    Roles are reference data: seeded once at startup, read afterwards.
    """

    async def find_by_name(self, name: RoleName) -> Role | None:
        """Find the stored role for a role name.

        Returns:
            Role if seeded, None otherwise.
        """
        ...

    async def find_all(self) -> list[Role]:
        """Return every stored role ordered by id."""
        ...

    async def ensure_exists(self, name: RoleName) -> bool:
        """Insert the role if missing.

        Returns:
            True if a row was inserted, False if it already existed.
        """
        ...
