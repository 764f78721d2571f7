"""Role domain entity."""

from dataclasses import dataclass

from src.domain.enums.role_name import RoleName


@dataclass(frozen=True)
class Role:
    """Stored role referenced by users.

    Attributes:
        id: Database identifier (assigned by seeding).
        name: Role name, unique across roles.
    """

    id: int
    name: RoleName
