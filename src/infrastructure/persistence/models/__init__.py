"""ORM tables `roles` and `users`.

Repositories import these as RoleModel/UserModel; the domain layer never
sees them.
"""

from src.infrastructure.persistence.models.role import Role
from src.infrastructure.persistence.models.user import User

__all__ = ["Role", "User"]
