from src.domain.entities.role import Role
from src.domain.entities.user import User

__all__ = ["Role", "User"]
