"""SQLAlchemy adapters for the domain repository protocols."""

from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = ["RoleRepository", "UserRepository"]
