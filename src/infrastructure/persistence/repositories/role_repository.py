"""RoleRepository - SQLAlchemy implementation of RoleRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Role entities and database RoleModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.domain.enums.role_name import RoleName
from src.infrastructure.persistence.models.role import Role as RoleModel


class RoleRepository:
    """SQLAlchemy implementation of RoleRepository protocol.

    This class does NOT inherit from RoleRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_name(self, name: RoleName) -> Role | None:
        """Find role by name.

        Args:
            name: Role name enum member.

        Returns:
            Domain Role entity if seeded, None otherwise.
        """
        stmt = select(RoleModel).where(RoleModel.name == name.value)
        result = await self.session.execute(stmt)
        role_model = result.scalar_one_or_none()

        if role_model is None:
            return None

        return self._to_domain(role_model)

    async def find_all(self) -> list[Role]:
        stmt = select(RoleModel).order_by(RoleModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars()]

    async def ensure_exists(self, name: RoleName) -> bool:
        """Insert the role row if missing.

        Returns:
            True if inserted, False if it already existed.
        """
        stmt = select(RoleModel.id).where(RoleModel.name == name.value)
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            return False

        self.session.add(RoleModel(name=name.value))
        await self.session.flush()
        return True

    @staticmethod
    def _to_domain(role_model: RoleModel) -> Role:
        return Role(id=role_model.id, name=RoleName(role_model.name))
