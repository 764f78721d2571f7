"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.

Writes are flushed, not committed: the session owner (Database.get_session)
commits once per request, so a service call is one unit of work.
"""

from dataclasses import replace

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.domain.enums.role_name import RoleName
from src.domain.value_objects import (
    CompanyName,
    Email,
    HashedPassword,
    PersonName,
)
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This is an adapter that implements the UserRepository port.
    It handles the mapping between domain User entities and database UserModel.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email(email)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def exists_by_email(self, email: Email) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_id(self, user_id: int) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's database identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: Email) -> User | None:
        """Find user by email address.

        Emails are stored normalized (lowercase), so equality is enough.

        Args:
            email: Normalized email value object.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one.

        Args:
            user: Domain User entity to persist.

        Returns:
            The saved user. New users come back with their assigned id.

        Raises:
            IntegrityError: If the email unique constraint is violated.
            NoResultFound: If updating a user that no longer exists.
        """
        if user.id is None:
            user_model = self._to_model(user)
            self.session.add(user_model)
            await self.session.flush()
            return replace(user, id=user_model.id)

        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        # Email is immutable after registration
        user_model.first_name = user.first_name.value
        user_model.last_name = user.last_name.value
        user_model.password_hash = user.password_hash.value
        user_model.company_name = user.company_name.value if user.company_name else None
        user_model.role_id = user.role.id
        user_model.is_enabled = user.is_enabled
        user_model.is_locked = user.is_locked

        await self.session.flush()
        return user

    async def remove_by_id(self, user_id: int) -> None:
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.flush()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Stored values were validated on the way in; the value object
        constructors re-check them and raise ValueError on corrupted rows.
        """
        return User(
            id=user_model.id,
            email=Email(user_model.email),
            first_name=PersonName(user_model.first_name),
            last_name=PersonName(user_model.last_name),
            password_hash=HashedPassword(user_model.password_hash),
            company_name=(
                CompanyName(user_model.company_name)
                if user_model.company_name is not None
                else None
            ),
            role=Role(id=user_model.role.id, name=RoleName(user_model.role.name)),
            is_enabled=user_model.is_enabled,
            is_locked=user_model.is_locked,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert a new domain entity to a database model."""
        return UserModel(
            email=user.email.value,
            first_name=user.first_name.value,
            last_name=user.last_name.value,
            password_hash=user.password_hash.value,
            company_name=user.company_name.value if user.company_name else None,
            role_id=user.role.id,
            is_enabled=user.is_enabled,
            is_locked=user.is_locked,
        )
