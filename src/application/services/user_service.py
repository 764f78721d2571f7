"""User account service.

Orchestrates registration, lookup, partial update, password change and
removal. Every public method returns a Result; domain failures are values,
never exceptions.

Flow (create_user):
1. Check email uniqueness
2. Resolve role by name
3. Hash password
4. Create and save User entity
5. Return Success(None)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories are injected via protocols and share one request-scoped
  session, so each method runs as a single unit of work
"""

from src.application.dtos.user_dtos import (
    UserResponse,
    ValidatedPasswordChange,
    ValidatedRegistration,
    ValidatedUserUpdate,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.domain.errors import (
    DomainFailure,
    RoleNotFound,
    UserEmailAlreadyExists,
    UserIdNotExists,
)
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    RoleRepository,
    UserRepository,
)
from src.domain.value_objects import UNCHANGED, Changed, FieldUpdate


class UserService:
    """User lifecycle operations.

    Follows hexagonal architecture:
    - Application layer (this service)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories, hashing via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize user service with dependencies.

        Args:
            user_repo: User repository for persistence.
            role_repo: Role repository for role resolution.
            password_service: Password hashing service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._password_service = password_service
        self._logger = logger

    async def create_user(
        self, registration: ValidatedRegistration
    ) -> Result[None, DomainFailure]:
        """Register a new user.

        Args:
            registration: Validated registration data.

        Returns:
            Success(None) after exactly one store write.
            Failure(UserEmailAlreadyExists) if the email is taken.
            Failure(RoleNotFound) if the role is not seeded.
        """
        if await self._user_repo.exists_by_email(registration.email):
            self._logger.info(
                "user_creation_failed",
                email=str(registration.email),
                reason=UserEmailAlreadyExists().code.value,
            )
            return Failure(error=UserEmailAlreadyExists())

        role = await self._role_repo.find_by_name(registration.role_name)
        if role is None:
            self._logger.warning(
                "user_creation_failed",
                email=str(registration.email),
                reason=RoleNotFound().code.value,
                role_name=registration.role_name.value,
            )
            return Failure(error=RoleNotFound())

        user = User(
            id=None,
            email=registration.email,
            first_name=registration.first_name,
            last_name=registration.last_name,
            password_hash=self._password_service.hash_password(registration.password),
            company_name=registration.company_name,
            role=role,
        )
        saved = await self._user_repo.save(user)

        self._logger.info(
            "user_created",
            user_id=saved.id,
            email=str(saved.email),
            role=role.name.value,
        )
        return Success(value=None)

    async def remove_user(self, user_id: int) -> Result[None, DomainFailure]:
        """Delete a user after confirming it exists."""
        if not await self._user_repo.exists_by_id(user_id):
            self._logger.info("user_removal_failed", user_id=user_id)
            return Failure(error=UserIdNotExists())

        await self._user_repo.remove_by_id(user_id)
        self._logger.info("user_removed", user_id=user_id)
        return Success(value=None)

    async def get_user(self, user_id: int) -> Result[UserResponse, DomainFailure]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(error=UserIdNotExists())
        return Success(value=UserResponse.from_entity(user))

    async def update_user(
        self, user_id: int, update: ValidatedUserUpdate
    ) -> Result[UserResponse, DomainFailure]:
        """Apply a partial update.

        The role is resolved before anything is modified, so a RoleNotFound
        failure leaves the user untouched.

        Returns:
            Success(UserResponse) with the updated projection.
            Failure(UserIdNotExists) or Failure(RoleNotFound).
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            self._logger.info("user_update_failed", user_id=user_id)
            return Failure(error=UserIdNotExists())

        role: FieldUpdate[Role] = UNCHANGED
        if isinstance(update.role_name, Changed):
            found = await self._role_repo.find_by_name(update.role_name.value)
            if found is None:
                self._logger.warning(
                    "user_update_failed",
                    user_id=user_id,
                    reason=RoleNotFound().code.value,
                    role_name=update.role_name.value.value,
                )
                return Failure(error=RoleNotFound())
            role = Changed(value=found)

        user.apply_update(
            first_name=update.first_name,
            last_name=update.last_name,
            company_name=update.company_name,
            role=role,
        )
        saved = await self._user_repo.save(user)

        self._logger.info("user_updated", user_id=user_id)
        return Success(value=UserResponse.from_entity(saved))

    async def update_password(
        self, user_id: int, change: ValidatedPasswordChange
    ) -> Result[None, DomainFailure]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            self._logger.info("password_update_failed", user_id=user_id)
            return Failure(error=UserIdNotExists())

        user.change_password(self._password_service.hash_password(change.password))
        await self._user_repo.save(user)

        self._logger.info("password_updated", user_id=user_id)
        return Success(value=None)
