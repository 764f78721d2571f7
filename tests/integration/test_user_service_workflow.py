"""Integration tests for user and auth services on a real database.

Walks the full lifecycle: register, read, update, change password, log in,
remove. Services are wired the way the request container wires them: both
repositories share one session per call.
"""

from contextlib import asynccontextmanager

import pytest

from src.application.dtos import (
    ChangePasswordRequest,
    LoginRequest,
    RegistrationRequest,
    UserUpdateRequest,
)
from src.application.services import AuthService, UserService
from src.core.result import Failure, Success
from src.domain.errors import (
    InvalidCredentials,
    UserEmailAlreadyExists,
    UserIdNotExists,
)
from src.infrastructure.logging import ConsoleAdapter
from src.infrastructure.persistence.repositories import RoleRepository, UserRepository
from src.infrastructure.security import BcryptPasswordService, JWTService

LOGGER = ConsoleAdapter(use_json=True)
PASSWORD_SERVICE = BcryptPasswordService(cost_factor=4)
TOKEN_SERVICE = JWTService(secret_key="w" * 32)


@asynccontextmanager
async def user_service(database):
    async with database.get_session() as session:
        yield UserService(
            user_repo=UserRepository(session),
            role_repo=RoleRepository(session),
            password_service=PASSWORD_SERVICE,
            logger=LOGGER,
        )


@asynccontextmanager
async def auth_service(database):
    async with database.get_session() as session:
        yield AuthService(
            user_repo=UserRepository(session),
            password_service=PASSWORD_SERVICE,
            token_service=TOKEN_SERVICE,
            logger=LOGGER,
        )


async def register(database, email: str = "john@example.com") -> int:
    validated = RegistrationRequest(
        first_name="John",
        last_name="Doe",
        email=email,
        password="Password123!",
        role_name="ROLE_USER",
    ).validate()
    async with user_service(database) as service:
        assert await service.create_user(validated.value) == Success(value=None)
    async with database.get_session() as session:
        user = await UserRepository(session).find_by_email(validated.value.email)
    return user.id


async def login(database, email: str, password: str):
    validated = LoginRequest(email=email, password=password).validate()
    async with auth_service(database) as service:
        return await service.authenticate_user(validated.value)


@pytest.mark.integration
class TestUserLifecycle:
    async def test_register_then_get(self, database):
        user_id = await register(database)

        async with user_service(database) as service:
            result = await service.get_user(user_id)

        assert result.value.email == "john@example.com"
        assert result.value.company_name is None

    async def test_second_registration_with_same_email_conflicts(self, database):
        await register(database)
        validated = RegistrationRequest(
            first_name="Jane",
            last_name="Roe",
            email="JOHN@example.com",
            password="Password123!",
            role_name="ROLE_ADMIN",
        ).validate()

        async with user_service(database) as service:
            result = await service.create_user(validated.value)

        assert result == Failure(error=UserEmailAlreadyExists())

    async def test_update_then_read_back(self, database):
        user_id = await register(database)
        update = UserUpdateRequest(company_name="Acme", role_name="ROLE_ADMIN").validate()

        async with user_service(database) as service:
            updated = await service.update_user(user_id, update.value)
        async with user_service(database) as service:
            fetched = await service.get_user(user_id)

        assert updated.value == fetched.value
        assert fetched.value.company_name == "Acme"
        assert fetched.value.first_name == "John"

    async def test_remove_then_get_fails(self, database):
        user_id = await register(database)

        async with user_service(database) as service:
            assert await service.remove_user(user_id) == Success(value=None)
        async with user_service(database) as service:
            assert await service.get_user(user_id) == Failure(error=UserIdNotExists())
            assert await service.remove_user(user_id) == Failure(error=UserIdNotExists())


@pytest.mark.integration
class TestAuthenticationWorkflow:
    async def test_login_issues_verifiable_token(self, database):
        user_id = await register(database)

        result = await login(database, "John@Example.com", "Password123!")

        assert isinstance(result, Success)
        assert result.value.user_id == user_id
        claims = TOKEN_SERVICE.validate_access_token(result.value.token).value
        assert claims["sub"] == str(user_id)
        assert claims["roles"] == ["ROLE_USER"]

    async def test_wrong_password_and_unknown_email_look_alike(self, database):
        await register(database)

        wrong_password = await login(database, "john@example.com", "WrongPass123!")
        unknown_email = await login(database, "ghost@example.com", "Password123!")

        assert wrong_password == unknown_email == Failure(error=InvalidCredentials())

    async def test_password_change_takes_effect(self, database):
        user_id = await register(database)
        change = ChangePasswordRequest(password="NewPassword1!").validate()

        async with user_service(database) as service:
            assert await service.update_password(user_id, change.value) == Success(
                value=None
            )

        assert isinstance(await login(database, "john@example.com", "NewPassword1!"), Success)
        assert await login(database, "john@example.com", "Password123!") == Failure(
            error=InvalidCredentials()
        )
