"""Application service providers.

Services are rebuilt per request around that request's repositories; the
password hasher, token service and logger are process singletons.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import get_role_repository, get_user_repository

if TYPE_CHECKING:
    from src.application.services import AuthService, UserService
    from src.infrastructure.persistence.repositories import (
        RoleRepository,
        UserRepository,
    )


async def get_user_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
    role_repo: "RoleRepository" = Depends(get_role_repository),
) -> "UserService":
    """UserService for registration, lookup, update, password change and delete."""
    from src.application.services import UserService

    return UserService(
        user_repo=user_repo,
        role_repo=role_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_auth_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "AuthService":
    """AuthService for login and bearer-token resolution."""
    from src.application.services import AuthService

    return AuthService(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )
