"""Repository providers.

Both repositories of a request receive the same AsyncSession, so a service
call that reads roles and writes a user commits as one unit.

The session is function-scoped: it commits when the endpoint returns and
before the response is sent, so a failed commit becomes a 500 instead of a
success status for a write that was rolled back.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        RoleRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> "UserRepository":
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_role_repository(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> "RoleRepository":
    from src.infrastructure.persistence.repositories import RoleRepository

    return RoleRepository(session=session)
