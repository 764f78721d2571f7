"""Role seeder.

Inserts one role row per RoleName member. Idempotent via name uniqueness
check, so it is safe to run on every startup.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums.role_name import RoleName
from src.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)

logger = structlog.get_logger(__name__)


async def seed_roles(session: AsyncSession) -> None:
    """Seed every RoleName. Existing rows are skipped.

    Args:
        session: Async database session (caller commits).
    """
    repo = RoleRepository(session)
    seeded_count = 0
    skipped_count = 0

    for role_name in RoleName:
        if await repo.ensure_exists(role_name):
            seeded_count += 1
            logger.info("role_seeded", name=role_name.value)
        else:
            skipped_count += 1
            logger.debug("role_exists", name=role_name.value)

    logger.info(
        "role_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(RoleName),
    )
