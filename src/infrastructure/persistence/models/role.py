"""Role database model.

Reference data: one row per RoleName member, inserted by the startup seeder.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Role(BaseMutableModel):
    """Role model.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at: Timestamp when seeded (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        name: Role name value (e.g. "ROLE_USER"), unique
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True,
        comment="Role name (ROLE_USER, ROLE_ADMIN, ROLE_SUPER_ADMIN)",
    )
