"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - is_enabled / is_locked: Checked after password verification at login
"""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.role import Role


class User(BaseMutableModel):
    """User model for account management.

    Fields:
        id: Autoincrement primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        first_name: Given name
        last_name: Family name
        password_hash: Bcrypt hashed password (NEVER plaintext)
        company_name: Optional company name
        role_id: Foreign key to roles.id
        is_enabled: Account enabled flag
        is_locked: Account lock flag

    Relationships:
        - role: Many-to-one, loaded with the user (joined)

    Example:
        result = await session.execute(
            select(User).where(User.email == "user@example.com")
        )
        user = result.scalar_one_or_none()
    """

    __tablename__ = "users"

    # Unique constraint guarantees one winner for concurrent registrations
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)

    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    company_name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    role_id: Mapped[int] = mapped_column(
        ForeignKey("roles.id"),
        nullable=False,
        index=True,
    )

    is_enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Disabled accounts cannot login",
    )

    is_locked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Locked accounts cannot login",
    )

    role: Mapped[Role] = relationship(lazy="joined")
