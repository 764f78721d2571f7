"""Unit tests for User domain entity.

Tests cover:
- Partial updates (Unchanged keeps, Changed replaces)
- Password hash replacement

Architecture:
- Unit tests for domain entity (no dependencies)
- Tests pure business logic
"""

import pytest

from src.domain.entities import Role, User
from src.domain.enums import RoleName
from src.domain.value_objects import (
    UNCHANGED,
    Changed,
    CompanyName,
    Email,
    HashedPassword,
    PersonName,
)

USER_ROLE = Role(id=1, name=RoleName.USER)
ADMIN_ROLE = Role(id=2, name=RoleName.ADMIN)


def create_user(
    user_id: int | None = 1,
    company_name: str | None = "Acme",
    is_enabled: bool = True,
    is_locked: bool = False,
) -> User:
    """Helper to create User entities for testing."""
    return User(
        id=user_id,
        email=Email("john@example.com"),
        first_name=PersonName("John"),
        last_name=PersonName("Doe"),
        password_hash=HashedPassword("$2b$04$hash"),
        company_name=CompanyName(company_name) if company_name else None,
        role=USER_ROLE,
        is_enabled=is_enabled,
        is_locked=is_locked,
    )


@pytest.mark.unit
class TestUserApplyUpdate:
    """Test User.apply_update()."""

    def test_unchanged_fields_keep_their_value(self):
        # Arrange
        user = create_user()

        # Act
        user.apply_update()

        # Assert
        assert user.first_name == PersonName("John")
        assert user.last_name == PersonName("Doe")
        assert user.company_name == CompanyName("Acme")
        assert user.role == USER_ROLE

    def test_changed_fields_are_replaced(self):
        # Arrange
        user = create_user()

        # Act
        user.apply_update(
            first_name=Changed(value=PersonName("Jane")),
            last_name=UNCHANGED,
            company_name=Changed(value=CompanyName("Globex")),
            role=Changed(value=ADMIN_ROLE),
        )

        # Assert
        assert str(user.first_name) == "Jane"
        assert str(user.last_name) == "Doe"
        assert str(user.company_name) == "Globex"
        assert user.role.name is RoleName.ADMIN

    def test_update_never_touches_email_or_password(self):
        user = create_user()

        user.apply_update(first_name=Changed(value=PersonName("Jane")))

        assert user.email == Email("john@example.com")
        assert user.password_hash == HashedPassword("$2b$04$hash")


@pytest.mark.unit
class TestUserPasswordAndLogin:
    """Test password change and login eligibility."""

    def test_change_password_replaces_hash(self):
        user = create_user()

        user.change_password(HashedPassword("$2b$04$other"))

        assert user.password_hash.value == "$2b$04$other"

    def test_hashed_password_repr_is_masked(self):
        assert repr(HashedPassword("$2b$04$secret")) == "HashedPassword('***')"
