"""Unit tests for request DTO validation.

Tests cover:
- Field order: the first failing field decides the reported failure
- Missing required fields fail as Empty
- Optional company name and partial-update fields
- Login validation (email first, then password)
- Outbound projection never exposing the hash
"""

import pytest

from src.application.dtos import (
    ChangePasswordRequest,
    LoginRequest,
    RegistrationRequest,
    UserResponse,
    UserUpdateRequest,
)
from src.core.result import Failure, Success
from src.domain.entities import Role, User
from src.domain.enums import RoleName
from src.domain.errors import (
    CompanyNameInvalidFormat,
    EmailEmpty,
    EmailMissingAtSymbol,
    NameEmpty,
    NameTooShort,
    PasswordEmpty,
    PasswordMissingDigit,
    PasswordTooShort,
    RoleNameInvalid,
)
from src.domain.value_objects import (
    UNCHANGED,
    Changed,
    CompanyName,
    Email,
    HashedPassword,
    PersonName,
)


def registration(**overrides: str | None) -> RegistrationRequest:
    fields: dict[str, str | None] = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "password": "Password123!",
        "company_name": None,
        "role_name": "ROLE_USER",
    }
    fields.update(overrides)
    return RegistrationRequest(**fields)


@pytest.mark.unit
class TestRegistrationRequest:
    """Test RegistrationRequest.validate()."""

    def test_valid_request_produces_validated_dto(self):
        # Act
        result = registration(email="John@Example.com").validate()

        # Assert
        assert isinstance(result, Success)
        validated = result.value
        assert validated.first_name == PersonName("John")
        assert validated.email.value == "john@example.com"
        assert validated.company_name is None
        assert validated.role_name is RoleName.USER

    def test_company_name_is_validated_when_present(self):
        result = registration(company_name="Acme & Co").validate()

        assert isinstance(result, Success)
        assert result.value.company_name == CompanyName("Acme & Co")

    def test_invalid_company_name_fails(self):
        result = registration(company_name="Acme!").validate()

        assert isinstance(result.error, CompanyNameInvalidFormat)

    def test_first_invalid_field_wins(self):
        """first_name is checked before email and password."""
        result = registration(
            first_name="J", email="bad", password="weak"
        ).validate()

        assert isinstance(result, Failure)
        assert isinstance(result.error, NameTooShort)

    def test_email_checked_before_password(self):
        result = registration(email="bad", password="weak").validate()

        assert isinstance(result.error, EmailMissingAtSymbol)

    def test_missing_fields_fail_as_empty(self):
        assert isinstance(RegistrationRequest().validate().error, NameEmpty)
        assert isinstance(registration(email=None).validate().error, EmailEmpty)
        assert isinstance(registration(password=None).validate().error, PasswordEmpty)

    @pytest.mark.parametrize("role", [None, "", "ROLE_GUEST", "admin"])
    def test_invalid_role_fails(self, role):
        result = registration(role_name=role).validate()

        assert result == Failure(error=RoleNameInvalid())


@pytest.mark.unit
class TestUserUpdateRequest:
    """Test UserUpdateRequest.validate()."""

    def test_empty_request_changes_nothing(self):
        result = UserUpdateRequest().validate()

        assert isinstance(result, Success)
        assert result.value.first_name is UNCHANGED
        assert result.value.last_name is UNCHANGED
        assert result.value.company_name is UNCHANGED
        assert result.value.role_name is UNCHANGED

    def test_supplied_fields_are_changed(self):
        result = UserUpdateRequest(first_name="Jane", role_name="ROLE_ADMIN").validate()

        assert result.value.first_name == Changed(value=PersonName("Jane"))
        assert result.value.role_name == Changed(value=RoleName.ADMIN)
        assert result.value.last_name is UNCHANGED

    def test_invalid_supplied_field_fails(self):
        result = UserUpdateRequest(last_name="D").validate()

        assert isinstance(result.error, NameTooShort)

    def test_invalid_role_fails(self):
        result = UserUpdateRequest(role_name="ROLE_GUEST").validate()

        assert result == Failure(error=RoleNameInvalid())


@pytest.mark.unit
class TestChangePasswordRequest:
    def test_valid_password(self):
        result = ChangePasswordRequest(password="NewPassword1!").validate()

        assert isinstance(result, Success)
        assert result.value.password.value == "NewPassword1!"

    def test_missing_password_is_empty(self):
        assert isinstance(ChangePasswordRequest().validate().error, PasswordEmpty)

    def test_weak_password_fails(self):
        result = ChangePasswordRequest(password="NoDigits!!").validate()

        assert isinstance(result.error, PasswordMissingDigit)


@pytest.mark.unit
class TestLoginRequest:
    def test_valid_login(self):
        result = LoginRequest(email="JOHN@example.com", password="Password123!").validate()

        assert isinstance(result, Success)
        assert result.value.email == Email("john@example.com")

    def test_email_checked_first(self):
        result = LoginRequest(email="", password="").validate()

        assert isinstance(result.error, EmailEmpty)

    def test_password_rules_apply_at_login(self):
        result = LoginRequest(email="john@example.com", password="short").validate()

        assert isinstance(result.error, PasswordTooShort)


@pytest.mark.unit
class TestUserResponse:
    def _user(self, user_id: int | None) -> User:
        return User(
            id=user_id,
            email=Email("john@example.com"),
            first_name=PersonName("John"),
            last_name=PersonName("Doe"),
            password_hash=HashedPassword("$2b$04$hash"),
            company_name=None,
            role=Role(id=1, name=RoleName.USER),
        )

    def test_projection_fields(self):
        response = UserResponse.from_entity(self._user(7))

        assert response == UserResponse(
            id=7,
            email="john@example.com",
            first_name="John",
            last_name="Doe",
            company_name=None,
        )
        assert not hasattr(response, "password_hash")

    def test_unsaved_user_cannot_be_projected(self):
        with pytest.raises(ValueError):
            UserResponse.from_entity(self._user(None))
