"""User DTOs (Data Transfer Objects).

Raw request DTOs carry untrusted strings from the presentation layer. Each
exposes one operation, `validate()`, which turns it into the matching
validated DTO or the first failure encountered.

Field validation order is fixed (it decides which single failure is
reported when several fields are invalid):
    - Registration: first_name, last_name, email, password, company_name,
      role_name
    - Update: first_name, last_name, company_name, role_name

Missing required values are validated as empty strings, so they fail with
the field's Empty variant.

DTOs:
    - RegistrationRequest -> ValidatedRegistration
    - UserUpdateRequest -> ValidatedUserUpdate
    - ChangePasswordRequest -> ValidatedPasswordChange
    - UserResponse: outbound projection (never carries the password hash)
"""

from dataclasses import dataclass

from src.core.result import Failure, Result, Success, bind
from src.domain.entities.user import User
from src.domain.enums.role_name import RoleName
from src.domain.errors import DomainFailure, PasswordError
from src.domain.value_objects import (
    UNCHANGED,
    CompanyName,
    Email,
    FieldUpdate,
    Password,
    PersonName,
    validate_optional,
)


@dataclass(frozen=True, kw_only=True)
class ValidatedRegistration:
    """Registration data that passed every field rule.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Normalized email.
        password: Plaintext password meeting complexity rules.
        company_name: Optional company.
        role_name: Requested role.
    """

    first_name: PersonName
    last_name: PersonName
    email: Email
    password: Password
    company_name: CompanyName | None
    role_name: RoleName


@dataclass(frozen=True, kw_only=True)
class RegistrationRequest:
    """Raw registration input.

    Example:
        >>> RegistrationRequest(
        ...     first_name="John",
        ...     last_name="Doe",
        ...     email="john@x.com",
        ...     password="Password123!",
        ...     role_name="ROLE_USER",
        ... ).validate()
        Success(value=ValidatedRegistration(...))
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    company_name: str | None = None
    role_name: str | None = None

    def validate(self) -> Result[ValidatedRegistration, DomainFailure]:
        first_name = PersonName.create(self.first_name or "")
        if isinstance(first_name, Failure):
            return first_name

        last_name = PersonName.create(self.last_name or "")
        if isinstance(last_name, Failure):
            return last_name

        email = Email.create(self.email or "")
        if isinstance(email, Failure):
            return email

        password = Password.create(self.password or "")
        if isinstance(password, Failure):
            return password

        company_name: CompanyName | None = None
        if self.company_name is not None:
            company_result = CompanyName.create(self.company_name)
            if isinstance(company_result, Failure):
                return company_result
            company_name = company_result.value

        role_name = RoleName.parse(self.role_name or "")
        if isinstance(role_name, Failure):
            return role_name

        return Success(
            value=ValidatedRegistration(
                first_name=first_name.value,
                last_name=last_name.value,
                email=email.value,
                password=password.value,
                company_name=company_name,
                role_name=role_name.value,
            )
        )


@dataclass(frozen=True, kw_only=True)
class ValidatedUserUpdate:
    """Partial update. Every field is Unchanged or Changed(value)."""

    first_name: FieldUpdate[PersonName] = UNCHANGED
    last_name: FieldUpdate[PersonName] = UNCHANGED
    company_name: FieldUpdate[CompanyName] = UNCHANGED
    role_name: FieldUpdate[RoleName] = UNCHANGED


@dataclass(frozen=True, kw_only=True)
class UserUpdateRequest:
    """Raw partial update input. None means "leave as is"."""

    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None
    role_name: str | None = None

    def validate(self) -> Result[ValidatedUserUpdate, DomainFailure]:
        first_name = validate_optional(self.first_name, PersonName.create)
        if isinstance(first_name, Failure):
            return first_name

        last_name = validate_optional(self.last_name, PersonName.create)
        if isinstance(last_name, Failure):
            return last_name

        company_name = validate_optional(self.company_name, CompanyName.create)
        if isinstance(company_name, Failure):
            return company_name

        role_name = validate_optional(self.role_name, RoleName.parse)
        if isinstance(role_name, Failure):
            return role_name

        return Success(
            value=ValidatedUserUpdate(
                first_name=first_name.value,
                last_name=last_name.value,
                company_name=company_name.value,
                role_name=role_name.value,
            )
        )


@dataclass(frozen=True, kw_only=True)
class ValidatedPasswordChange:
    password: Password


@dataclass(frozen=True, kw_only=True)
class ChangePasswordRequest:
    """Raw password change input."""

    password: str | None = None

    def validate(self) -> Result[ValidatedPasswordChange, PasswordError]:
        return bind(
            Password.create(self.password or ""),
            lambda password: Success(value=ValidatedPasswordChange(password=password)),
        )


@dataclass(frozen=True, kw_only=True)
class UserResponse:
    """Outbound user projection.

    Attributes:
        id: User id.
        email: Normalized email.
        first_name: Given name.
        last_name: Family name.
        company_name: Company, None when not set.
    """

    id: int
    email: str
    first_name: str
    last_name: str
    company_name: str | None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        if user.id is None:
            raise ValueError("Cannot project a user that has not been saved")
        return cls(
            id=user.id,
            email=str(user.email),
            first_name=str(user.first_name),
            last_name=str(user.last_name),
            company_name=str(user.company_name) if user.company_name else None,
        )
