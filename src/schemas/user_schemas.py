"""User request/response schemas.

JSON bodies use camelCase keys. Request fields are loose (`str | None`):
presence and JSON type are checked here, every content rule (length,
format, allowed characters) is decided by the domain validators.

Endpoints:
    POST   /user                 - UserCreateRequest -> 201
    GET    /user/{id}            - UserResponseSchema
    PUT    /user/{id}            - UserUpdateRequestSchema -> UserResponseSchema
    PUT    /user/{id}/password   - PasswordChangeRequestSchema -> 200
    DELETE /user/{id}            - 204
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.application.dtos import (
    ChangePasswordRequest,
    RegistrationRequest,
    UserResponse,
    UserUpdateRequest,
)

_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class UserCreateRequest(BaseModel):
    """Request schema for user creation (registration)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "firstName": "John",
                "lastName": "Doe",
                "email": "john@example.com",
                "password": "Password123!",
                "companyName": None,
                "role": "ROLE_USER",
            }
        },
    )

    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    email: str | None = Field(None, description="Email address (login identifier)")
    password: str | None = Field(None, description="Password")
    company_name: str | None = Field(None, description="Optional company name")
    role: str | None = Field(None, description="Role name", examples=["ROLE_USER"])

    def to_request(self) -> RegistrationRequest:
        """Convert to the application-layer raw DTO."""
        return RegistrationRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password=self.password,
            company_name=self.company_name,
            role_name=self.role,
        )


class UserUpdateRequestSchema(BaseModel):
    """Partial update. Omitted or null fields are left unchanged."""

    model_config = _CAMEL_CASE

    first_name: str | None = Field(None, description="New given name")
    last_name: str | None = Field(None, description="New family name")
    company_name: str | None = Field(None, description="New company name")
    role: str | None = Field(None, description="New role name")

    def to_request(self) -> UserUpdateRequest:
        return UserUpdateRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            company_name=self.company_name,
            role_name=self.role,
        )


class PasswordChangeRequestSchema(BaseModel):
    model_config = _CAMEL_CASE

    password: str | None = Field(None, description="New password")

    def to_request(self) -> ChangePasswordRequest:
        return ChangePasswordRequest(password=self.password)


# =============================================================================
# Responses
# =============================================================================


class UserResponseSchema(BaseModel):
    """User projection. Never includes the password hash.

    Attributes:
        id: User id.
        email: Email address.
        first_name: Given name.
        last_name: Family name.
        company_name: Company name or null.
    """

    model_config = _CAMEL_CASE

    id: int = Field(..., description="User id")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    company_name: str | None = Field(None, description="Company name")

    @classmethod
    def from_dto(cls, dto: UserResponse) -> "UserResponseSchema":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            company_name=dto.company_name,
        )
