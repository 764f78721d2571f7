"""Authentication request/response schemas.

Endpoints:
    POST /auth/login   - LoginRequestSchema -> TokenResponseSchema
    GET  /auth/secret  - plain text (bearer token required)
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.application.dtos import LoginRequest, TokenResponse

_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequestSchema(BaseModel):
    """Request schema for login."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {"email": "john@example.com", "password": "Password123!"}
        },
    )

    email: str | None = Field(None, description="Email address")
    password: str | None = Field(None, description="Password")

    def to_request(self) -> LoginRequest:
        return LoginRequest(email=self.email, password=self.password)


class TokenResponseSchema(BaseModel):
    """Response schema for successful login.

    Attributes:
        token: JWT access token.
        token_type: Always "Bearer".
        expires_in: Seconds until the token expires.
        user_id: Authenticated user id.
        email: Authenticated email.
        role: Role name embedded in the token.
    """

    model_config = _CAMEL_CASE

    token: str = Field(..., description="JWT access token")
    token_type: str = Field("Bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds", examples=[3600])
    user_id: int = Field(..., description="User id")
    email: str = Field(..., description="Email address")
    role: str = Field(..., description="Role name", examples=["ROLE_USER"])

    @classmethod
    def from_dto(cls, dto: TokenResponse) -> "TokenResponseSchema":
        return cls(
            token=dto.token,
            token_type=dto.token_type,
            expires_in=dto.expires_in,
            user_id=dto.user_id,
            email=dto.email,
            role=dto.role,
        )
