"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request parsing and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import UserCreateRequest, TokenResponseSchema
"""

from src.schemas.auth_schemas import LoginRequestSchema, TokenResponseSchema
from src.schemas.user_schemas import (
    PasswordChangeRequestSchema,
    UserCreateRequest,
    UserResponseSchema,
    UserUpdateRequestSchema,
)

__all__ = [
    # Auth
    "LoginRequestSchema",
    "TokenResponseSchema",
    # User
    "PasswordChangeRequestSchema",
    "UserCreateRequest",
    "UserResponseSchema",
    "UserUpdateRequestSchema",
]
