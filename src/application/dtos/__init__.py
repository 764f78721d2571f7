"""Data Transfer Objects (DTOs) for application layer.

Raw request DTOs (validated into typed inputs) and response dataclasses
returned by the services.

Categories:
    - user_dtos: Registration, update, password change, user projection
    - auth_dtos: Login and token response

Note:
    DTOs are NOT the same as API schemas (Pydantic models in presentation
    layer). Routers map schemas to raw request DTOs.
"""

from src.application.dtos.auth_dtos import LoginRequest, TokenResponse, ValidatedLogin
from src.application.dtos.user_dtos import (
    ChangePasswordRequest,
    RegistrationRequest,
    UserResponse,
    UserUpdateRequest,
    ValidatedPasswordChange,
    ValidatedRegistration,
    ValidatedUserUpdate,
)

__all__ = [
    # Auth
    "LoginRequest",
    "TokenResponse",
    "ValidatedLogin",
    # User
    "ChangePasswordRequest",
    "RegistrationRequest",
    "UserResponse",
    "UserUpdateRequest",
    "ValidatedPasswordChange",
    "ValidatedRegistration",
    "ValidatedUserUpdate",
]
