"""Application services.

Usage:
    from src.application.services import AuthService, UserService
"""

from src.application.services.auth_service import AuthService
from src.application.services.user_service import UserService

__all__ = [
    "AuthService",
    "UserService",
]
