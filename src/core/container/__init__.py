"""Composition root.

    from src.core.container import get_user_service

infrastructure  database, session, hasher, token service, logger
repositories    per-request repositories sharing one session
services        per-request application services
"""

from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import get_role_repository, get_user_repository
from src.core.container.services import get_auth_service, get_user_service

__all__ = [
    "get_auth_service",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_role_repository",
    "get_token_service",
    "get_user_repository",
    "get_user_service",
]
