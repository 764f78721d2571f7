"""Request middleware and auth dependencies."""

from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    CurrentUserDep,
    get_current_user,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "CurrentUser",
    "CurrentUserDep",
    "TraceMiddleware",
    "get_current_user",
    "get_trace_id",
]
