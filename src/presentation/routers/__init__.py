"""Routers.

- system: root and health endpoints
- api: /auth and /user resources
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
