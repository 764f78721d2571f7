"""API routers: /auth and /user resources, error handling and middleware.

Routers are imported explicitly by src.main:

    from src.presentation.routers.api.auth import auth_router
    from src.presentation.routers.api.users import users_router
"""
