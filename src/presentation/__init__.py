"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it validates raw input into DTOs, calls application services
and translates results to HTTP responses.

Structure:
- routers/system.py: root and health endpoints
- routers/api/: /auth and /user resources, error handling, middleware

The presentation layer depends on the application layer but contains NO
business logic.
"""
