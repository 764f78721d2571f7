"""Unauthenticated service endpoints (banner and liveness probe)."""

from fastapi import APIRouter

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness only; the database is not probed."""
    return {"status": "healthy"}
