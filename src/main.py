"""ASGI entry point: `uvicorn src.main:app`.

Startup creates missing tables and seeds the role table; shutdown disposes
the engine.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.infrastructure.persistence.seeds import seed_roles
from src.presentation.routers import system_router
from src.presentation.routers.api.auth import auth_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware import TraceMiddleware
from src.presentation.routers.api.users import users_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger = get_logger()
    database = get_database()

    await database.create_all()
    async with database.get_session() as session:
        await seed_roles(session)
    logger.info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="User accounts and token-based authentication",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(users_router)
