"""Infrastructure dependency factories.

Process-wide adapters are built once (lru_cache) from settings:
    get_database          -> Database (engine + session factory)
    get_password_service  -> BcryptPasswordService
    get_token_service     -> JWTService
    get_logger            -> ConsoleAdapter

get_db_session is the only per-request factory here; every repository in a
request receives the session it yields.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


@lru_cache()
def get_database() -> Database:
    """Database for settings.database_url (one engine per process)."""
    return Database(database_url=settings.database_url, echo=settings.db_echo)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's session; commit on success, roll back on error.

    FastAPI resolves a dependency once per request, so the user and role
    repositories built for one request write through the same transaction.
    Repositories declare it with scope="function" so the commit runs before
    the response goes out.
    Tests override this dependency to point at a throwaway database.
    """
    async with get_database().get_session() as session:
        yield session


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """bcrypt hashing with settings.bcrypt_rounds."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Access token issuer/validator.

    Raises:
        ValueError: If SECRET_KEY is shorter than 32 characters.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Structured console logger.

    JSON lines when tests or CI read the output, colored console otherwise.
    settings.debug lowers the threshold to DEBUG.
    """
    from src.infrastructure.logging import ConsoleAdapter

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=settings.environment.is_automated, level=level)
