"""Bearer-token authentication for protected routes.

    @router.get("/secret")
    async def secret(current_user: CurrentUserDep): ...

Every rejection is a 401 with `WWW-Authenticate: Bearer`; the detail says
which check failed ("Not authenticated", "token_invalid", "token_expired").
"""

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.infrastructure.security.jwt_service import TOKEN_INVALID

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Identity carried by a verified access token."""

    user_id: int
    email: str
    roles: list[str]
    token_jti: str | None = None


def _reject(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _identity(claims: dict[str, Any]) -> CurrentUser:
    roles = claims.get("roles")
    jti = claims.get("jti")
    return CurrentUser(
        user_id=int(claims["sub"]),
        email=str(claims["email"]),
        roles=[str(role) for role in roles] if isinstance(roles, list) else [],
        token_jti=str(jti) if jti else None,
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    if credentials is None:
        raise _reject("Not authenticated")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=claims):
            try:
                return _identity(claims)
            except (KeyError, ValueError) as e:
                # signed by us but missing email or with a non-numeric sub
                raise _reject(TOKEN_INVALID) from e
        case Failure(error=reason):
            raise _reject(reason)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
