"""Authentication endpoints.

Handlers:
    login  - POST /auth/login  -> 200 token JSON
    secret - GET  /auth/secret -> 200 text (bearer token required)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response

from src.application.services import AuthService
from src.core.container import get_auth_service
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import failure_response
from src.presentation.routers.api.middleware import CurrentUserDep
from src.schemas.auth_schemas import LoginRequestSchema, TokenResponseSchema

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])

SECRET_MESSAGE = "You passed the authorization flow!"


@auth_router.post(
    "/login",
    response_model=TokenResponseSchema,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
async def login(
    data: LoginRequestSchema,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponseSchema | Response:
    """Authenticate with email and password.

    Returns:
        TokenResponseSchema on success.
        Plain text failure message (400) otherwise.
    """
    validated = data.to_request().validate()
    if isinstance(validated, Failure):
        return failure_response(validated.error)

    match await service.authenticate_user(validated.value):
        case Success(value=token):
            return TokenResponseSchema.from_dto(token)
        case Failure(error=error):
            return failure_response(error)


@auth_router.get("/secret", response_class=PlainTextResponse)
async def secret(current_user: CurrentUserDep) -> str:
    """Protected endpoint, reachable only with a valid bearer token."""
    return SECRET_MESSAGE
