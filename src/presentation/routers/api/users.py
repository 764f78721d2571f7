"""User resource endpoints.

Handlers:
    create_user     - POST   /user                -> 201 (empty body)
    get_user        - GET    /user/{user_id}      -> 200 projection
    update_user     - PUT    /user/{user_id}      -> 200 projection
    change_password - PUT    /user/{user_id}/password -> 200 (empty body)
    delete_user     - DELETE /user/{user_id}      -> 204

Validation failures and service failures are both answered through
failure_response, so the status mapping lives in one place.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from src.application.services import UserService
from src.core.container import get_user_service
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import failure_response
from src.schemas.user_schemas import (
    PasswordChangeRequestSchema,
    UserCreateRequest,
    UserResponseSchema,
    UserUpdateRequestSchema,
)

users_router = APIRouter(prefix="/user", tags=["Users"])


@users_router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Register a new user.

    Returns:
        201 with an empty body on success.
        409 when the email is taken, 404 for an unknown role, 400 otherwise.
    """
    validated = data.to_request().validate()
    if isinstance(validated, Failure):
        return failure_response(validated.error)

    match await service.create_user(validated.value):
        case Success():
            return Response(status_code=status.HTTP_201_CREATED)
        case Failure(error=error):
            return failure_response(error)


@users_router.get(
    "/{user_id}", response_model=UserResponseSchema, response_model_by_alias=True
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponseSchema | Response:
    match await service.get_user(user_id):
        case Success(value=user):
            return UserResponseSchema.from_dto(user)
        case Failure(error=error):
            return failure_response(error)


@users_router.put(
    "/{user_id}", response_model=UserResponseSchema, response_model_by_alias=True
)
async def update_user(
    user_id: int,
    data: UserUpdateRequestSchema,
    service: UserService = Depends(get_user_service),
) -> UserResponseSchema | Response:
    """Partially update a user. Omitted fields keep their current value."""
    validated = data.to_request().validate()
    if isinstance(validated, Failure):
        return failure_response(validated.error)

    match await service.update_user(user_id, validated.value):
        case Success(value=user):
            return UserResponseSchema.from_dto(user)
        case Failure(error=error):
            return failure_response(error)


@users_router.put("/{user_id}/password")
async def change_password(
    user_id: int,
    data: PasswordChangeRequestSchema,
    service: UserService = Depends(get_user_service),
) -> Response:
    validated = data.to_request().validate()
    if isinstance(validated, Failure):
        return failure_response(validated.error)

    match await service.update_password(user_id, validated.value):
        case Success():
            return Response(status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return failure_response(error)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    match await service.remove_user(user_id):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return failure_response(error)
