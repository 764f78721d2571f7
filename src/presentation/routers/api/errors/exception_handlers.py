"""App-wide exception handlers producing ProblemDetails responses.

    HTTPException (bearer auth, routing 404/405)  -> same status
    RequestValidationError (bad JSON, wrong types) -> 400 with per-field errors
    anything else                                  -> 500, logged with trace id
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id

_TITLES: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
}

_UNKNOWN = ("Error", "error")


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _TITLES.get(status_code, _UNKNOWN)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple[int | str, ...]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an HTTPException, keeping headers such as WWW-Authenticate."""
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request, exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render a body that failed schema parsing as 400.

    Length and format rules are not checked at this layer; the value objects
    own them and report through the failure resolver.
    """
    assert isinstance(exc, RequestValidationError)
    errors = [
        ErrorDetail(
            field=_field_name(tuple(error.get("loc", ()))),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]
    return _problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Lost unique-email races and database outages land here.
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
