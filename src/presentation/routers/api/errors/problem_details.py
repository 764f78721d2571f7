"""RFC 9457 response body for framework-level errors.

Only errors that never reach a service use this shape: unparseable bodies,
missing or bad bearer tokens, unknown routes and unexpected exceptions.
Domain failures stay plain text (see failure_resolver).
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending request field."""

    field: str = Field(..., description="Dotted path of the field, e.g. firstName")
    code: str = Field(..., description="pydantic error type")
    message: str = Field(..., description="pydantic error message")


class ProblemDetails(BaseModel):
    """application/problem+json body.

    `type` is built from API_BASE_URL plus a status slug; `trace_id` ties the
    response to the request's log lines.
    """

    type: str = Field(..., examples=["http://localhost:8000/errors/bad-request"])
    title: str = Field(..., examples=["Bad Request"])
    status: int = Field(..., examples=[400])
    detail: str
    instance: str = Field(..., examples=["/user"])
    errors: list[ErrorDetail] | None = None
    trace_id: str | None = None
