"""Error rendering for the HTTP surface.

- failure_resolver: domain failures -> status code + plain-text message
- problem_details / exception_handlers: RFC 9457 responses for
  framework-level errors

Exports:
    ErrorDetail: Individual field-specific error
    FailureOutcome: Resolved status code and body
    ProblemDetails: RFC 9457 compliant error response schema
    failure_response: Render a domain failure as a response
    register_exception_handlers: Register global exception handlers with FastAPI
    resolve: Map a domain failure to a FailureOutcome
"""

from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.errors.failure_resolver import (
    FailureOutcome,
    failure_response,
    resolve,
)
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "FailureOutcome",
    "ProblemDetails",
    "failure_response",
    "register_exception_handlers",
    "resolve",
]
