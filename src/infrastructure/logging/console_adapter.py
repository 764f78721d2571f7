"""structlog-backed LoggerProtocol adapter writing to stdout.

Rendering:
    use_json=True   one JSON object per line (tests, CI, log shippers)
    use_json=False  colored key=value console output

Every event carries the request's trace_id when TraceMiddleware has bound
one (merge_contextvars runs first in the chain).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _error_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger.

    Configures structlog process-wide on construction; the composition root
    builds exactly one.

    Args:
        use_json: Render JSON lines instead of console output.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR; an exception is flattened to error_type/error_message."""
        self._logger.error(message, **_error_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_error_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Child adapter carrying extra context; this one is unchanged."""
        child = ConsoleAdapter.__new__(ConsoleAdapter)
        child._logger = self._logger.bind(**context)
        return child
