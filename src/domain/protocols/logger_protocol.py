"""Structured logging port.

Events are snake_case names plus keyword context:

    logger.info("user_created", user_id=user.id)

Passwords, hashes and tokens never go into context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """`error`, when given, is recorded as error_type and error_message."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """New logger with `context` on every event; the receiver is untouched."""
        ...
