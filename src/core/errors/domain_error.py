"""Root of every failure variant.

Failures are values carried in Failure(error=...), not raised. A variant
fixes its own code and message, so it is built with no arguments or with
just the data its message needs:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class UserIdNotExists(DomainError):
        code: ErrorCode = field(default=ErrorCode.USER_NOT_FOUND, init=False)
        message: str = field(default="User with this id does not exist.", init=False)
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Failure value. `message` is returned to clients verbatim."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
