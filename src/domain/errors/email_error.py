"""Email validation errors.

Returned by Email.create() when raw input violates an email rule.
Exactly one variant is reported per attempt: the first rule that fails.

Check order:
    1. EmailEmpty
    2. EmailMissingAtSymbol
    3. EmailInvalidFormat
    4. EmailTooShort
    5. EmailTooLong
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailError(DomainError):
    """Base of the email validation family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailEmpty(EmailError):
    """Email is empty or whitespace only."""

    code: ErrorCode = field(default=ErrorCode.EMAIL_EMPTY, init=False)
    message: str = field(default="Email cannot be empty", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailMissingAtSymbol(EmailError):
    """Email has no @ separating local part and domain."""

    code: ErrorCode = field(default=ErrorCode.EMAIL_MISSING_AT_SYMBOL, init=False)
    message: str = field(default="Email must contain an @ symbol", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailInvalidFormat(EmailError):
    """Email is not a syntactically valid address."""

    code: ErrorCode = field(default=ErrorCode.EMAIL_INVALID_FORMAT, init=False)
    message: str = field(default="Email format is invalid", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailTooShort(EmailError):
    """Email is shorter than the minimum length.

    Attributes:
        min_length: Minimum accepted length.
    """

    min_length: int
    code: ErrorCode = field(default=ErrorCode.EMAIL_TOO_SHORT, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Email is too short (minimum length: {self.min_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailTooLong(EmailError):
    """Email is longer than the maximum length.

    Attributes:
        max_length: Maximum accepted length.
    """

    max_length: int
    code: ErrorCode = field(default=ErrorCode.EMAIL_TOO_LONG, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Email is too long (maximum length: {self.max_length})",
        )
