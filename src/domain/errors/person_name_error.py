"""Person name (first/last name) validation errors.

Check order: NameEmpty, NameTooShort, NameTooLong, NameInvalidFormat.
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PersonNameError(DomainError):
    """Base of the person name validation family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class NameEmpty(PersonNameError):
    """Name is empty."""

    code: ErrorCode = field(default=ErrorCode.NAME_EMPTY, init=False)
    message: str = field(default="Name cannot be empty", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class NameTooShort(PersonNameError):
    """Name is shorter than min_length."""

    min_length: int
    code: ErrorCode = field(default=ErrorCode.NAME_TOO_SHORT, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Name is too short (minimum length: {self.min_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class NameTooLong(PersonNameError):
    """Name is longer than max_length."""

    max_length: int
    code: ErrorCode = field(default=ErrorCode.NAME_TOO_LONG, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Name is too long (maximum length: {self.max_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class NameInvalidFormat(PersonNameError):
    """Name contains a character outside letters, space, hyphen, apostrophe."""

    code: ErrorCode = field(default=ErrorCode.NAME_INVALID_FORMAT, init=False)
    message: str = field(
        default="Name can only contain letters, spaces, hyphens and apostrophes",
        init=False,
    )
