"""Password strength validation errors.

Check order: PasswordEmpty, PasswordTooShort, PasswordTooLong,
PasswordMissingUppercase, PasswordMissingLowercase, PasswordMissingDigit,
PasswordMissingSpecialCharacter.

Messages never echo the submitted password.
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordError(DomainError):
    """Base of the password validation family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordEmpty(PasswordError):
    code: ErrorCode = field(default=ErrorCode.PASSWORD_EMPTY, init=False)
    message: str = field(default="Password cannot be empty", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordTooShort(PasswordError):
    min_length: int
    code: ErrorCode = field(default=ErrorCode.PASSWORD_TOO_SHORT, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Password is too short (minimum length: {self.min_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordTooLong(PasswordError):
    max_length: int
    code: ErrorCode = field(default=ErrorCode.PASSWORD_TOO_LONG, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Password is too long (maximum length: {self.max_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordMissingUppercase(PasswordError):
    code: ErrorCode = field(default=ErrorCode.PASSWORD_MISSING_UPPERCASE, init=False)
    message: str = field(
        default="Password must contain an uppercase letter", init=False
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordMissingLowercase(PasswordError):
    code: ErrorCode = field(default=ErrorCode.PASSWORD_MISSING_LOWERCASE, init=False)
    message: str = field(
        default="Password must contain a lowercase letter", init=False
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordMissingDigit(PasswordError):
    code: ErrorCode = field(default=ErrorCode.PASSWORD_MISSING_DIGIT, init=False)
    message: str = field(default="Password must contain a digit", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordMissingSpecialCharacter(PasswordError):
    code: ErrorCode = field(
        default=ErrorCode.PASSWORD_MISSING_SPECIAL_CHARACTER, init=False
    )
    message: str = field(
        default="Password must contain a special character", init=False
    )
