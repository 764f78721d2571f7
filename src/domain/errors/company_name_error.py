"""Company name validation errors.

Check order: CompanyNameEmpty, CompanyNameTooShort, CompanyNameTooLong,
CompanyNameInvalidFormat.
"""

from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyNameError(DomainError):
    """Base of the company name validation family."""


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyNameEmpty(CompanyNameError):
    code: ErrorCode = field(default=ErrorCode.COMPANY_NAME_EMPTY, init=False)
    message: str = field(default="Company name cannot be empty", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyNameTooShort(CompanyNameError):
    min_length: int
    code: ErrorCode = field(default=ErrorCode.COMPANY_NAME_TOO_SHORT, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Company name is too short (minimum length: {self.min_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyNameTooLong(CompanyNameError):
    max_length: int
    code: ErrorCode = field(default=ErrorCode.COMPANY_NAME_TOO_LONG, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Company name is too long (maximum length: {self.max_length})",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyNameInvalidFormat(CompanyNameError):
    code: ErrorCode = field(default=ErrorCode.COMPANY_NAME_INVALID_FORMAT, init=False)
    message: str = field(
        default="Company name contains invalid characters", init=False
    )
