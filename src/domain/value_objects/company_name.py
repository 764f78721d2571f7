"""Company name value object.

Optional on the User entity; when present it must pass these rules.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.result import Failure, Result, Success
from src.domain.errors.company_name_error import (
    CompanyNameEmpty,
    CompanyNameError,
    CompanyNameInvalidFormat,
    CompanyNameTooLong,
    CompanyNameTooShort,
)

_ALLOWED_PUNCTUATION = frozenset(" &.,'-")


@dataclass(frozen=True)
class CompanyName:
    """Company name: letters, digits, spaces and `&.,'-`."""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    def __post_init__(self) -> None:
        error = self.check(self.value)
        if error is not None:
            raise ValueError(error.message)

    @classmethod
    def create(cls, raw: str) -> Result["CompanyName", CompanyNameError]:
        error = cls.check(raw)
        if error is not None:
            return Failure(error=error)
        return Success(value=cls(raw))

    @classmethod
    def check(cls, raw: str) -> CompanyNameError | None:
        if not raw:
            return CompanyNameEmpty()

        if len(raw) < cls.MIN_LENGTH:
            return CompanyNameTooShort(min_length=cls.MIN_LENGTH)

        if len(raw) > cls.MAX_LENGTH:
            return CompanyNameTooLong(max_length=cls.MAX_LENGTH)

        if not all(c.isalnum() or c in _ALLOWED_PUNCTUATION for c in raw):
            return CompanyNameInvalidFormat()

        return None

    def __str__(self) -> str:
        return self.value
