"""Person name value object (first and last names).

Allowed characters: letters (any script), spaces, hyphens, apostrophes.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.result import Failure, Result, Success
from src.domain.errors.person_name_error import (
    NameEmpty,
    NameInvalidFormat,
    NameTooLong,
    NameTooShort,
    PersonNameError,
)

_ALLOWED_PUNCTUATION = frozenset(" -'")


@dataclass(frozen=True)
class PersonName:
    """A first or last name.

    Attributes:
        value: The name exactly as supplied (already valid).
    """

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 50

    value: str

    def __post_init__(self) -> None:
        error = self.check(self.value)
        if error is not None:
            raise ValueError(error.message)

    @classmethod
    def create(cls, raw: str) -> Result["PersonName", PersonNameError]:
        error = cls.check(raw)
        if error is not None:
            return Failure(error=error)
        return Success(value=cls(raw))

    @classmethod
    def check(cls, raw: str) -> PersonNameError | None:
        if not raw:
            return NameEmpty()

        if len(raw) < cls.MIN_LENGTH:
            return NameTooShort(min_length=cls.MIN_LENGTH)

        if len(raw) > cls.MAX_LENGTH:
            return NameTooLong(max_length=cls.MAX_LENGTH)

        if not all(c.isalpha() or c in _ALLOWED_PUNCTUATION for c in raw):
            return NameInvalidFormat()

        return None

    def __str__(self) -> str:
        return self.value
