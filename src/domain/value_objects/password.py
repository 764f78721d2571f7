"""Password value object with complexity validation.

Holds a plaintext password only long enough to hash it. Never logged:
`str()` and `repr()` are masked.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from src.core.result import Failure, Result, Success
from src.domain.errors.password_error import (
    PasswordEmpty,
    PasswordError,
    PasswordMissingDigit,
    PasswordMissingLowercase,
    PasswordMissingSpecialCharacter,
    PasswordMissingUppercase,
    PasswordTooLong,
    PasswordTooShort,
)

_SPECIAL_CHARACTERS = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
_MASK = "********"


@dataclass(frozen=True)
class Password:
    """Password value object with complexity validation.

    Password Requirements (checked in this order):
        - Not empty
        - At least 8 characters
        - At most 72 bytes of UTF-8 (bcrypt rejects longer input)
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one special character

    Attributes:
        value: The plaintext password (validated).

    Example:
        >>> Password.create("SecurePass123!")
        Success(value=Password('********'))
        >>> Password.create("weak")
        Failure(error=PasswordTooShort(...))
    """

    MIN_LENGTH: ClassVar[int] = 8
    MAX_LENGTH: ClassVar[int] = 72

    value: str

    def __post_init__(self) -> None:
        error = self.check(self.value)
        if error is not None:
            raise ValueError(error.message)

    @classmethod
    def create(cls, raw: str) -> Result["Password", PasswordError]:
        """Validate raw input and build a Password."""
        error = cls.check(raw)
        if error is not None:
            return Failure(error=error)
        return Success(value=cls(raw))

    @classmethod
    def check(cls, raw: str) -> PasswordError | None:
        """Return the first complexity rule violated by raw, or None."""
        if not raw:
            return PasswordEmpty()

        if len(raw) < cls.MIN_LENGTH:
            return PasswordTooShort(min_length=cls.MIN_LENGTH)

        if len(raw.encode("utf-8")) > cls.MAX_LENGTH:
            return PasswordTooLong(max_length=cls.MAX_LENGTH)

        if not any(c.isupper() for c in raw):
            return PasswordMissingUppercase()

        if not any(c.islower() for c in raw):
            return PasswordMissingLowercase()

        if not any(c.isdigit() for c in raw):
            return PasswordMissingDigit()

        if not _SPECIAL_CHARACTERS.search(raw):
            return PasswordMissingSpecialCharacter()

        return None

    def __str__(self) -> str:
        """Return masked password. Never the plaintext."""
        return _MASK

    def __repr__(self) -> str:
        return f"Password('{_MASK}')"
