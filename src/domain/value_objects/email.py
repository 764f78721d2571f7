"""Email value object with validation.

Immutable value object holding a syntactically valid, lowercase email.

Validation order (first failing rule wins):
    1. Empty after stripping whitespace -> EmailEmpty
    2. No "@" -> EmailMissingAtSymbol
    3. email-validator rejects the syntax -> EmailInvalidFormat
    4. Shorter than MIN_LENGTH -> EmailTooShort
    5. Longer than MAX_LENGTH -> EmailTooLong

Usage:
    match Email.create(raw):
        case Success(value=email):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import ClassVar

from email_validator import EmailNotValidError, validate_email

from src.core.result import Failure, Result, Success
from src.domain.errors.email_error import (
    EmailEmpty,
    EmailError,
    EmailInvalidFormat,
    EmailMissingAtSymbol,
    EmailTooLong,
    EmailTooShort,
)


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Construct through `create()` to get a Result. Direct construction runs
    the same rules and raises ValueError, so an invalid Email cannot exist.

    Attributes:
        value: The email address (stripped, lowercase).

    Example:
        >>> Email.create("John@Example.com")
        Success(value=Email('john@example.com'))
        >>> Email.create("invalid")
        Failure(error=EmailMissingAtSymbol(...))
    """

    MIN_LENGTH: ClassVar[int] = 6
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    def __post_init__(self) -> None:
        error = self.check(self.value)
        if error is not None:
            raise ValueError(error.message)
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", self.value.strip().lower())

    @classmethod
    def create(cls, raw: str) -> Result["Email", EmailError]:
        """Validate raw input and build an Email.

        Args:
            raw: Untrusted email string.

        Returns:
            Success(Email) or Failure(EmailError) for the first broken rule.
        """
        error = cls.check(raw)
        if error is not None:
            return Failure(error=error)
        return Success(value=cls(raw))

    @classmethod
    def check(cls, raw: str) -> EmailError | None:
        """Return the first rule violated by raw, or None when valid."""
        candidate = raw.strip()

        if not candidate:
            return EmailEmpty()

        if "@" not in candidate:
            return EmailMissingAtSymbol()

        try:
            # Syntax only, no DNS lookup
            validate_email(candidate, check_deliverability=False)
        except EmailNotValidError:
            return EmailInvalidFormat()

        if len(candidate) < cls.MIN_LENGTH:
            return EmailTooShort(min_length=cls.MIN_LENGTH)

        if len(candidate) > cls.MAX_LENGTH:
            return EmailTooLong(max_length=cls.MAX_LENGTH)

        return None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
