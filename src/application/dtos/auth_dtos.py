"""Authentication DTOs (Data Transfer Objects).

DTOs:
    - LoginRequest -> ValidatedLogin (email first, then password)
    - TokenResponse: Result of a successful authentication
"""

from dataclasses import dataclass

from src.core.result import Failure, Result, Success
from src.domain.errors import EmailError, PasswordError
from src.domain.value_objects import Email, Password


@dataclass(frozen=True, kw_only=True)
class ValidatedLogin:
    email: Email
    password: Password


@dataclass(frozen=True, kw_only=True)
class LoginRequest:
    """Raw login input.

    Both fields pass the same rules as at registration. A password that
    could never have been registered is rejected before any lookup.
    """

    email: str | None = None
    password: str | None = None

    def validate(self) -> Result[ValidatedLogin, EmailError | PasswordError]:
        email = Email.create(self.email or "")
        if isinstance(email, Failure):
            return email

        password = Password.create(self.password or "")
        if isinstance(password, Failure):
            return password

        return Success(value=ValidatedLogin(email=email.value, password=password.value))


@dataclass(frozen=True, kw_only=True)
class TokenResponse:
    """Response from successful authentication.

    Attributes:
        token: Signed JWT access token.
        expires_in: Token lifetime in seconds.
        user_id: Authenticated user's id.
        email: Authenticated user's email.
        role: Role name carried in the token.
        token_type: Always "Bearer".
    """

    token: str
    expires_in: int
    user_id: int
    email: str
    role: str
    token_type: str = "Bearer"
