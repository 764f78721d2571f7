"""PyJWT implementation of TokenGenerationProtocol.

Tokens are HMAC-signed (HS256 unless configured otherwise) and carry:

    sub    user id, as a string per RFC 7519
    email  login email
    roles  role names, e.g. ["ROLE_USER"]
    iat    issued-at, epoch seconds
    exp    expiry, epoch seconds
    jti    uuid7, unique per token
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success

TOKEN_EXPIRED = "token_expired"
TOKEN_INVALID = "token_invalid"

_MIN_SECRET_LENGTH = 32
_REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class JWTService:
    """Issues and checks access tokens with one shared secret.

    Raises:
        ValueError: secret shorter than 32 bytes, or non-positive lifetime.
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 60,
        algorithm: str = "HS256",
    ) -> None:
        if len(secret_key) < _MIN_SECRET_LENGTH:
            msg = f"JWT secret key must be at least {_MIN_SECRET_LENGTH} bytes"
            raise ValueError(msg)
        if expiration_minutes <= 0:
            msg = f"JWT lifetime must be positive, got {expiration_minutes} minutes"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(minutes=expiration_minutes)
        self._algorithm = algorithm

    @property
    def expires_in(self) -> int:
        """Lifetime in seconds, as reported to clients."""
        return int(self._lifetime.total_seconds())

    def generate_access_token(self, user_id: int, email: str, roles: list[str]) -> str:
        issued_at = datetime.now(UTC)
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "roles": roles,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
            "jti": str(uuid7()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Decoded claims, or Failure(TOKEN_EXPIRED | TOKEN_INVALID)."""
        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error=TOKEN_EXPIRED)
        except InvalidTokenError:
            return Failure(error=TOKEN_INVALID)
        return Success(value=claims)
