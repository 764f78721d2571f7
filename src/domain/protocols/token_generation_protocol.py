"""Token generation protocol for domain layer.

Port for signed access token issuance and validation.

Token Strategy:
    - Access tokens only (no refresh tokens)
    - Stateless validation (no database lookup)
"""

from typing import Any, Protocol

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=str(user.email),
            roles=[user.role.name.value],
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = int(payload["sub"])
            case Failure(error=error):
                # Invalid or expired token
                ...
    """

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    def generate_access_token(self, user_id: int, email: str, roles: list[str]) -> str:
        """Generate a signed access token.

        Claims: sub (user id as string), email, roles, iat, exp, jti.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate a token and return its claims.

        Returns:
            Success(payload) if signature and expiry are valid, otherwise
            Failure with a short reason string.
        """
        ...
