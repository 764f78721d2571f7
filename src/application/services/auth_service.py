"""Authentication service.

Flow:
1. Find user by email
2. Verify password (unknown email and wrong password fail identically)
3. Check account enabled
4. Check account not locked
5. Issue access token
6. Return Success(TokenResponse)

Enumeration safety:
    Account state is only reported after the password matched, so a caller
    without valid credentials always sees InvalidCredentials.
"""

from src.application.dtos.auth_dtos import TokenResponse, ValidatedLogin
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    AccountDisabled,
    AccountLocked,
    DomainFailure,
    InvalidCredentials,
)
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class AuthService:
    """Credential verification and token issuance."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def authenticate_user(
        self, login: ValidatedLogin
    ) -> Result[TokenResponse, DomainFailure]:
        """Authenticate credentials and issue an access token.

        Args:
            login: Validated email and password.

        Returns:
            Success(TokenResponse) on valid credentials for an active account.
            Failure(InvalidCredentials) for unknown email or wrong password.
            Failure(AccountDisabled) or Failure(AccountLocked) otherwise.
        """
        user = await self._user_repo.find_by_email(login.email)

        if user is None or not self._password_service.verify_password(
            login.password, user.password_hash
        ):
            # Same failure for both cases, the log keeps them apart
            self._logger.warning(
                "authentication_failed",
                email=str(login.email),
                reason="user_not_found" if user is None else "password_mismatch",
            )
            return Failure(error=InvalidCredentials())

        if not user.is_enabled:
            self._logger.warning("authentication_failed", user_id=user.id, reason="disabled")
            return Failure(error=AccountDisabled())

        if user.is_locked:
            self._logger.warning("authentication_failed", user_id=user.id, reason="locked")
            return Failure(error=AccountLocked())

        if user.id is None:
            raise RuntimeError("stored user has no id")
        role = user.role.name.value
        token = self._token_service.generate_access_token(
            user_id=user.id,
            email=str(user.email),
            roles=[role],
        )

        self._logger.info("authentication_succeeded", user_id=user.id)
        return Success(
            value=TokenResponse(
                token=token,
                expires_in=self._token_service.expires_in,
                user_id=user.id,
                email=str(user.email),
                role=role,
            )
        )
