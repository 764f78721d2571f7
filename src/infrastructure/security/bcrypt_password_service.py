"""bcrypt implementation of PasswordHashingProtocol.

bcrypt accepts at most 72 bytes of input; Password caps its UTF-8 encoding at
72 bytes, so every valid Password hashes.
"""

import bcrypt

from src.domain.value_objects import HashedPassword, Password

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31


class BcryptPasswordService:
    """Hashes with a fixed cost factor (log2 rounds).

    Production reads BCRYPT_ROUNDS (default 12); tests pass 4.
    """

    def __init__(self, cost_factor: int = 12) -> None:
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = (
                f"Cost factor {cost_factor} outside bcrypt range "
                f"{MIN_COST_FACTOR}-{MAX_COST_FACTOR}"
            )
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: Password) -> HashedPassword:
        digest = bcrypt.hashpw(
            password.value.encode("utf-8"), bcrypt.gensalt(rounds=self._cost_factor)
        )
        return HashedPassword(digest.decode("utf-8"))

    def verify_password(self, password: Password, password_hash: HashedPassword) -> bool:
        try:
            return bcrypt.checkpw(
                password.value.encode("utf-8"), password_hash.value.encode("utf-8")
            )
        except ValueError:
            # not a bcrypt hash
            return False
