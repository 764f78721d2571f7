"""Port for one-way password hashing (bcrypt in production)."""

from typing import Protocol

from src.domain.value_objects.hashed_password import HashedPassword
from src.domain.value_objects.password import Password


class PasswordHashingProtocol(Protocol):
    def hash_password(self, password: Password) -> HashedPassword:
        """Salted hash; hashing the same password twice gives different output."""
        ...

    def verify_password(self, password: Password, password_hash: HashedPassword) -> bool:
        """False on mismatch and on an unparseable hash; never raises."""
        ...
