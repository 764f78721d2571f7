"""Opaque wrapper around a password hash produced by the hashing adapter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HashedPassword:
    """Encoded password hash.

    The domain never inspects the format; only PasswordHashingProtocol
    implementations produce and verify it.
    """

    value: str

    def __repr__(self) -> str:
        return "HashedPassword('***')"
