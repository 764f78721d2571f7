"""Ports the application layer depends on.

Adapters satisfy them structurally; nothing inherits from these classes.
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RoleRepository",
    "TokenGenerationProtocol",
    "UserRepository",
]
