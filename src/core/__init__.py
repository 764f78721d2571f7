"""Shared kernel: Result, DomainError and the core enums.

Imports nothing from the other layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success, bind

__all__ = ["DomainError", "ErrorCode", "Failure", "Result", "Success", "bind"]
