from src.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
