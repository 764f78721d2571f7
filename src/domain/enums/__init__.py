from src.domain.enums.role_name import RoleName

__all__ = ["RoleName"]
