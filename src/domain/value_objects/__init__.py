"""Domain value objects with validation.

Immutable value objects that can only exist in a valid state.
"""

from src.domain.value_objects.company_name import CompanyName
from src.domain.value_objects.email import Email
from src.domain.value_objects.field_update import (
    UNCHANGED,
    Changed,
    FieldUpdate,
    Unchanged,
    validate_optional,
)
from src.domain.value_objects.hashed_password import HashedPassword
from src.domain.value_objects.password import Password
from src.domain.value_objects.person_name import PersonName

__all__ = [
    "Changed",
    "CompanyName",
    "Email",
    "FieldUpdate",
    "HashedPassword",
    "Password",
    "PersonName",
    "UNCHANGED",
    "Unchanged",
    "validate_optional",
]
