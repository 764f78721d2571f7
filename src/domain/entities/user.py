"""User domain entity.

Pure business logic, no framework dependencies. Every field holding user
input is a validated value object, so a User can only be built from data
that already passed validation.

Lifecycle:
    - Created on registration with id=None; the repository assigns the id
    - Mutated in place by apply_update() and change_password()
    - Removed by id
"""

from dataclasses import dataclass

from src.domain.entities.role import Role
from src.domain.value_objects.company_name import CompanyName
from src.domain.value_objects.email import Email
from src.domain.value_objects.field_update import Changed, FieldUpdate, UNCHANGED
from src.domain.value_objects.hashed_password import HashedPassword
from src.domain.value_objects.person_name import PersonName


@dataclass
class User:
    """User domain entity.

    Business Rules:
        - Email is unique across all users (checked by the service layer,
          enforced by the store)
        - Email is immutable after registration
        - Disabled or locked accounts cannot log in

    Attributes:
        id: Database identifier, None until first save.
        email: Login identifier.
        first_name: Given name.
        last_name: Family name.
        password_hash: Encoded password (never plaintext).
        company_name: Optional company.
        role: Assigned role.
        is_enabled: False blocks login.
        is_locked: True blocks login.
    """

    id: int | None
    email: Email
    first_name: PersonName
    last_name: PersonName
    password_hash: HashedPassword
    company_name: CompanyName | None
    role: Role
    is_enabled: bool = True
    is_locked: bool = False

    def apply_update(
        self,
        *,
        first_name: FieldUpdate[PersonName] = UNCHANGED,
        last_name: FieldUpdate[PersonName] = UNCHANGED,
        company_name: FieldUpdate[CompanyName] = UNCHANGED,
        role: FieldUpdate[Role] = UNCHANGED,
    ) -> None:
        """Apply a partial update. Unchanged fields keep their value.

        Example:
            >>> user.apply_update(first_name=Changed(value=PersonName("Jane")))
            >>> str(user.first_name)
            'Jane'
        """
        if isinstance(first_name, Changed):
            self.first_name = first_name.value
        if isinstance(last_name, Changed):
            self.last_name = last_name.value
        if isinstance(company_name, Changed):
            self.company_name = company_name.value
        if isinstance(role, Changed):
            self.role = role.value

    def change_password(self, password_hash: HashedPassword) -> None:
        """Replace the stored password hash."""
        self.password_hash = password_hash
