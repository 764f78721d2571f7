"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.domain.entities.user import User
from src.domain.value_objects.email import Email


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Writes are staged in the caller's unit of work; the session owner
    commits or rolls back once the service call finishes.

    Methods:
        exists_by_email: Check email uniqueness before registration
        exists_by_id: Check a user exists before deletion
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (login)
        save: Insert or update a user, returning it with its id
        remove_by_id: Delete a user
    """

    async def exists_by_email(self, email: Email) -> bool:
        """Check if any user is registered with this email.

        Args:
            email: Normalized email value object.

        Returns:
            True if a user with this email exists.
        """
        ...

    async def exists_by_id(self, user_id: int) -> bool:
        """Check if a user with this id exists."""
        ...

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's database identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: Email) -> User | None:
        """Find user by email address.

        Args:
            email: Normalized email value object.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> User:
        """Persist a new or modified user.

        A user with id=None is inserted and returned with its assigned id.
        Otherwise the stored row is updated in place.

        Args:
            user: User entity to persist.

        Returns:
            The persisted user (id populated).

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is taken by a
                concurrent registration (infrastructure fault, not a domain
                failure).
        """
        ...

    async def remove_by_id(self, user_id: int) -> None:
        """Delete a user. No-op when the id does not exist."""
        ...
