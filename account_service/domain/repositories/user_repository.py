"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from account_service.domain.entities.user import User


class IUserRepository(ABC):
    """
    User repository interface.

    This interface belongs to the DOMAIN layer and defines the only data
    access the account workflows need: find by email and create. It says
    nothing about how or where users are stored.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Find a user by their (normalized) email address.

        Args:
            email: The user's email

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> UUID:
        """
        Persist a new user.

        Implementations backed by shared storage must enforce email
        uniqueness themselves; the lookup done by the service beforehand
        is not atomic with this call.

        Args:
            user: The user to persist

        Returns:
            The persisted user's ID

        Raises:
            EmailAlreadyRegisteredException: If storage rejects a duplicate email
        """
        pass
