"""Password hashing interface - domain service abstraction.

Hashing passwords before storage and verifying them at login is a business
requirement, so the contract lives in the domain. Which algorithm and which
library implement it is an infrastructure detail.

Contract shared by every implementation:
1. Empty plaintext or empty hash is a caller bug -> InvalidInputException
2. hash() is salted: two calls with the same input give different results
3. verify() never crashes on a malformed hash, it answers False
"""

from abc import ABC, abstractmethod

from account_service.domain.exceptions import InvalidInputException


def ensure_password_input(plain_password: str, hashed_password: str | None = None) -> None:
    """
    Reject empty values handed to a password hasher.

    Args:
        plain_password: Plaintext that is about to be hashed or verified
        hashed_password: Stored hash for verification, None when hashing

    Raises:
        InvalidInputException: If the plaintext or the given hash is empty
    """
    if plain_password == "":
        raise InvalidInputException("Password can't be empty")

    if hashed_password is not None and hashed_password == "":
        raise InvalidInputException("Password hash can't be empty")


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    This abstraction allows the application layer to hash and verify passwords
    without depending on a specific hashing library or algorithm.
    There is deliberately no operation to recover a plaintext.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string including salt and parameters

        Raises:
            InvalidInputException: If plain_password is empty
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise (including malformed hashes)

        Raises:
            InvalidInputException: If either argument is empty
        """
        pass
