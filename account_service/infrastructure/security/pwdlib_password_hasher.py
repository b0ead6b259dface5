"""Password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (Argon2id or bcrypt via pwdlib).

Dependency flow:
    AuthenticationService (application) → IPasswordHasher (domain) ← PwdlibPasswordHasher (infrastructure)

pwdlib is only imported here.
"""

import logging
from typing import Literal

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher
from pwdlib.hashers.bcrypt import BcryptHasher

from account_service.domain.services.password_hasher import (
    IPasswordHasher,
    ensure_password_input,
)

logger = logging.getLogger(__name__)

HashAlgorithm = Literal["argon2", "bcrypt"]

BCRYPT_MAX_PASSWORD_BYTES = 72


def truncate_for_bcrypt(password: str | bytes) -> bytes:
    """bcrypt only reads the first 72 bytes of a password; newer releases reject longer input."""
    if isinstance(password, str):
        password = password.encode("utf-8")
    return password[:BCRYPT_MAX_PASSWORD_BYTES]


class TruncatingBcryptHasher(BcryptHasher):
    """BcryptHasher that truncates passwords to 72 bytes before hashing and verifying."""

    def hash(self, password: str | bytes, *, salt: bytes | None = None) -> str:
        return super().hash(truncate_for_bcrypt(password), salt=salt)

    def verify(self, password: str | bytes, hash: str | bytes) -> bool:
        return super().verify(truncate_for_bcrypt(password), hash)


class PwdlibPasswordHasher(IPasswordHasher):
    """
    Production password hasher backed by pwdlib.

    New hashes use the configured algorithm:
    - argon2 (default): Argon2id with pwdlib's defaults
      (64 MB memory, 3 iterations, 4 lanes)
    - bcrypt: bcrypt with pwdlib's default cost, matching accounts
      created by earlier bcrypt-based deployments.
      Passwords longer than 72 bytes are truncated, as bcrypt
      implementations traditionally do

    Both hashers are registered, so a stored hash of either kind verifies
    regardless of which one is configured for new passwords.

    Usage:
        hasher = PwdlibPasswordHasher()

        hashed = hasher.hash("secret1")
        # Returns: "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"

        hasher.verify("secret1", hashed)  # True
        hasher.verify("wrong", hashed)    # False
    """

    def __init__(self, algorithm: HashAlgorithm = "argon2"):
        """
        Initialize the hasher.

        Args:
            algorithm: Algorithm used for new hashes

        Raises:
            ValueError: If the algorithm is not supported
        """
        if algorithm == "argon2":
            hashers = (Argon2Hasher(), TruncatingBcryptHasher())
        elif algorithm == "bcrypt":
            hashers = (TruncatingBcryptHasher(), Argon2Hasher())
        else:
            raise ValueError(f"Unsupported password hash algorithm: {algorithm!r}")

        self.algorithm = algorithm
        # The first hasher hashes new passwords, all of them verify
        self._password_hash = PasswordHash(hashers)

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Each call generates a fresh salt, so hashing the same password twice
        produces different strings (this is correct behavior).

        Raises:
            InvalidInputException: If plain_password is empty
        """
        ensure_password_input(plain_password)
        return self._password_hash.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a stored hash.

        Comparison is constant-time inside the underlying library. A hash
        that no registered algorithm recognizes, or that is structurally
        broken, is answered with False.

        Raises:
            InvalidInputException: If either argument is empty
        """
        ensure_password_input(plain_password, hashed_password)

        try:
            return self._password_hash.verify(plain_password, hashed_password)
        except (UnknownHashError, ValueError):
            logger.warning("Stored password hash is malformed or uses an unknown scheme")
            return False
