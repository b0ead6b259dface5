"""Authentication service - application layer business logic.

This service orchestrates the two account use cases:
1. Registration (email uniqueness + password hashing + persistence)
2. Login (credential verification)

DEPENDENCY INVERSION in action:
- AuthenticationService depends on IPasswordHasher (abstraction)
- AuthenticationService depends on IUnitOfWork (abstraction)
- No dependencies on pwdlib or SQLAlchemy

Expected outcomes (duplicate email, invalid credentials) are returned as
Result failures. Only contract violations raise.
"""

import logging
from collections.abc import Callable
from uuid import UUID

from account_service.application.dtos.user_dto import CreateUserCommand
from account_service.application.results import AuthError, Result
from account_service.domain.entities.user import User, normalize_email
from account_service.domain.exceptions import EmailAlreadyRegisteredException
from account_service.domain.repositories.unit_of_work import IUnitOfWork
from account_service.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Authentication service encapsulating account use cases.

    This service:
    1. Depends on abstractions (IPasswordHasher, IUnitOfWork)
    2. Holds no state between calls
    3. Returns Result values to the presentation layer

    Testing:
    - Unit tests use FakePasswordHasher and FakeUnitOfWork
    - No pwdlib or database required in unit tests
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            password_hasher: Password hashing service (abstraction)
        """
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher

    async def register(self, command: CreateUserCommand) -> Result[UUID]:
        """
        Register a new account.

        Business rules:
        1. Email must be unique
        2. Password must be hashed before storage

        The lookup and the insert are not atomic. A concurrent registration
        for the same email is caught by the storage uniqueness constraint
        and reported as the same duplicate-email failure.

        Args:
            command: Structurally validated registration data

        Returns:
            Result holding the new user's ID, or a DUPLICATE_EMAIL error

        Example:
            result = await service.register(
                CreateUserCommand(name="Ana", email="ana@example.com", password="secret1")
            )
        """
        email = normalize_email(command.email)

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email) is not None:
                logger.info("Registration rejected: email already in use")
                return Result.failure(AuthError.duplicate_email())

            user = User(
                name=command.name,
                email=email,
                password_hash=self._password_hasher.hash(command.password),
            )

            try:
                user_id = await uow.users.create(user)
            except EmailAlreadyRegisteredException:
                logger.warning("Registration lost a race on email uniqueness")
                return Result.failure(AuthError.duplicate_email())

            await uow.commit()

        logger.info(f"Registered user {user_id}")
        return Result.success(user_id)

    async def login(self, email: str, password: str) -> Result[User]:
        """
        Verify credentials and return the matching user.

        Business logic:
        1. Look up the user by email
        2. Verify the password against the stored hash
        3. Both failures produce the SAME error so callers cannot tell
           whether the account exists

        No session or token is issued; success only means the credentials
        are valid.

        Args:
            email: Structurally validated email
            password: Plain text password

        Returns:
            Result holding the User, or an INVALID_CREDENTIALS error
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(normalize_email(email))

        if user is None:
            logger.debug("Login failed: unknown email")
            return Result.failure(AuthError.invalid_credentials())

        if not self._password_hasher.verify(password, user.password_hash):
            logger.debug(f"Login failed: wrong password for user {user.id}")
            return Result.failure(AuthError.invalid_credentials())

        return Result.success(user)
