"""Unit tests for AuthenticationService.

These tests use fake repositories and a fake hasher to test the service
layer in isolation without a database or real cryptography.
"""

from uuid import UUID

import pytest

from account_service.application.dtos.user_dto import CreateUserCommand
from account_service.application.results import (
    DUPLICATE_EMAIL_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthErrorKind,
)
from account_service.application.services.authentication_service import (
    AuthenticationService,
)
from account_service.domain.exceptions import InvalidInputException
from account_service.infrastructure.security.pwdlib_password_hasher import (
    PwdlibPasswordHasher,
)
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

pytestmark = pytest.mark.unit


class TestRegister:
    """Test cases for registering accounts."""

    @pytest.mark.asyncio
    async def test_register_success(self, auth_service, fake_uow):
        """Test successful registration returns a fresh id and persists one user."""
        # Arrange
        command = CreateUserCommand(name="New User", email="newuser@example.com", password="password123")

        # Act
        result = await auth_service.register(command)

        # Assert
        assert result.ok
        assert isinstance(result.value, UUID)
        assert fake_uow.users.count() == 1
        assert fake_uow.was_committed()

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, auth_service, fake_uow):
        """The stored hash is never the submitted plaintext."""
        # Arrange
        command = CreateUserCommand(name="Test User", email="test@example.com", password="plaintext_password")

        # Act
        result = await auth_service.register(command)

        # Assert
        stored_user = await fake_uow.users.get_by_email("test@example.com")
        assert stored_user is not None
        assert stored_user.id == result.value
        assert stored_user.password_hash != "plaintext_password"
        assert stored_user.password_hash == "HASHED:plaintext_password"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, auth_service_with_data, fake_uow_with_users, fake_password_hasher):
        """Registering a taken email fails and performs no mutation."""
        # Arrange
        command = CreateUserCommand(name="Someone Else", email="test@example.com", password="otherpass")

        # Act
        result = await auth_service_with_data.register(command)

        # Assert
        assert not result.ok
        assert result.error.kind is AuthErrorKind.DUPLICATE_EMAIL
        assert result.error.message == "Email already in use"
        assert result.error.error_code == "EMAIL_ALREADY_EXISTS"
        assert fake_uow_with_users.users.count() == 1
        assert fake_uow_with_users.users.create_calls == 0
        assert fake_password_hasher.hash_calls == 0
        assert not fake_uow_with_users.was_committed()

    @pytest.mark.asyncio
    async def test_register_duplicate_email_differs_only_in_case(self, auth_service_with_data):
        """Email uniqueness ignores ASCII case and surrounding whitespace."""
        command = CreateUserCommand(name="Test", email="  TEST@Example.com ", password="password123")

        result = await auth_service_with_data.register(command)

        assert result.error.kind is AuthErrorKind.DUPLICATE_EMAIL

    @pytest.mark.asyncio
    async def test_register_lost_race_reports_duplicate(self, auth_service_with_data, fake_uow_with_users, monkeypatch):
        """
        A concurrent registration can pass the lookup; the storage
        constraint still turns it into a duplicate-email result.
        """

        # Arrange: the lookup misses, as if the other insert landed after it
        async def lookup_misses(email):
            return None

        monkeypatch.setattr(fake_uow_with_users.users, "get_by_email", lookup_misses)
        command = CreateUserCommand(name="Racer", email="test@example.com", password="password123")

        # Act
        result = await auth_service_with_data.register(command)

        # Assert
        assert result.error.kind is AuthErrorKind.DUPLICATE_EMAIL
        assert fake_uow_with_users.users.count() == 1
        assert not fake_uow_with_users.was_committed()

    @pytest.mark.asyncio
    async def test_register_long_password_with_bcrypt(self, fake_uow):
        """Passwords past bcrypt's 72-byte limit still register and log in."""
        # Arrange
        service = AuthenticationService(
            uow_factory=lambda: fake_uow,
            password_hasher=PwdlibPasswordHasher(algorithm="bcrypt"),
        )
        command = CreateUserCommand(name="Ana", email="ana@example.com", password="x" * 73)

        # Act
        result = await service.register(command)
        login = await service.login("ana@example.com", "x" * 73)

        # Assert
        assert result.ok
        assert login.ok

    @pytest.mark.asyncio
    async def test_register_empty_password_is_contract_error(self, auth_service, fake_uow):
        """An unvalidated empty password reaching the hasher is a bug, not a result."""
        command = CreateUserCommand(name="Test", email="test@example.com", password="")

        with pytest.raises(InvalidInputException):
            await auth_service.register(command)

        assert fake_uow.users.count() == 0
        assert fake_uow.rolled_back


class TestLogin:
    """Test cases for verifying credentials."""

    @pytest.mark.asyncio
    async def test_login_success(self, auth_service_with_data, sample_user):
        # Act
        result = await auth_service_with_data.login("test@example.com", "password123")

        # Assert
        assert result.ok
        assert result.value.id == sample_user.id
        assert result.value.name == "Test User"
        assert result.value.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_login_normalizes_email(self, auth_service_with_data):
        result = await auth_service_with_data.login("Test@Example.com", "password123")

        assert result.ok

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, auth_service_with_data, fake_password_hasher):
        # Act
        result = await auth_service_with_data.login("nobody@example.com", "password123")

        # Assert
        assert not result.ok
        assert result.error.kind is AuthErrorKind.INVALID_CREDENTIALS
        assert result.error.message == INVALID_CREDENTIALS_MESSAGE
        assert fake_password_hasher.verify_calls == 0

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, auth_service_with_data):
        result = await auth_service_with_data.login("test@example.com", "wrong")

        assert not result.ok
        assert result.error.kind is AuthErrorKind.INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_login_failures_are_indistinguishable(self, auth_service_with_data):
        """Unknown email and wrong password yield the very same error."""
        # Act
        unknown = await auth_service_with_data.login("nobody@example.com", "x")
        wrong = await auth_service_with_data.login("test@example.com", "wrong")

        # Assert
        assert unknown.error == wrong.error
        assert unknown.error.message == wrong.error.message
        assert unknown.error.error_code == wrong.error.error_code == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_login_does_not_write(self, auth_service_with_data, fake_uow_with_users):
        await auth_service_with_data.login("test@example.com", "password123")

        assert not fake_uow_with_users.was_committed()
        assert fake_uow_with_users.users.create_calls == 0


class TestAccountScenario:
    """End-to-end account scenario with the real hasher."""

    @pytest.mark.asyncio
    async def test_register_then_login(self):
        # Arrange
        uow = FakeUnitOfWork()
        service = AuthenticationService(uow_factory=lambda: uow, password_hasher=PwdlibPasswordHasher())

        # Register Ana
        registered = await service.register(
            CreateUserCommand(name="Ana", email="ana@example.com", password="secret1")
        )
        assert registered.ok
        stored = await uow.users.get_by_email("ana@example.com")
        assert stored.id == registered.value
        assert stored.password_hash != "secret1"

        # Same email again, any name/password
        duplicate = await service.register(
            CreateUserCommand(name="Other", email="ana@example.com", password="another1")
        )
        assert duplicate.error.kind is AuthErrorKind.DUPLICATE_EMAIL
        assert duplicate.error.message == DUPLICATE_EMAIL_MESSAGE
        assert uow.users.count() == 1

        # Correct credentials
        logged_in = await service.login("ana@example.com", "secret1")
        assert logged_in.ok
        assert logged_in.value.name == "Ana"

        # Wrong password and unknown account look the same
        wrong = await service.login("ana@example.com", "wrong")
        nobody = await service.login("nobody@example.com", "x")
        assert wrong.error.kind is AuthErrorKind.INVALID_CREDENTIALS
        assert wrong.error == nobody.error
