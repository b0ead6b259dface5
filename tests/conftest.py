"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher, FakeUnitOfWork)
- Tests run fast (no real crypto, no database)
- Tests are isolated (each test gets fresh fakes)
"""

from datetime import UTC, datetime

import pytest

from account_service.application.services.authentication_service import (
    AuthenticationService,
)
from account_service.domain.entities.user import User
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """Provide a fast, predictable FakePasswordHasher."""
    return FakePasswordHasher()


@pytest.fixture
def sample_user() -> User:
    """
    Create a sample user for testing.

    The password_hash uses the FakePasswordHasher format: "HASHED:password123"
    """
    return User(
        name="Test User",
        email="test@example.com",
        password_hash="HASHED:password123",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Provide a fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_users(sample_user) -> FakeUnitOfWork:
    """Provide a FakeUnitOfWork pre-populated with sample_user."""
    return FakeUnitOfWork(initial_users=[sample_user])


@pytest.fixture
def auth_service(fake_uow, fake_password_hasher) -> AuthenticationService:
    """
    Provide an AuthenticationService with fake dependencies.

    - No database (FakeUnitOfWork)
    - No real crypto (FakePasswordHasher)
    """

    def uow_factory():
        return fake_uow

    return AuthenticationService(uow_factory=uow_factory, password_hasher=fake_password_hasher)


@pytest.fixture
def auth_service_with_data(fake_uow_with_users, fake_password_hasher) -> AuthenticationService:
    """Provide an AuthenticationService whose repository already holds sample_user."""

    def uow_factory():
        return fake_uow_with_users

    return AuthenticationService(uow_factory=uow_factory, password_hasher=fake_password_hasher)
