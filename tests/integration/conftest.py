"""Integration test fixtures.

Provides a FastAPI test client running the real application against a
fresh SQLite database file per test.
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from account_service.infrastructure.config.settings import Settings
from account_service.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database, schema created on startup."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}",
        db_create_tables=True,
        environment="test",
        _env_file=None,
    )


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient]:
    """
    Create a FastAPI test client.

    Entering the client runs the application lifespan, which builds the
    engine, creates tables and wires the real Argon2 hasher.
    """
    with TestClient(test_app) as test_client:
        yield test_client

    test_app.dependency_overrides.clear()
