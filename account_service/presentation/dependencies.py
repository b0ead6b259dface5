"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where concrete implementations are
handed to the abstractions the application layer depends on.

Long-lived collaborators (session factory, password hasher) are built once
by the application lifespan and stored on ``app.state``; nothing here is a
module-level singleton. Tests swap them by building the app with other
settings or by overriding these dependencies.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from account_service.application.services.authentication_service import (
    AuthenticationService,
)
from account_service.domain.repositories.unit_of_work import IUnitOfWork
from account_service.domain.services.password_hasher import IPasswordHasher
from account_service.infrastructure.repositories.unit_of_work_impl import UnitOfWork


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Session factory created at startup."""
    return request.app.state.session_factory


def get_password_hasher(request: Request) -> IPasswordHasher:
    """
    Password hasher created at startup.

    Password hashers are stateless and thread-safe, so one instance serves
    every request.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    return request.app.state.password_hasher


def get_authentication_service(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AuthenticationService:
    """
    Dependency that provides AuthenticationService.

    Dependency Graph:
        FastAPI endpoint
            → get_authentication_service()
                → get_password_hasher() → app.state.password_hasher
                → get_session_factory() → app.state.session_factory
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return AuthenticationService(uow_factory=uow_factory, password_hasher=password_hasher)
