"""User repository implementation using SQLAlchemy."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.domain.entities.user import User
from account_service.domain.exceptions import EmailAlreadyRegisteredException
from account_service.domain.repositories.user_repository import IUserRepository
from account_service.infrastructure.persistence.models.user_model import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - UserModel (infrastructure ORM mapping)

    It implements the IUserRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()

    async def create(self, user: User) -> UUID:
        """
        Insert a new user row.

        The flush sends the INSERT inside the UoW transaction so a unique
        index violation surfaces here rather than at commit.
        """
        user_model = UserModel.from_entity(user)
        self._session.add(user_model)

        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredException(user.email) from exc

        return user_model.id
