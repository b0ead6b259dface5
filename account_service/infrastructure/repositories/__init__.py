"""Repository implementations using SQLAlchemy."""

from account_service.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from account_service.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository", "UnitOfWork"]
