"""Repository interfaces - define contracts for data access."""

from account_service.domain.repositories.unit_of_work import IUnitOfWork
from account_service.domain.repositories.user_repository import IUserRepository

__all__ = ["IUserRepository", "IUnitOfWork"]
