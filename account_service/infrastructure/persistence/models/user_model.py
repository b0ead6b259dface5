"""User ORM model - infrastructure layer SQLAlchemy mapping."""

import uuid
from datetime import datetime

from sqlalchemy import String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from account_service.domain.entities.user import User
from account_service.infrastructure.persistence.database import Base


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    This is an INFRASTRUCTURE detail that maps domain entities to database rows.
    The domain layer never imports this class. The unique index on email is
    the backstop for concurrent registrations.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of UserModel."""
        return f"UserModel(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def to_entity(self) -> User:
        """
        Convert ORM model to domain entity.

        Returns:
            User domain entity
        """
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            password_hash=self.password_hash,
            created_at=self.created_at,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from domain entity.

        Args:
            user: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
        )

        if user.created_at is not None:
            model.created_at = user.created_at

        return model
