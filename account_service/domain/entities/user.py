"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from account_service.domain.exceptions import InvalidEntityStateException


def normalize_email(email: str) -> str:
    """
    Canonical form used to compare and store email addresses.

    Surrounding whitespace is dropped and the address is ASCII-lowercased,
    so "Ana@Example.com" and "ana@example.com" are the same account.
    """
    return email.strip().lower()


@dataclass(frozen=True)
class User:
    """
    User domain entity representing a registered account.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. The identifier is generated at construction
    and the entity is never mutated afterwards.
    """

    name: str
    email: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        These are structural validations - they ensure the entity can exist
        in a valid state. Violations indicate the entity cannot be created.
        """
        if not self.email or "@" not in self.email:
            raise InvalidEntityStateException(
                f"Invalid email address: '{self.email}'. Email must contain '@' symbol."
            )

        if not self.name or len(self.name.strip()) == 0:
            raise InvalidEntityStateException(
                "Name cannot be empty. User must have a valid name."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

        object.__setattr__(self, "email", normalize_email(self.email))
