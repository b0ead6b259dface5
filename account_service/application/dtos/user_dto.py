"""User DTOs for application layer using Pydantic."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field

from account_service.domain.entities.user import User, normalize_email

PASSWORD_MIN_LENGTH = 6


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


def normalize_email_input(v: str | None) -> str | None:
    """Apply the domain email normalization to string input."""
    return normalize_email(v) if isinstance(v, str) else v


Email = Annotated[EmailStr, BeforeValidator(normalize_email_input)]


@dataclass(frozen=True)
class CreateUserCommand:
    """
    Registration input that already passed structural validation.

    Only RegisterUserDTO.to_command() builds these in the HTTP path; the
    service trusts the shape and checks business rules only.
    """

    name: str
    email: str
    password: str


class RegisterUserDTO(BaseModel):
    """
    DTO for a registration request.

    Validation:
    - name: Cannot be empty, whitespace is automatically trimmed (min_length=1 after stripping)
    - email: Must be valid email format (EmailStr), normalized to lowercase
    - password: Must be at least 6 characters (min_length=6)
    """

    name: Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1)]
    email: Email
    password: Annotated[str, Field(min_length=PASSWORD_MIN_LENGTH)]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana",
                "email": "ana@example.com",
                "password": "secret1",
            }
        }
    )

    def to_command(self) -> CreateUserCommand:
        return CreateUserCommand(name=self.name, email=self.email, password=self.password)


class RegisteredUserDTO(BaseModel):
    """DTO returned after a successful registration."""

    id: UUID


class UserDTO(BaseModel):
    """
    DTO for returning user data to presentation layer.

    Carries no password or password hash by construction.
    """

    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a domain entity to DTO, dropping the password hash.

        Args:
            user: User domain entity

        Returns:
            UserDTO instance
        """
        return cls(id=user.id, name=user.name, email=user.email)
