"""Data Transfer Objects for application layer."""

from account_service.application.dtos.auth_dto import LoginDTO
from account_service.application.dtos.user_dto import (
    CreateUserCommand,
    RegisteredUserDTO,
    RegisterUserDTO,
    UserDTO,
)

__all__ = [
    "CreateUserCommand",
    "LoginDTO",
    "RegisterUserDTO",
    "RegisteredUserDTO",
    "UserDTO",
]
