"""Typed outcomes for the account use cases.

Duplicate emails and bad credentials are expected outcomes, not faults.
Services return them inside a Result so callers branch on ``ok`` and on
``error.kind`` instead of catching exceptions or matching strings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

DUPLICATE_EMAIL_MESSAGE = "Email already in use"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthErrorKind(str, Enum):
    """Kinds of domain errors an end user may see. Values are error codes."""

    DUPLICATE_EMAIL = "EMAIL_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


@dataclass(frozen=True)
class AuthError:
    """A domain error with a short, non-leaking message."""

    kind: AuthErrorKind
    message: str

    @property
    def error_code(self) -> str:
        return self.kind.value

    @classmethod
    def duplicate_email(cls) -> "AuthError":
        return cls(AuthErrorKind.DUPLICATE_EMAIL, DUPLICATE_EMAIL_MESSAGE)

    @classmethod
    def invalid_credentials(cls) -> "AuthError":
        # Same instance shape for "no such account" and "wrong password"
        return cls(AuthErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)


class ResultError(Exception):
    """Raised when unwrapping a failed Result."""

    def __init__(self, error: AuthError):
        self.error = error
        super().__init__(error.message)


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or an AuthError, never both.

    Usage:
        result = await service.register(command)
        if result.ok:
            user_id = result.value
        elif result.error.kind is AuthErrorKind.DUPLICATE_EMAIL:
            ...
    """

    value: T | None = None
    error: AuthError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ResultError: If the result is a failure
        """
        if self.error is not None:
            raise ResultError(self.error)
        return self.value  # type: ignore[return-value]
