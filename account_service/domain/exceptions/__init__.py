"""Domain exceptions - invariant and contract violations."""

from account_service.domain.exceptions.domain_exceptions import (
    DomainException,
    EmailAlreadyRegisteredException,
    InvalidEntityStateException,
    InvalidInputException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "InvalidInputException",
    "EmailAlreadyRegisteredException",
]
