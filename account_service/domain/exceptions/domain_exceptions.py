"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent broken invariants and contract violations.
    Expected business outcomes (duplicate email, bad credentials) are NOT
    exceptions; they are returned as results by the application layer.

    Examples:
        - Invalid entity state
        - Empty input handed to the password hasher
        - Storage-level uniqueness violations
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class InvalidInputException(DomainException):
    """
    Raised when a required value is empty.

    This is a caller bug (e.g. an unvalidated empty password reached the
    hasher), never a user-facing condition.
    """

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_INPUT")


class EmailAlreadyRegisteredException(DomainException):
    """Raised by storage when the email uniqueness constraint rejects a row."""

    def __init__(self, email: str):
        super().__init__(
            f"Email {email} is already registered", error_code="EMAIL_ALREADY_EXISTS"
        )
        self.email = email
