"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Model for every non-validation error response."""

    detail: str = Field(
        ...,
        description="Short, user-safe description of the error",
        examples=["Email already in use", "Invalid email or password"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["EMAIL_ALREADY_EXISTS", "INVALID_CREDENTIALS"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error."""

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.email')",
        examples=["body.email", "body.name", "body.password"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "value is not a valid email address: An email address must have an @-sign.",
            "String should have at least 6 characters",
        ],
    )


class ValidationErrorResponse(BaseModel):
    """Model for the complete 422 validation error response.

    This is the format returned by validation_error_handler in
    account_service/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["VALIDATION_ERROR"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "body.email",
                        "message": "value is not a valid email address: An email address must have an @-sign.",
                    },
                    {
                        "field": "body.password",
                        "message": "String should have at least 6 characters",
                    },
                ],
            }
        }
    }
