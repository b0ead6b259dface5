"""Authentication DTOs for the application layer."""

from pydantic import BaseModel, Field

from account_service.application.dtos.user_dto import Email


class LoginDTO(BaseModel):
    """DTO for user login request."""

    email: Email = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "ana@example.com",
                    "password": "secret1"
                }
            ]
        }
    }
