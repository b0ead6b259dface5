"""Request validators - structural checks before any use case runs.

The rules themselves live on the pydantic DTOs (RegisterUserDTO, LoginDTO).
This module reports their failures as (field, message) pairs, the shape
the HTTP layer returns for invalid bodies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """A single structural validation failure."""

    field: str
    message: str


def to_field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """
    Flatten pydantic error dicts into FieldError pairs.

    The location tuple is joined with dots, e.g. ("body", "email") -> "body.email".
    """
    return [
        FieldError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
        )
        for error in errors
    ]
