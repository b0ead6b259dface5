"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from account_service.domain.exceptions import DomainException
from account_service.infrastructure.config.logging_config import configure_logging
from account_service.infrastructure.config.settings import Settings, get_settings
from account_service.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
    create_tables,
)
from account_service.infrastructure.security.pwdlib_password_hasher import (
    PwdlibPasswordHasher,
)
from account_service.presentation.api.v1 import users
from account_service.presentation.error_schemas import ValidationErrorResponse
from account_service.presentation.exception_handlers import (
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use; defaults to get_settings()

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_database_engine(settings)
        if settings.db_create_tables:
            await create_tables(engine)

        app.state.session_factory = create_session_factory(engine)
        app.state.password_hasher = PwdlibPasswordHasher(settings.password_hash_algorithm)
        logger.info(
            f"{settings.app_name} started (environment={settings.environment}, "
            f"hash={settings.password_hash_algorithm})"
        )

        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="User account registration and credential verification",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # - DomainException handles ALL domain layer exceptions
    # - RequestValidationError handles Pydantic validation errors
    # - SQLAlchemyError handles database errors
    # - Exception handles everything else
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(users.router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "message": settings.app_name,
            "status": "running",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
    return app


def custom_openapi(app: FastAPI) -> dict:
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default HTTPValidationError schema with ValidationErrorResponse
    to match the actual error format returned by validation_error_handler.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema()

    # Update all 422 response references to use our custom schema
    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = create_app()
