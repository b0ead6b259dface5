"""User account API endpoints."""

from fastapi import APIRouter, Depends, status

from account_service.application.dtos.auth_dto import LoginDTO
from account_service.application.dtos.user_dto import (
    RegisteredUserDTO,
    RegisterUserDTO,
    UserDTO,
)
from account_service.application.services.authentication_service import (
    AuthenticationService,
)
from account_service.presentation.dependencies import get_authentication_service
from account_service.presentation.error_schemas import ErrorResponse
from account_service.presentation.exception_handlers import auth_error_response

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=RegisteredUserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    description="Create an account with name, email and password.",
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def register(
    dto: RegisterUserDTO,
    service: AuthenticationService = Depends(get_authentication_service),
):
    """
    Register a new account.

    The body is validated before this runs; invalid input never reaches
    the service.

    Raises:
        409 Conflict: If the email is already in use
    """
    result = await service.register(dto.to_command())

    if not result.ok:
        return auth_error_response(result.error)

    return RegisteredUserDTO(id=result.unwrap())


@router.post(
    "/login",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
    summary="Verify credentials",
    description="Check email and password and return the account. No token is issued.",
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
async def login(
    dto: LoginDTO,
    service: AuthenticationService = Depends(get_authentication_service),
):
    """
    Verify credentials.

    Raises:
        401 Unauthorized: If the email is unknown or the password is wrong
            (same body in both cases)
    """
    result = await service.login(dto.email, dto.password)

    if not result.ok:
        return auth_error_response(result.error)

    # The password hash stops here
    return UserDTO.from_entity(result.unwrap())
