from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from smarterd.api.error import raise_for_error
from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
)
from smarterd.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    login_id: str = Field(..., description="Unique login ID (2-50 chars)")
    password: str = Field(..., description="User password (8-100 chars)")
    name: str = Field(..., description="Display name (1-50 chars)")


class LoginRequest(BaseModel):
    login_id: str = Field(..., description="Login ID")
    password: str = Field(..., description="User password")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Creates a new account and returns an access token.

    Raises:
        - 400 Bad Request: Field length violated
        - 409 Conflict: LOGIN_ID_ALREADY_EXISTS
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = SignupCommand(
        login_id=request.login_id, password=request.password, name=request.name
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.login_id, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
