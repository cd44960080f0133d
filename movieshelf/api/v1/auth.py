# movieshelf/api/v1/auth.py

from fastapi import APIRouter, Body, Depends
from movieshelf.core.auth import create_access_token
from movieshelf.core.dependencies import get_current_user, get_user_service
from movieshelf.core.exceptions import AuthenticationError
from movieshelf.core import responses
from movieshelf.core.validation import validate_or_raise
from movieshelf.models.user import UserModel
from movieshelf.schemas.user import TokenResponse, User, UserLogin, UserRegister
from movieshelf.services.user_service import UserService

router = APIRouter()


def _token_response(user: UserModel) -> dict:
    access_token = create_access_token(data={"sub": user.email})
    return TokenResponse(access_token=access_token, user=User.model_validate(user)).model_dump()


@router.post(
    "/register",
    summary="Register",
    description="Creates an account with username, email and password and returns a session token.",
)
async def register(
    payload: dict = Body(default=None),
    user_service: UserService = Depends(get_user_service),
):
    user_data = validate_or_raise(UserRegister, payload or {}, code="auth:validation_failed")
    user = await user_service.create_user(user_data)
    return responses.success(message="User registered successfully", data=_token_response(user))


@router.post(
    "/login",
    summary="Login",
    description="Exchanges email and password for a session token.",
)
async def login(
    payload: dict = Body(default=None),
    user_service: UserService = Depends(get_user_service),
):
    login_data = validate_or_raise(UserLogin, payload or {}, code="auth:validation_failed")

    user = await user_service.authenticate(login_data.email, login_data.password)
    if not user:
        raise AuthenticationError("Invalid credentials", code="auth:invalid_credentials")

    return responses.success(message="Login successful", data=_token_response(user))


@router.get(
    "/user",
    summary="Current user",
    description="The user that owns the bearer token.",
)
async def get_user(current_user: UserModel = Depends(get_current_user)):
    return responses.success(
        message="User fetched successfully",
        data=User.model_validate(current_user).model_dump(),
    )
