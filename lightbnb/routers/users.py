"""
User account endpoints: registration, login and the current user.
"""

from fastapi import APIRouter, Depends, status

from lightbnb.config import settings
from lightbnb.schemas.user import (
    LoginRequest,
    TokenResponse,
    User,
    UserRegister,
    UserResponse
)
from lightbnb.services.auth import AuthService
from lightbnb.utils.auth import create_access_token
from lightbnb.utils.dependencies import get_auth_service, get_current_user


router = APIRouter(prefix="/users", tags=["Users"])


def _token_response(user: User, token: str) -> TokenResponse:
    return TokenResponse(
        access_token=token,
        expires_in=settings.access_token_expire_minutes * 60,
        user=UserResponse.model_validate(user)
    )


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user"
)
async def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    """Create an account and log it in."""
    user = await auth_service.register_user(user_data)
    return _token_response(user, create_access_token(user.id, user.email))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in with email and password"
)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    user, token = await auth_service.login(credentials.email, credentials.password)
    return _token_response(user, token)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
