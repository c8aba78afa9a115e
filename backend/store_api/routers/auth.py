"""
Authentication router for sign-up and token issuance.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from store_api.config import Settings, get_settings
from store_api.database.connections import get_gateway
from store_api.database.gateway import MongoGateway
from store_api.repositories.user_repository import UserRepository
from store_api.schemas.auth import GetAuthTokenRequest, SignUpRequest, TokenResponse
from store_api.schemas.user import UserResponse
from store_api.services.auth_service import AuthService
from store_api.services.token_service import TokenService

router = APIRouter(tags=["Authentication"])


async def get_auth_service(
    gateway: MongoGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(UserRepository(gateway), TokenService(settings))


@router.post(
    "/GetAuthToken",
    response_model=TokenResponse,
    summary="Exchange credentials for an access token",
)
async def get_auth_token(
    body: GetAuthTokenRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with user id (or email) and password to receive a JWT.

    Pass the token as `Authorization: Bearer <token>` (or `?token=`) to
    protected endpoints. Invalid credentials return 401.
    """
    return await auth_service.get_auth_token(body.username, body.password)


@router.post(
    "/SignUp",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def sign_up(
    body: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account with the `User` role.

    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 8 characters)
    """
    try:
        user = await auth_service.sign_up(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return UserResponse.from_user(user)
