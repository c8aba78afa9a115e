"""
Authentication service for sign-up and token requests.
"""
import logging
import uuid

from store_api.core.exceptions import InvalidCredentialsError, OperationFailedError
from store_api.core.security import hash_password, verify_password
from store_api.models.user import User, UserRole
from store_api.repositories.user_repository import UserRepository
from store_api.schemas.auth import SignUpRequest, TokenResponse
from store_api.services.token_service import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repository: UserRepository, token_service: TokenService):
        self.users = user_repository
        self.tokens = token_service

    async def _find_user(self, username: str):
        user = await self.users.get_user_by_id(username)
        if user is None and "@" in username:
            user = await self.users.get_user_by_email(username)
        return user

    async def get_auth_token(self, username: str, password: str) -> TokenResponse:
        """
        Authenticate a user and issue an access token.

        Args:
            username: User id, or email address
            password: Plain text password

        Returns:
            TokenResponse carrying the user's current roles

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self._find_user(username)

        if user is None:
            logger.info(f"Token request for unknown user '{username}'")
            raise InvalidCredentialsError()

        if not verify_password(password, user.hashed_password):
            logger.info(f"Token request with wrong password for '{user.user_id}'")
            raise InvalidCredentialsError()

        access_token = self.tokens.issue_token(user.email, user.user_id, user.roles)

        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.tokens.expires_in,
        )

    async def sign_up(self, request: SignUpRequest) -> User:
        """
        Register a new user.

        Raises:
            ValueError: If the email is already registered, including when a
                concurrent sign-up wins the unique email index
        """
        existing = await self.users.get_user_by_email(request.email)
        if existing is not None:
            raise ValueError("Email already registered")

        user = User(
            user_id=uuid.uuid4().hex,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            hashed_password=hash_password(request.password),
            roles=[UserRole.USER.value],
        )
        try:
            return await self.users.create_user(user)
        except OperationFailedError as e:
            logger.info(f"Sign-up for '{request.email}' lost to a concurrent registration")
            raise ValueError("Email already registered") from e
