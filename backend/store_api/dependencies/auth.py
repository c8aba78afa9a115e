"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError

from store_api.config import Settings, get_settings
from store_api.core.security import decode_token
from store_api.schemas.auth import TokenClaims

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
    token: Annotated[Optional[str], Query(description="JWT access token")] = None,
) -> TokenClaims:
    """
    Dependency to get the caller's validated token claims.

    The token is read from `Authorization: Bearer xxx`, or the `token` query
    parameter. Only the token is checked; the user store is not consulted.

    Raises:
        HTTPException 401: If token is missing, invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    raw_token = credentials.credentials if credentials is not None else token
    if not raw_token:
        raise credentials_exception

    try:
        payload = decode_token(raw_token, settings)
        return TokenClaims(**payload)
    except (JWTError, ValidationError):
        raise credentials_exception


# Type alias for cleaner route signatures
CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]
