"""
Request and response schemas for API endpoints.
"""
from store_api.schemas.auth import (
    GetAuthTokenRequest,
    TokenResponse,
    SignUpRequest,
    TokenClaims,
)
from store_api.schemas.user import UserResponse
from store_api.schemas.store import StoreResponse, StoreCreate, StoreUpdate

__all__ = [
    # Auth
    "GetAuthTokenRequest",
    "TokenResponse",
    "SignUpRequest",
    "TokenClaims",
    # User
    "UserResponse",
    # Store
    "StoreResponse",
    "StoreCreate",
    "StoreUpdate",
]
