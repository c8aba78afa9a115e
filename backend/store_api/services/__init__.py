"""
Service layer for business logic.
"""
from store_api.services.auth_service import AuthService
from store_api.services.token_service import TokenService

__all__ = [
    "AuthService",
    "TokenService",
]
