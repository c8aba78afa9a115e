"""
Pydantic models for database documents.
"""
from store_api.models.store import Store
from store_api.models.user import User, UserRole

__all__ = [
    "Store",
    "User",
    "UserRole",
]
