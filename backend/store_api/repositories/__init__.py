"""
Entity repositories over the document gateway.
"""
from store_api.repositories.store_repository import StoreRepository
from store_api.repositories.user_repository import UserRepository

__all__ = [
    "StoreRepository",
    "UserRepository",
]
