"""
API Routers module.
"""
from store_api.routers import auth, health, stores

__all__ = ["auth", "health", "stores"]
