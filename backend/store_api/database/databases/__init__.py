"""
Database definitions and collection constants.
"""
from store_api.database.databases import store_db

__all__ = ["store_db"]
