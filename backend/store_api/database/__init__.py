"""
Database module - MongoDB connection, gateway and query descriptors.
"""
from store_api.database.connections import (
    get_mongo_client,
    close_connections,
    get_gateway,
)
from store_api.database.databases import store_db
from store_api.database.gateway import MongoGateway

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_gateway",
    "store_db",
    "MongoGateway",
]
