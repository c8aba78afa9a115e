"""
Store database configuration.
Holds stores and their owners' user records.
"""


class Collections:
    """Collection names in the store database."""
    STORES = "Store"
    USERS = "User"

    # Index definitions for each collection, on stored field names
    INDEXES = {
        "User": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "Store": [
            {"keys": [("owner_id", 1)]},
            {"keys": [("name", 1)]},
        ],
    }
