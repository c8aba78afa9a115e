"""
Index bootstrap.
Ensures the collections' indexes exist on startup.
"""
import logging

from store_api.database.databases import store_db
from store_api.database.gateway import MongoGateway

logger = logging.getLogger(__name__)


async def create_indexes(gateway: MongoGateway) -> list[str]:
    """
    Create the indexes declared in store_db.Collections.INDEXES.

    Returns:
        Names of the indexes created or confirmed
    """
    created = []
    for collection_name, indexes in store_db.Collections.INDEXES.items():
        for index_def in indexes:
            name = await gateway.create_index(
                collection_name,
                index_def["keys"],
                unique=index_def.get("unique", False),
            )
            logger.debug(f"Index '{name}' ready on {collection_name}")
            created.append(name)
    return created
