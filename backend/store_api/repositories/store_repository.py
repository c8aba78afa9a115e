"""
Repository for Store documents.
"""
from typing import Optional

from store_api.database.databases import store_db
from store_api.database.filters import EMPTY, Eq
from store_api.database.gateway import MongoGateway
from store_api.models.store import Store


class StoreRepository:
    """Typed access to the Store collection."""

    collection_name = store_db.Collections.STORES

    def __init__(self, gateway: MongoGateway):
        self.gateway = gateway

    async def create_store(self, store: Store) -> Store:
        return await self.gateway.insert_document(store, self.collection_name)

    async def get_stores(self) -> list[Store]:
        """Every store, across all owners."""
        return await self.gateway.get_documents(Store, self.collection_name, EMPTY)

    async def get_stores_by_user(self, owner_id: str) -> list[Store]:
        return await self.gateway.get_documents(
            Store, self.collection_name, Eq("owner_id", owner_id)
        )

    async def get_store_by_id(self, store_id: str) -> Optional[Store]:
        return await self.gateway.get_document(
            Store, Eq("store_id", store_id), self.collection_name
        )

    async def update_store(self, store: Store) -> Optional[Store]:
        """
        Replace a store keyed on its store_id.

        Returns:
            The given store if a document was replaced, None if no store has that id
        """
        replaced = await self.gateway.replace_document(
            Store, Eq("store_id", store.store_id), store, self.collection_name
        )
        if replaced:
            return store
        return None
