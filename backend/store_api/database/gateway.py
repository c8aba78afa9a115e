"""
Generic typed access to a MongoDB database.

The gateway knows nothing about specific entities: callers pass the pydantic
model class, the collection name and filter descriptors. Documents are
serialized with the model's aliases (so `store_id` is stored as `_id`).
"""
import functools
import logging
from typing import Any, Optional, Sequence, Type, TypeVar, Union

import pymongo
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pydantic import BaseModel
from pymongo.errors import ConnectionFailure, OperationFailure

from store_api.core.exceptions import (
    AmbiguousResultError,
    OperationFailedError,
    StoreUnavailableError,
)
from store_api.database.filters import (
    EMPTY,
    BulkWriteOptions,
    DeleteMany,
    DeleteOne,
    Filter,
    InsertOne,
    ReplaceOne,
    Update,
    UpdateMany,
    UpdateOne,
    WriteOperation,
)

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)

SortSpec = Sequence[tuple[str, int]]
Projection = Sequence[str]


def _surface_errors(func):
    """Translate driver exceptions into the store's error kinds."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except ConnectionFailure as e:
            logger.error(f"{func.__name__} on '{self.database_name}' failed, store unavailable: {e}")
            raise StoreUnavailableError(str(e)) from e
        except OperationFailure as e:
            logger.error(f"{func.__name__} on '{self.database_name}' rejected: {e}")
            raise OperationFailedError(str(e)) from e

    return wrapper


def field_aliases(model: Type[BaseModel]) -> dict[str, str]:
    """Map model field names to their stored names."""
    return {
        name: info.alias or name
        for name, info in model.model_fields.items()
    }


class MongoGateway:
    """
    Typed document CRUD and administration over one MongoDB database.

    A gateway is bound to its database at construction; use `with_database`
    to obtain a gateway for another database on the same client.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        database: Union[str, AsyncIOMotorDatabase],
    ):
        self.client = client
        if isinstance(database, str):
            self.database = client[database]
        else:
            self.database = database

    @property
    def database_name(self) -> str:
        return self.database.name

    # ==================== Handles ====================

    def with_database(
        self, database: Union[str, AsyncIOMotorDatabase]
    ) -> "MongoGateway":
        """Return a new gateway bound to another database."""
        return MongoGateway(self.client, database)

    def get_database(self, database_name: str) -> AsyncIOMotorDatabase:
        return self.client[database_name]

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        return self.database[collection_name]

    # ==================== Serialization ====================

    @staticmethod
    def _to_document(document: BaseModel) -> dict[str, Any]:
        return document.model_dump(by_alias=True)

    @staticmethod
    def _from_document(model: Type[DocumentT], raw: dict[str, Any]) -> DocumentT:
        return model.model_validate(raw)

    @staticmethod
    def _from_projection(model: Type[BaseModel], raw: dict[str, Any]) -> dict[str, Any]:
        stored_to_name = {alias: name for name, alias in field_aliases(model).items()}
        return {stored_to_name.get(key, key): value for key, value in raw.items()}

    @staticmethod
    def _render_projection(
        model: Type[BaseModel], projection: Projection
    ) -> dict[str, int]:
        aliases = field_aliases(model)
        rendered = {aliases.get(name, name): 1 for name in projection}
        if "_id" not in rendered:
            rendered["_id"] = 0
        return rendered

    @staticmethod
    def _render_sort(model: Type[BaseModel], sort: SortSpec) -> list[tuple[str, int]]:
        aliases = field_aliases(model)
        return [(aliases.get(name, name), direction) for name, direction in sort]

    def _render_operation(self, model: Type[BaseModel], operation: WriteOperation):
        aliases = field_aliases(model)
        if isinstance(operation, InsertOne):
            return pymongo.InsertOne(self._to_document(operation.document))
        if isinstance(operation, UpdateOne):
            return pymongo.UpdateOne(
                operation.filter.to_mongo(aliases),
                operation.update.to_mongo(aliases),
                upsert=operation.upsert,
            )
        if isinstance(operation, UpdateMany):
            return pymongo.UpdateMany(
                operation.filter.to_mongo(aliases),
                operation.update.to_mongo(aliases),
                upsert=operation.upsert,
            )
        if isinstance(operation, ReplaceOne):
            return pymongo.ReplaceOne(
                operation.filter.to_mongo(aliases),
                self._to_document(operation.document),
                upsert=operation.upsert,
            )
        if isinstance(operation, DeleteOne):
            return pymongo.DeleteOne(operation.filter.to_mongo(aliases))
        if isinstance(operation, DeleteMany):
            return pymongo.DeleteMany(operation.filter.to_mongo(aliases))
        raise TypeError(f"Unsupported write operation: {operation!r}")

    # ==================== Regular Tasks ====================

    @_surface_errors
    async def insert_document(self, document: DocumentT, collection_name: str) -> DocumentT:
        """Insert one document. The input is returned unchanged."""
        await self.get_collection(collection_name).insert_one(self._to_document(document))
        return document

    @_surface_errors
    async def insert_documents(
        self, documents: list[DocumentT], collection_name: str
    ) -> list[DocumentT]:
        """Insert many documents. The inputs are returned unchanged."""
        if not documents:
            return documents
        await self.get_collection(collection_name).insert_many(
            [self._to_document(document) for document in documents]
        )
        return documents

    @_surface_errors
    async def get_all_documents(
        self, model: Type[DocumentT], collection_name: str
    ) -> list[DocumentT]:
        raws = await self.get_collection(collection_name).find({}).to_list(length=None)
        return [self._from_document(model, raw) for raw in raws]

    @_surface_errors
    async def count_documents(
        self,
        model: Type[DocumentT],
        collection_name: str,
        filter: Filter = EMPTY,
    ) -> int:
        query = filter.to_mongo(field_aliases(model))
        return await self.get_collection(collection_name).count_documents(query)

    @_surface_errors
    async def get_document(
        self,
        model: Type[DocumentT],
        filter: Filter,
        collection_name: str,
        projection: Optional[Projection] = None,
    ) -> Optional[Union[DocumentT, dict[str, Any]]]:
        """
        Get the single document matching a filter.

        Args:
            model: Document model class
            filter: Filter descriptor over model field names
            collection_name: Collection to query
            projection: Optional field names to return

        Returns:
            The matching document, or None if nothing matches. With a
            projection, a dict keyed by model field names.

        Raises:
            AmbiguousResultError: If more than one document matches
        """
        query = filter.to_mongo(field_aliases(model))
        rendered_projection = None
        if projection is not None:
            rendered_projection = self._render_projection(model, projection)

        # Fetch two so a second match can be detected without a count
        cursor = self.get_collection(collection_name).find(query, rendered_projection).limit(2)
        matches = await cursor.to_list(length=2)

        if len(matches) > 1:
            raise AmbiguousResultError(collection_name, query)
        if not matches:
            return None
        if projection is not None:
            return self._from_projection(model, matches[0])
        return self._from_document(model, matches[0])

    @_surface_errors
    async def get_documents(
        self,
        model: Type[DocumentT],
        collection_name: str,
        filter: Filter = EMPTY,
        skip: int = 0,
        limit: Optional[int] = None,
        sort: Optional[SortSpec] = None,
        projection: Optional[Projection] = None,
    ) -> list[Union[DocumentT, dict[str, Any]]]:
        """
        Get a page of documents matching a filter.

        Sort is applied before skip/limit. Without a sort the database's
        natural order is used. `limit=None` returns every remaining match.
        """
        if skip < 0:
            raise ValueError("skip must be non-negative")
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")

        query = filter.to_mongo(field_aliases(model))
        rendered_projection = None
        if projection is not None:
            rendered_projection = self._render_projection(model, projection)

        cursor = self.get_collection(collection_name).find(query, rendered_projection)
        if sort:
            cursor = cursor.sort(self._render_sort(model, sort))
        if skip:
            cursor = cursor.skip(skip)
        if limit is not None:
            if limit == 0:
                return []
            cursor = cursor.limit(limit)

        raws = await cursor.to_list(length=None)
        if projection is not None:
            return [self._from_projection(model, raw) for raw in raws]
        return [self._from_document(model, raw) for raw in raws]

    @_surface_errors
    async def update_document(
        self,
        model: Type[DocumentT],
        filter: Filter,
        update: Update,
        collection_name: str,
    ) -> bool:
        """Apply a partial update to one match. True only if contents changed."""
        aliases = field_aliases(model)
        result = await self.get_collection(collection_name).update_one(
            filter.to_mongo(aliases), update.to_mongo(aliases)
        )
        return result.modified_count > 0

    @_surface_errors
    async def update_documents(
        self,
        model: Type[DocumentT],
        filter: Filter,
        update: Update,
        collection_name: str,
    ) -> bool:
        """Apply a partial update to all matches. True only if any contents changed."""
        aliases = field_aliases(model)
        result = await self.get_collection(collection_name).update_many(
            filter.to_mongo(aliases), update.to_mongo(aliases)
        )
        return result.modified_count > 0

    @_surface_errors
    async def delete_document(
        self, model: Type[DocumentT], filter: Filter, collection_name: str
    ) -> bool:
        result = await self.get_collection(collection_name).delete_one(
            filter.to_mongo(field_aliases(model))
        )
        return result.deleted_count > 0

    @_surface_errors
    async def delete_documents(
        self, model: Type[DocumentT], filter: Filter, collection_name: str
    ) -> bool:
        result = await self.get_collection(collection_name).delete_many(
            filter.to_mongo(field_aliases(model))
        )
        return result.deleted_count > 0

    @_surface_errors
    async def bulk_write(
        self,
        model: Type[DocumentT],
        operations: Sequence[WriteOperation],
        collection_name: str,
        options: Optional[BulkWriteOptions] = None,
    ) -> bool:
        """
        Execute a heterogeneous batch of writes.

        Returns True if at least one operation took effect (a document was
        inserted, matched, deleted or upserted). A failing operation raises
        OperationFailedError instead of returning False.

        Example:
            await gateway.bulk_write(Store, [
                InsertOne(store),
                UpdateOne(Eq("store_id", "s1"), Update().set("name", "x")),
                DeleteOne(Eq("store_id", "s2")),
            ], "Store")
        """
        if not operations:
            return False
        options = options or BulkWriteOptions()
        requests = [self._render_operation(model, operation) for operation in operations]
        result = await self.get_collection(collection_name).bulk_write(
            requests,
            ordered=options.ordered,
            bypass_document_validation=options.bypass_document_validation,
        )
        affected = (
            result.inserted_count
            + result.matched_count
            + result.deleted_count
            + result.upserted_count
        )
        return affected > 0

    @_surface_errors
    async def replace_document(
        self,
        model: Type[DocumentT],
        filter: Filter,
        document: DocumentT,
        collection_name: str,
    ) -> bool:
        """Replace a whole document. True if the filter matched (contents may be identical)."""
        result = await self.get_collection(collection_name).replace_one(
            filter.to_mongo(field_aliases(model)), self._to_document(document)
        )
        return result.matched_count > 0

    # ==================== Administrative Tasks ====================

    @_surface_errors
    async def list_databases(self) -> list[str]:
        return await self.client.list_database_names()

    @_surface_errors
    async def drop_database(self, database_name: str) -> bool:
        await self.client.drop_database(database_name)
        return True

    @_surface_errors
    async def create_collection(self, collection_name: str, **options: Any) -> bool:
        await self.database.create_collection(collection_name, **options)
        return True

    @_surface_errors
    async def drop_collection(self, collection_name: str) -> bool:
        await self.database.drop_collection(collection_name)
        return True

    @_surface_errors
    async def create_index(
        self,
        collection_name: str,
        keys: Union[str, SortSpec],
        unique: bool = False,
        name: Optional[str] = None,
    ) -> str:
        """
        Create an index on stored field names.

        Ascending:  create_index("Store", [("owner_id", 1)])
        Text:       create_index("Store", [("description", "text")])
        """
        kwargs: dict[str, Any] = {"unique": unique}
        if name is not None:
            kwargs["name"] = name
        keys = [(keys, pymongo.ASCENDING)] if isinstance(keys, str) else list(keys)
        return await self.get_collection(collection_name).create_index(keys, **kwargs)

    @_surface_errors
    async def ping(self) -> bool:
        await self.client.admin.command("ping")
        return True
