"""Concrete repository implementation for Product backed by MongoDB."""

from datetime import datetime
from typing import Any

from pymongo import DESCENDING

from app.application.interfaces import ProductRepository
from app.domain.entities import DeleteResult, InsertResult, Product, UpdateResult
from app.infrastructure.database.connection import MongoConnectionManager
from app.infrastructure.database.repositories.mongo_utils import (
    delete_result,
    insert_result,
    split_document,
    to_object_id,
    translate_store_errors,
    update_result,
)

# Entity attribute → stored document key
_FIELD_KEYS = {
    "product_name": "productName",
    "added_by": "addedBy",
    "available_quantity": "availableQuantity",
    "product_image": "productImage",
    "price": "price",
    "origin_country": "originCountry",
    "rating": "rating",
    "description": "description",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}

_NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class MongoProductRepository(ProductRepository):
    """Implements the ProductRepository port on the ``products`` collection."""

    collection_name = "products"

    def __init__(self, connections: MongoConnectionManager):
        self._connections = connections

    async def _collection(self):
        database = await self._connections.acquire()
        return database[self.collection_name]

    def _to_entity(self, document: dict[str, Any]) -> Product:
        """Map stored document → domain entity."""
        values, extra = split_document(document, _FIELD_KEYS)
        if values["available_quantity"] is None:
            values["available_quantity"] = 0
        return Product(id=str(document["_id"]), extra=extra, **values)

    def _to_document(self, entity: Product) -> dict[str, Any]:
        """Map domain entity → stored document (for insertion)."""
        document = {}
        for attr, key in _FIELD_KEYS.items():
            value = getattr(entity, attr)
            if value is not None:
                document[key] = value
        return document

    async def get_by_id(self, product_id: str) -> Product | None:
        with translate_store_errors():
            collection = await self._collection()
            document = await collection.find_one({"_id": to_object_id(product_id)})
        return self._to_entity(document) if document else None

    async def get_all(
        self,
        *,
        added_by: str | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        query: dict[str, Any] = {}
        if added_by is not None:
            query["addedBy"] = added_by

        with translate_store_errors():
            collection = await self._collection()
            cursor = collection.find(query).sort(_NEWEST_FIRST)
            if limit is not None:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list()
        return [self._to_entity(document) for document in documents]

    async def create(self, product: Product) -> InsertResult:
        with translate_store_errors():
            collection = await self._collection()
            result = await collection.insert_one(self._to_document(product))
        return insert_result(result)

    async def update_fields(
        self, product_id: str, fields: dict[str, Any], updated_at: datetime
    ) -> UpdateResult:
        changes = {_FIELD_KEYS[attr]: value for attr, value in fields.items()}
        changes.pop("createdAt", None)
        changes["updatedAt"] = updated_at

        with translate_store_errors():
            collection = await self._collection()
            result = await collection.update_one(
                {"_id": to_object_id(product_id)},
                {"$set": changes},
            )
        return update_result(result)

    async def decrement_quantity(
        self, product_id: str, amount: int | float, updated_at: datetime
    ) -> UpdateResult:
        with translate_store_errors():
            collection = await self._collection()
            result = await collection.update_one(
                {"_id": to_object_id(product_id)},
                {
                    "$inc": {"availableQuantity": -amount},
                    "$set": {"updatedAt": updated_at},
                },
            )
        return update_result(result)

    async def delete(self, product_id: str) -> DeleteResult:
        with translate_store_errors():
            collection = await self._collection()
            result = await collection.delete_one({"_id": to_object_id(product_id)})
        return delete_result(result)
