"""Concrete repository implementation for ImportRecord backed by MongoDB."""

from typing import Any

from pymongo import DESCENDING

from app.application.interfaces import ImportRepository
from app.domain.entities import DeleteResult, ImportRecord, InsertResult
from app.infrastructure.database.connection import MongoConnectionManager
from app.infrastructure.database.repositories.mongo_utils import (
    delete_result,
    insert_result,
    split_document,
    to_object_id,
    translate_store_errors,
)

_FIELD_KEYS = {
    "product_id": "productId",
    "user_id": "userId",
    "imported_quantity": "importedQuantity",
    "product_name": "productName",
    "product_image": "productImage",
    "price": "price",
    "rating": "rating",
    "origin_country": "originCountry",
    "imported_at": "importedAt",
}


class MongoImportRepository(ImportRepository):
    """Implements the ImportRepository port on the ``imports`` collection."""

    collection_name = "imports"

    def __init__(self, connections: MongoConnectionManager):
        self._connections = connections

    async def _collection(self):
        database = await self._connections.acquire()
        return database[self.collection_name]

    def _to_entity(self, document: dict[str, Any]) -> ImportRecord:
        values, extra = split_document(document, _FIELD_KEYS)
        return ImportRecord(id=str(document["_id"]), extra=extra, **values)

    def _to_document(self, entity: ImportRecord) -> dict[str, Any]:
        return {
            key: getattr(entity, attr)
            for attr, key in _FIELD_KEYS.items()
            if getattr(entity, attr) is not None
        }

    async def get_by_user(self, user_id: str) -> list[ImportRecord]:
        with translate_store_errors():
            collection = await self._collection()
            cursor = collection.find({"userId": user_id}).sort(
                [("importedAt", DESCENDING), ("_id", DESCENDING)]
            )
            documents = await cursor.to_list()
        return [self._to_entity(document) for document in documents]

    async def create(self, record: ImportRecord) -> InsertResult:
        with translate_store_errors():
            collection = await self._collection()
            result = await collection.insert_one(self._to_document(record))
        return insert_result(result)

    async def delete(self, record_id: str) -> DeleteResult:
        with translate_store_errors():
            collection = await self._collection()
            result = await collection.delete_one({"_id": to_object_id(record_id)})
        return delete_result(result)
