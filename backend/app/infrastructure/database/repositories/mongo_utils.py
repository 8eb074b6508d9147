"""Helpers shared by the MongoDB repositories."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from bson import Decimal128, ObjectId
from pymongo.errors import PyMongoError

from app.domain.entities import DeleteResult, InsertResult, UpdateResult
from app.domain.exceptions import StoreError


def to_object_id(value: str) -> ObjectId:
    """Convert a pre-validated hex identifier to an ObjectId."""
    return ObjectId(value)


def to_plain(value: Any) -> Any:
    """Convert BSON-only values in a stored value to JSON-friendly ones.

    ObjectIds become hex strings and Decimal128 becomes its decimal text.
    Nested documents and arrays are converted recursively.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def split_document(
    document: dict[str, Any], field_keys: dict[str, str]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a stored document into modelled attribute values and the rest.

    Returns ``(values, extra)``: ``values`` maps every attribute in
    *field_keys* to its stored value (``None`` when absent); ``extra`` holds
    the remaining keys, minus ``_id``.
    """
    known = set(field_keys.values())
    values = {attr: to_plain(document.get(key)) for attr, key in field_keys.items()}
    extra = {
        key: to_plain(value)
        for key, value in document.items()
        if key != "_id" and key not in known
    }
    return values, extra


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise driver failures as the domain's StoreError."""
    try:
        yield
    except PyMongoError as exc:
        raise StoreError(str(exc)) from exc


def insert_result(result) -> InsertResult:
    return InsertResult(
        inserted_id=str(result.inserted_id),
        acknowledged=result.acknowledged,
    )


def update_result(result) -> UpdateResult:
    upserted_id = result.upserted_id
    return UpdateResult(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        acknowledged=result.acknowledged,
        upserted_id=str(upserted_id) if upserted_id is not None else None,
    )


def delete_result(result) -> DeleteResult:
    return DeleteResult(
        deleted_count=result.deleted_count,
        acknowledged=result.acknowledged,
    )
