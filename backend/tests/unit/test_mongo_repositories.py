"""Unit tests for the MongoDB repositories against a recording fake driver."""

from datetime import datetime, timezone

import pytest
from bson import Decimal128, ObjectId
from pymongo import DESCENDING
from pymongo.errors import NetworkTimeout

from app.domain.entities import ImportRecord, Product
from app.domain.exceptions import StoreConnectionError, StoreError
from app.infrastructure.database.repositories import MongoImportRepository, MongoProductRepository
from tests.fakes import FakeCollection, FakeDatabase, StubConnectionManager

PRODUCT_ID = "65a1b2c3d4e5f6a7b8c9d0e1"
STAMP = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _product_document(**overrides) -> dict:
    document = {
        "_id": ObjectId(PRODUCT_ID),
        "productName": "Saffron",
        "addedBy": "seller@example.com",
        "availableQuantity": 12,
        "price": 9.5,
        "originCountry": "Iran",
        "createdAt": STAMP,
        "updatedAt": STAMP,
    }
    document.update(overrides)
    return document


def _connections(collection: FakeCollection, name: str = "products"):
    return StubConnectionManager(FakeDatabase({name: collection}))


@pytest.mark.asyncio
async def test_get_all_sorts_newest_first_and_maps_documents():
    collection = FakeCollection([_product_document()])
    repository = MongoProductRepository(_connections(collection))

    [product] = await repository.get_all()

    assert collection.calls == [("find", ({},))]
    assert collection.last_cursor.sort_spec == [("createdAt", DESCENDING), ("_id", DESCENDING)]
    assert collection.last_cursor.limit_value is None
    assert product.id == PRODUCT_ID
    assert product.product_name == "Saffron"
    assert product.origin_country == "Iran"
    assert product.created_at == STAMP


@pytest.mark.asyncio
async def test_get_all_filters_by_owner_and_limits():
    collection = FakeCollection([_product_document()])
    repository = MongoProductRepository(_connections(collection))

    await repository.get_all(added_by="seller@example.com", limit=6)

    assert collection.calls == [("find", ({"addedBy": "seller@example.com"},))]
    assert collection.last_cursor.limit_value == 6


@pytest.mark.asyncio
async def test_get_by_id_queries_object_id():
    collection = FakeCollection([_product_document()])
    repository = MongoProductRepository(_connections(collection))

    product = await repository.get_by_id(PRODUCT_ID)

    assert collection.calls == [("find_one", ({"_id": ObjectId(PRODUCT_ID)},))]
    assert product is not None and product.available_quantity == 12


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none():
    repository = MongoProductRepository(_connections(FakeCollection([])))
    assert await repository.get_by_id(PRODUCT_ID) is None


@pytest.mark.asyncio
async def test_create_writes_camel_case_document_without_empty_fields():
    collection = FakeCollection()
    repository = MongoProductRepository(_connections(collection))
    product = Product(
        product_name="Saffron",
        added_by="seller@example.com",
        available_quantity=5,
        created_at=STAMP,
        updated_at=STAMP,
    )

    result = await repository.create(product)

    [(name, (document,))] = collection.calls
    assert name == "insert_one"
    assert document == {
        "productName": "Saffron",
        "addedBy": "seller@example.com",
        "availableQuantity": 5,
        "createdAt": STAMP,
        "updatedAt": STAMP,
    }
    assert result.acknowledged is True
    assert isinstance(result.inserted_id, str)


@pytest.mark.asyncio
async def test_update_fields_sets_supplied_fields_and_updated_at():
    collection = FakeCollection([_product_document()])
    repository = MongoProductRepository(_connections(collection))

    result = await repository.update_fields(PRODUCT_ID, {"price": 11.0, "product_name": "Red Saffron"}, STAMP)

    [(name, (query, update))] = collection.calls
    assert name == "update_one"
    assert query == {"_id": ObjectId(PRODUCT_ID)}
    assert update == {"$set": {"price": 11.0, "productName": "Red Saffron", "updatedAt": STAMP}}
    assert "createdAt" not in update["$set"]
    assert (result.matched_count, result.modified_count) == (1, 1)


@pytest.mark.asyncio
async def test_decrement_quantity_uses_atomic_increment():
    collection = FakeCollection([_product_document()])
    repository = MongoProductRepository(_connections(collection))

    await repository.decrement_quantity(PRODUCT_ID, 3, STAMP)

    [(_, (query, update))] = collection.calls
    assert update == {"$inc": {"availableQuantity": -3}, "$set": {"updatedAt": STAMP}}


@pytest.mark.asyncio
async def test_delete_missing_document_reports_zero():
    repository = MongoProductRepository(_connections(FakeCollection([])))

    result = await repository.delete(PRODUCT_ID)

    assert result.deleted_count == 0


@pytest.mark.asyncio
async def test_driver_errors_become_store_errors():
    collection = FakeCollection(error=NetworkTimeout("timed out"))
    repository = MongoProductRepository(_connections(collection))

    with pytest.raises(StoreError, match="timed out"):
        await repository.get_all()


@pytest.mark.asyncio
async def test_connection_failure_propagates_as_store_error():
    connections = StubConnectionManager(error=StoreConnectionError("unreachable"))
    repository = MongoProductRepository(connections)

    with pytest.raises(StoreError):
        await repository.get_by_id(PRODUCT_ID)


@pytest.mark.asyncio
async def test_import_repository_filters_by_user_and_sorts_by_import_time():
    document = {
        "_id": ObjectId(PRODUCT_ID),
        "productId": "65a1b2c3d4e5f6a7b8c9d0ff",
        "userId": "buyer@example.com",
        "importedQuantity": 2,
        "importedAt": STAMP,
    }
    collection = FakeCollection([document])
    repository = MongoImportRepository(_connections(collection, "imports"))

    [record] = await repository.get_by_user("buyer@example.com")

    assert collection.calls == [("find", ({"userId": "buyer@example.com"},))]
    assert collection.last_cursor.sort_spec == [("importedAt", DESCENDING), ("_id", DESCENDING)]
    assert record.id == PRODUCT_ID
    assert record.imported_quantity == 2
    assert record.imported_at == STAMP


@pytest.mark.asyncio
async def test_import_repository_create_and_delete():
    collection = FakeCollection([{"_id": ObjectId(PRODUCT_ID)}])
    repository = MongoImportRepository(_connections(collection, "imports"))
    record = ImportRecord(product_id="p1", user_id="buyer@example.com", imported_at=STAMP)

    await repository.create(record)
    deleted = await repository.delete(PRODUCT_ID)

    assert collection.calls[0] == (
        "insert_one",
        ({"productId": "p1", "userId": "buyer@example.com", "importedAt": STAMP},),
    )
    assert collection.calls[1] == ("delete_one", ({"_id": ObjectId(PRODUCT_ID)},))
    assert deleted.deleted_count == 1


@pytest.mark.asyncio
async def test_unmodelled_keys_and_bson_values_are_carried_as_plain_extras():
    owner_id = ObjectId()
    document = _product_document(
        price="N/A",
        availableQuantity=None,
        legacyTag="spring-sale",
        ownerRef=owner_id,
        cost=Decimal128("4.20"),
        history=[{"by": owner_id}],
    )
    repository = MongoProductRepository(_connections(FakeCollection([document])))

    product = await repository.get_by_id(PRODUCT_ID)

    assert product.price == "N/A"
    assert product.available_quantity == 0
    assert product.extra == {
        "legacyTag": "spring-sale",
        "ownerRef": str(owner_id),
        "cost": "4.20",
        "history": [{"by": str(owner_id)}],
    }


@pytest.mark.asyncio
async def test_import_repository_stringifies_object_id_product_reference():
    product_ref = ObjectId()
    document = {
        "_id": ObjectId(PRODUCT_ID),
        "productId": product_ref,
        "userId": "buyer@example.com",
        "note": "gift",
    }
    repository = MongoImportRepository(_connections(FakeCollection([document]), "imports"))

    [record] = await repository.get_by_user("buyer@example.com")

    assert record.product_id == str(product_ref)
    assert record.imported_at is None
    assert record.extra == {"note": "gift"}
