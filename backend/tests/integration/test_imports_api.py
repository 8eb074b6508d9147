"""HTTP-level tests for the import record endpoints."""

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from app.application.services import ImportService
from app.infrastructure.dependencies import get_import_service
from app.main import create_app
from tests.fakes import (
    FakeCollection,
    FakeDatabase,
    FakeImportRepository,
    StubConnectionManager,
    TickingClock,
)


@pytest.fixture
def app():
    app = create_app(connection_manager=StubConnectionManager())
    service = ImportService(FakeImportRepository(), clock=TickingClock())
    app.dependency_overrides[get_import_service] = lambda: service
    return app


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_create_and_list_imports_newest_first(app):
    async with _client(app) as client:
        for quantity in (1, 2, 3):
            response = await client.post(
                "/api/imports",
                json={
                    "productId": "65a1b2c3d4e5f6a7b8c9d0e1",
                    "productName": "Cinnamon",
                    "userId": "buyer@example.com",
                    "importedQuantity": quantity,
                },
            )
            assert response.status_code == 201
        listed = await client.get("/api/imports/buyer@example.com")

    records = listed.json()
    assert listed.status_code == 200
    assert [r["importedQuantity"] for r in records] == [3, 2, 1]
    assert all(a["importedAt"] >= b["importedAt"] for a, b in zip(records, records[1:]))


@pytest.mark.asyncio
async def test_list_imports_for_unknown_user_is_empty(app):
    async with _client(app) as client:
        response = await client.get("/api/imports/nobody@example.com")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_import_requires_user(app):
    async with _client(app) as client:
        response = await client.post("/api/imports", json={"productId": "65a1b2c3d4e5f6a7b8c9d0e1"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_import(app):
    async with _client(app) as client:
        created = await client.post(
            "/api/imports",
            json={"productId": "65a1b2c3d4e5f6a7b8c9d0e1", "userId": "buyer@example.com"},
        )
        record_id = created.json()["insertedId"]
        deleted = await client.delete(f"/api/imports/{record_id}")
        again = await client.delete(f"/api/imports/{record_id}")

    assert deleted.json()["deletedCount"] == 1
    assert again.status_code == 200
    assert again.json()["deletedCount"] == 0


@pytest.mark.asyncio
async def test_list_imports_tolerates_object_id_references_and_extra_keys():
    document = {
        "_id": ObjectId("65a1b2c3d4e5f6a7b8c9d0e1"),
        "productId": ObjectId("65a1b2c3d4e5f6a7b8c9d0ff"),
        "userId": "buyer@example.com",
        "importedQuantity": "2 crates",
        "note": "gift",
    }
    collection = FakeCollection([document])
    app = create_app(connection_manager=StubConnectionManager(FakeDatabase({"imports": collection})))

    async with _client(app) as client:
        response = await client.get("/api/imports/buyer@example.com")

    assert response.status_code == 200
    [record] = response.json()
    assert record["productId"] == "65a1b2c3d4e5f6a7b8c9d0ff"
    assert record["importedQuantity"] == "2 crates"
    assert record["importedAt"] is None
    assert record["note"] == "gift"
