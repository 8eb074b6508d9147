"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.config import get_settings
from app.application.services import ImportService, ProductService
from app.infrastructure.database import MongoConnectionManager
from app.infrastructure.database.repositories import (
    MongoImportRepository,
    MongoProductRepository,
)


def get_connection_manager(request: Request) -> MongoConnectionManager:
    """Returns the process-wide connection manager created by ``create_app``.

    The handle itself is not acquired here; repositories acquire it per
    operation, after the service has validated its input.
    """
    return request.app.state.connection_manager


async def get_product_service(
    connections: MongoConnectionManager = Depends(get_connection_manager),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService instance with its repository wired up."""
    settings = get_settings()
    repository = MongoProductRepository(connections)
    yield ProductService(repository, latest_limit=settings.latest_products_limit)


async def get_import_service(
    connections: MongoConnectionManager = Depends(get_connection_manager),
) -> AsyncGenerator[ImportService, None]:
    """Provides an ImportService instance with its repository wired up."""
    repository = MongoImportRepository(connections)
    yield ImportService(repository)
