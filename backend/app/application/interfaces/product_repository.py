"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from app.domain.entities import DeleteResult, InsertResult, Product, UpdateResult


class ProductRepository(ABC):
    """Port for product persistence — implemented in the infrastructure layer.

    Identifiers passed in are already format-checked by the service.
    """

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Retrieve a single product by its ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        added_by: str | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        """Retrieve products newest first, optionally filtered by owner and capped."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> InsertResult:
        """Insert a new product document."""
        ...

    @abstractmethod
    async def update_fields(
        self, product_id: str, fields: dict[str, Any], updated_at: datetime
    ) -> UpdateResult:
        """Set the given fields and the last-modified timestamp."""
        ...

    @abstractmethod
    async def decrement_quantity(
        self, product_id: str, amount: int | float, updated_at: datetime
    ) -> UpdateResult:
        """Atomically subtract *amount* from the available quantity."""
        ...

    @abstractmethod
    async def delete(self, product_id: str) -> DeleteResult:
        """Delete a product. A missing ID yields a zero delete count."""
        ...
