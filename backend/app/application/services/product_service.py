"""Application service (use case) for Product operations."""

from collections.abc import Callable
from datetime import datetime

from app.application.interfaces import ProductRepository
from app.application.schemas import ProductCreate, ProductUpdate
from app.domain.clock import utcnow
from app.domain.entities import DeleteResult, InsertResult, Product, UpdateResult
from app.domain.exceptions import EntityNotFoundError
from app.domain.identifiers import require_identifier

DEFAULT_LATEST_LIMIT = 6


class ProductService:
    """Orchestrates product CRUD logic. Depends on the repository port (DI).

    Every identifier-targeted operation checks the identifier format before
    touching the repository, so a malformed ID never reaches the store.
    """

    def __init__(
        self,
        repository: ProductRepository,
        *,
        latest_limit: int = DEFAULT_LATEST_LIMIT,
        clock: Callable[[], datetime] = utcnow,
    ):
        if latest_limit < 1:
            raise ValueError(f"latest_limit must be at least 1, got {latest_limit}")
        self._repository = repository
        self._latest_limit = latest_limit
        self._clock = clock

    async def list_products(self) -> list[Product]:
        return await self._repository.get_all()

    async def list_latest_products(self, limit: int | None = None) -> list[Product]:
        return await self._repository.get_all(limit=limit or self._latest_limit)

    async def list_products_by_owner(self, email: str) -> list[Product]:
        return await self._repository.get_all(added_by=email)

    async def get_product(self, product_id: str) -> Product:
        require_identifier(product_id, "Product")
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def create_product(self, data: ProductCreate) -> InsertResult:
        now = self._clock()
        product = Product(
            product_name=data.product_name,
            added_by=data.added_by,
            available_quantity=data.available_quantity,
            product_image=data.product_image,
            price=data.price,
            origin_country=data.origin_country,
            rating=data.rating,
            description=data.description,
            created_at=now,
            updated_at=now,
        )
        return await self._repository.create(product)

    async def update_product(self, product_id: str, data: ProductUpdate) -> UpdateResult:
        require_identifier(product_id, "Product")
        fields = data.model_dump(exclude_unset=True)
        return await self._repository.update_fields(product_id, fields, self._clock())

    async def decrement_quantity(self, product_id: str, amount: int | float) -> UpdateResult:
        # No floor: the stored quantity may go negative.
        require_identifier(product_id, "Product")
        return await self._repository.decrement_quantity(product_id, amount, self._clock())

    async def delete_product(self, product_id: str) -> DeleteResult:
        require_identifier(product_id, "Product")
        return await self._repository.delete(product_id)
