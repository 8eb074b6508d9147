"""Application service (use case) for ImportRecord operations."""

from collections.abc import Callable
from datetime import datetime

from app.application.interfaces import ImportRepository
from app.application.schemas import ImportCreate
from app.domain.clock import utcnow
from app.domain.entities import DeleteResult, ImportRecord, InsertResult
from app.domain.identifiers import require_identifier


class ImportService:
    """Orchestrates import record logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ImportRepository,
        *,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._repository = repository
        self._clock = clock

    async def list_imports_by_owner(self, email: str) -> list[ImportRecord]:
        return await self._repository.get_by_user(email)

    async def create_import(self, data: ImportCreate) -> InsertResult:
        record = ImportRecord(
            product_id=data.product_id,
            user_id=data.user_id,
            imported_quantity=data.imported_quantity,
            product_name=data.product_name,
            product_image=data.product_image,
            price=data.price,
            rating=data.rating,
            origin_country=data.origin_country,
            imported_at=self._clock(),
        )
        return await self._repository.create(record)

    async def delete_import(self, record_id: str) -> DeleteResult:
        require_identifier(record_id, "Import")
        return await self._repository.delete(record_id)
