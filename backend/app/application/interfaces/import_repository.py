"""Abstract repository interface (port) for ImportRecord persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import DeleteResult, ImportRecord, InsertResult


class ImportRepository(ABC):
    """Port for import record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_user(self, user_id: str) -> list[ImportRecord]:
        """Retrieve a user's import records, most recent first."""
        ...

    @abstractmethod
    async def create(self, record: ImportRecord) -> InsertResult:
        """Insert a new import record."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> DeleteResult:
        """Delete an import record. A missing ID yields a zero delete count."""
        ...
