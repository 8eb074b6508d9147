"""Store acknowledgements returned by mutating operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InsertResult:
    inserted_id: str
    acknowledged: bool = True


@dataclass(frozen=True)
class UpdateResult:
    matched_count: int
    modified_count: int
    acknowledged: bool = True
    upserted_id: str | None = None

    @property
    def upserted_count(self) -> int:
        return 0 if self.upserted_id is None else 1


@dataclass(frozen=True)
class DeleteResult:
    deleted_count: int
    acknowledged: bool = True
