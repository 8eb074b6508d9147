"""Response DTOs mirroring the store's write acknowledgements."""

from .common import CamelModel


class InsertResultResponse(CamelModel):
    acknowledged: bool
    inserted_id: str


class UpdateResultResponse(CamelModel):
    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_count: int
    upserted_id: str | None = None


class DeleteResultResponse(CamelModel):
    acknowledged: bool
    deleted_count: int
