"""Import record endpoints."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import DeleteResultResponse, ImportCreate, ImportResponse, InsertResultResponse
from app.application.services import ImportService
from app.domain.exceptions import InvalidIdentifierError, StoreError
from app.infrastructure.dependencies import get_import_service
from app.presentation.api.errors import invalid_id, store_failure

router = APIRouter(prefix="/imports", tags=["Imports"])


@router.get("/{email}", response_model=list[ImportResponse])
async def list_imports(
    email: str,
    service: ImportService = Depends(get_import_service),
) -> list[ImportResponse]:
    """Retrieve a user's imports, most recent first."""
    try:
        records = await service.list_imports_by_owner(email)
    except StoreError as e:
        raise store_failure("Error fetching imports", e) from e
    return [ImportResponse.from_entity(r) for r in records]


@router.post("", response_model=InsertResultResponse, status_code=status.HTTP_201_CREATED)
async def create_import(
    data: ImportCreate,
    service: ImportService = Depends(get_import_service),
) -> InsertResultResponse:
    """Record an import.

    Does not touch the product's quantity; callers decrement it separately.
    """
    try:
        result = await service.create_import(data)
    except StoreError as e:
        raise store_failure("Error adding import", e) from e
    return InsertResultResponse.model_validate(result)


@router.delete("/{record_id}", response_model=DeleteResultResponse)
async def delete_import(
    record_id: str,
    service: ImportService = Depends(get_import_service),
) -> DeleteResultResponse:
    try:
        result = await service.delete_import(record_id)
    except InvalidIdentifierError as e:
        raise invalid_id("Invalid import ID", e) from e
    except StoreError as e:
        raise store_failure("Error deleting import", e) from e
    return DeleteResultResponse.model_validate(result)
