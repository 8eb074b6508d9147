"""Product endpoints."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    DeleteResultResponse,
    InsertResultResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    QuantityDecrement,
    UpdateResultResponse,
)
from app.application.services import ProductService
from app.domain.exceptions import EntityNotFoundError, InvalidIdentifierError, StoreError
from app.infrastructure.dependencies import get_product_service
from app.presentation.api.errors import invalid_id, not_found, store_failure

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve all products, newest first."""
    try:
        products = await service.list_products()
    except StoreError as e:
        raise store_failure("Error fetching products", e) from e
    return [ProductResponse.from_entity(p) for p in products]


# Declared before "/{product_id}" so "latest" is not taken for an ID.
@router.get("/latest", response_model=list[ProductResponse])
async def list_latest_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve the most recently added products (six by default)."""
    try:
        products = await service.list_latest_products()
    except StoreError as e:
        raise store_failure("Error fetching latest products", e) from e
    return [ProductResponse.from_entity(p) for p in products]


@router.get("/user/{email}", response_model=list[ProductResponse])
async def list_products_by_owner(
    email: str,
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve the products added by one user, newest first."""
    try:
        products = await service.list_products_by_owner(email)
    except StoreError as e:
        raise store_failure("Error fetching user products", e) from e
    return [ProductResponse.from_entity(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Retrieve a single product by ID."""
    try:
        product = await service.get_product(product_id)
    except InvalidIdentifierError as e:
        raise invalid_id("Invalid product ID", e) from e
    except EntityNotFoundError as e:
        raise not_found("Product not found", e) from e
    except StoreError as e:
        raise store_failure("Error fetching product", e) from e
    return ProductResponse.from_entity(product)


@router.post("", response_model=InsertResultResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> InsertResultResponse:
    """Create a new product; creation and modification times are set by the server."""
    try:
        result = await service.create_product(data)
    except StoreError as e:
        raise store_failure("Error adding product", e) from e
    return InsertResultResponse.model_validate(result)


@router.put("/{product_id}", response_model=UpdateResultResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> UpdateResultResponse:
    """Overwrite the supplied fields of a product.

    Reports the store's match/modify counts; an unknown ID matches nothing.
    """
    try:
        result = await service.update_product(product_id, data)
    except InvalidIdentifierError as e:
        raise invalid_id("Invalid product ID", e) from e
    except StoreError as e:
        raise store_failure("Error updating product", e) from e
    return UpdateResultResponse.model_validate(result)


@router.patch("/{product_id}/quantity", response_model=UpdateResultResponse)
async def decrement_product_quantity(
    product_id: str,
    data: QuantityDecrement,
    service: ProductService = Depends(get_product_service),
) -> UpdateResultResponse:
    """Subtract ``quantity`` from the product's available quantity."""
    try:
        result = await service.decrement_quantity(product_id, data.quantity)
    except InvalidIdentifierError as e:
        raise invalid_id("Invalid product ID", e) from e
    except StoreError as e:
        raise store_failure("Error updating quantity", e) from e
    return UpdateResultResponse.model_validate(result)


@router.delete("/{product_id}", response_model=DeleteResultResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> DeleteResultResponse:
    """Delete a product by ID. Deleting an unknown ID reports a zero count."""
    try:
        result = await service.delete_product(product_id)
    except InvalidIdentifierError as e:
        raise invalid_id("Invalid product ID", e) from e
    except StoreError as e:
        raise store_failure("Error deleting product", e) from e
    return DeleteResultResponse.model_validate(result)
