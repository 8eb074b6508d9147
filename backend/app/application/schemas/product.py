"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from typing import Annotated, Any, ClassVar

from pydantic import BeforeValidator, Field, FiniteFloat

from .common import DocumentResponse, RequestModel

_PRODUCT_SERVER_FIELDS = frozenset(
    {"_id", "id", "createdAt", "created_at", "updatedAt", "updated_at"}
)

_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _require_number(value: Any) -> Any:
    """Only real JSON numbers are quantities; integers must fit in a BSON int64."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, int) and not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError("integer is out of range")
    return value


Quantity = Annotated[int | FiniteFloat, BeforeValidator(_require_number)]


class ProductCreate(RequestModel):
    """Schema for creating a new product."""

    server_managed_fields: ClassVar[frozenset[str]] = _PRODUCT_SERVER_FIELDS

    product_name: str = Field(..., min_length=1, max_length=255, examples=["Arabica Coffee Beans"])
    added_by: str = Field(..., min_length=1, max_length=255, examples=["seller@example.com"])
    available_quantity: Quantity = Field(0, examples=[120])
    product_image: str | None = Field(None, max_length=2048)
    price: FiniteFloat | None = Field(None, ge=0, examples=[12.5])
    origin_country: str | None = Field(None, max_length=100, examples=["Colombia"])
    rating: FiniteFloat | None = Field(None, ge=0, le=5)
    description: str | None = None


class ProductUpdate(RequestModel):
    """Schema for a full update; only the supplied fields are written."""

    server_managed_fields: ClassVar[frozenset[str]] = _PRODUCT_SERVER_FIELDS

    product_name: str | None = Field(None, min_length=1, max_length=255)
    added_by: str | None = Field(None, min_length=1, max_length=255)
    available_quantity: Quantity | None = None
    product_image: str | None = Field(None, max_length=2048)
    price: FiniteFloat | None = Field(None, ge=0)
    origin_country: str | None = Field(None, max_length=100)
    rating: FiniteFloat | None = Field(None, ge=0, le=5)
    description: str | None = None


class QuantityDecrement(RequestModel):
    """Amount to subtract from a product's available quantity."""

    quantity: Quantity = Field(..., examples=[3])


class ProductResponse(DocumentResponse):
    """Schema returned to the client; values are echoed as stored."""

    id: str = Field(..., alias="_id")
    product_name: Any = None
    added_by: Any = None
    available_quantity: Any = None
    product_image: Any = None
    price: Any = None
    origin_country: Any = None
    rating: Any = None
    description: Any = None
    created_at: Any = None
    updated_at: Any = None
