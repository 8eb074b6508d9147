"""Pydantic DTOs for the ImportRecord feature."""

from typing import Any, ClassVar

from pydantic import Field, FiniteFloat

from .common import DocumentResponse, RequestModel
from .product import Quantity


class ImportCreate(RequestModel):
    """Schema for recording a new import."""

    server_managed_fields: ClassVar[frozenset[str]] = frozenset(
        {"_id", "id", "importedAt", "imported_at"}
    )

    product_id: str = Field(..., min_length=1, max_length=64)
    user_id: str = Field(..., min_length=1, max_length=255, examples=["buyer@example.com"])
    imported_quantity: Quantity | None = Field(None, examples=[3])
    product_name: str | None = Field(None, max_length=255)
    product_image: str | None = Field(None, max_length=2048)
    price: FiniteFloat | None = Field(None, ge=0)
    rating: FiniteFloat | None = Field(None, ge=0, le=5)
    origin_country: str | None = Field(None, max_length=100)


class ImportResponse(DocumentResponse):
    """Schema returned to the client; values are echoed as stored."""

    id: str = Field(..., alias="_id")
    product_id: Any = None
    user_id: Any = None
    imported_quantity: Any = None
    product_name: Any = None
    product_image: Any = None
    price: Any = None
    rating: Any = None
    origin_country: Any = None
    imported_at: Any = None
