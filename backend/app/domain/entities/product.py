"""Domain entity: a product listing offered for import/export."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.clock import utcnow


@dataclass
class Product:
    """Core domain entity for a marketplace product listing.

    ``added_by`` holds the owner's email and is the key used to list a
    seller's own products. ``available_quantity`` has no lower bound.
    """

    product_name: str
    added_by: str
    available_quantity: int | float = 0
    product_image: str | None = None
    price: float | None = None
    origin_country: str | None = None
    rating: float | None = None
    description: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    # Stored keys with no attribute above, passed through unchanged.
    extra: dict[str, Any] = field(default_factory=dict)
