"""Domain entity: a record of a user importing a product."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.clock import utcnow


@dataclass
class ImportRecord:
    """Snapshot of an import made by a user.

    ``product_id`` points at the imported product but is not enforced as a
    reference. Records are created and deleted, never updated.
    """

    product_id: str
    user_id: str
    imported_quantity: int | float | None = None
    product_name: str | None = None
    product_image: str | None = None
    price: float | None = None
    rating: float | None = None
    origin_country: str | None = None
    id: str | None = None
    imported_at: datetime = field(default_factory=utcnow)
    # Stored keys with no attribute above, passed through unchanged.
    extra: dict[str, Any] = field(default_factory=dict)
