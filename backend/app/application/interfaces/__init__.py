from .product_repository import ProductRepository
from .import_repository import ImportRepository

__all__ = [
    "ProductRepository",
    "ImportRepository",
]
