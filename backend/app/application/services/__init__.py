from .product_service import ProductService
from .import_service import ImportService

__all__ = [
    "ProductService",
    "ImportService",
]
