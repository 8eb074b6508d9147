from .product_repository import MongoProductRepository
from .import_repository import MongoImportRepository

__all__ = [
    "MongoProductRepository",
    "MongoImportRepository",
]
