from .product import Product
from .import_record import ImportRecord
from .write_result import InsertResult, UpdateResult, DeleteResult

__all__ = [
    "Product",
    "ImportRecord",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
]
