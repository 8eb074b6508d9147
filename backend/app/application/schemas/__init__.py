from .product import ProductCreate, ProductUpdate, QuantityDecrement, ProductResponse
from .import_record import ImportCreate, ImportResponse
from .write_result import InsertResultResponse, UpdateResultResponse, DeleteResultResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "QuantityDecrement",
    "ProductResponse",
    "ImportCreate",
    "ImportResponse",
    "InsertResultResponse",
    "UpdateResultResponse",
    "DeleteResultResponse",
]
