from .connection import MongoConnectionManager

__all__ = [
    "MongoConnectionManager",
]
