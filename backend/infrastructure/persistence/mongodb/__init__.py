"""MongoDB persistence: client lifecycle and the base repository."""

from .base import MongoBaseRepository
from .connection import MongoConnection, connect_mongodb

__all__ = [
    "MongoBaseRepository",
    "MongoConnection",
    "connect_mongodb",
]
