"""User repositories and their factory."""

from .in_memory_user_repository import InMemoryUserRepository
from .mongo_user_repository import MongoUserRepository
from .repository_factory import create_user_repository

__all__ = [
    "InMemoryUserRepository",
    "MongoUserRepository",
    "create_user_repository",
]
