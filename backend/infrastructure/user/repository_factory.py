"""User repository factory for environment-based selection.

This factory creates the appropriate repository implementation based on
the USER_REPOSITORY environment variable:
- "mongodb": MongoUserRepository (default, production)
- "inmemory": InMemoryUserRepository (tests, local runs without MongoDB)

The caller owns the database handle; the factory never opens connections.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_user_repository_backend
from infrastructure.user.in_memory_user_repository import (
    InMemoryUserRepository,
)
from infrastructure.user.mongo_user_repository import MongoUserRepository


def create_user_repository(
    db: Optional[AsyncIOMotorDatabase[Dict[str, Any]]] = None,
) -> IUserRepository:
    """Create user repository based on environment configuration.

    Args:
        db: Database handle opened at startup (mongodb backend only). None
            yields a repository whose calls fail with RepositoryError.

    Returns:
        IUserRepository: The configured repository implementation

    Raises:
        ValueError: If USER_REPOSITORY holds an unknown value

    Environment Variables:
        USER_REPOSITORY: "mongodb" | "inmemory" (default: mongodb)
    """
    repo_type = get_user_repository_backend()

    if repo_type == "mongodb":
        return MongoUserRepository(db)

    elif repo_type == "inmemory":
        return InMemoryUserRepository()

    else:
        raise ValueError(
            f"Invalid USER_REPOSITORY value: {repo_type}. "
            "Expected 'mongodb' or 'inmemory'"
        )
