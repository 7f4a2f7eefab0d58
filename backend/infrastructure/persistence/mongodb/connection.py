"""MongoDB client lifecycle.

One ``AsyncIOMotorClient`` per process, opened by the app lifespan and closed
on shutdown. Connection problems are logged and never raised: the service
keeps serving and individual requests fail at the storage call instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from infrastructure.config import DEFAULT_DATABASE

logger = structlog.get_logger(__name__)


@dataclass
class MongoConnection:
    """Process-wide MongoDB handles.

    ``database`` is None only when no client could be created (missing or
    malformed connection string). ``connected`` records whether the startup
    ping succeeded.
    """

    client: Optional[AsyncIOMotorClient[Dict[str, Any]]]
    database: Optional[AsyncIOMotorDatabase[Dict[str, Any]]]
    connected: bool = False

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")


def resolve_database(
    client: AsyncIOMotorClient[Dict[str, Any]], database_name: Optional[str] = None
) -> AsyncIOMotorDatabase[Dict[str, Any]]:
    """Pick the database: explicit name, else the one in the URL, else "test"."""
    if database_name:
        return client[database_name]
    return client.get_default_database(default=DEFAULT_DATABASE)


async def connect_mongodb(url: Optional[str], database_name: Optional[str] = None) -> MongoConnection:
    """Create the client and ping the server once.

    Args:
        url: MongoDB connection string
        database_name: Optional database override

    Returns:
        MongoConnection; check ``connected`` for the ping outcome
    """
    if not url:
        logger.error(
            "MongoDB Connection Failed",
            reason="MONGODB_URL / MONGO_URL not configured",
        )
        return MongoConnection(client=None, database=None)

    try:
        client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(url)
        database = resolve_database(client, database_name)
    except PyMongoError as e:
        # InvalidURI / ConfigurationError are raised eagerly by the driver
        logger.error("MongoDB Connection Failed", error=str(e))
        return MongoConnection(client=None, database=None)

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error("MongoDB Connection Failed", database=database.name, error=str(e))
        return MongoConnection(client=client, database=database, connected=False)

    logger.info("MongoDB Connected Successfully", database=database.name)
    return MongoConnection(client=client, database=database, connected=True)
