"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Collection handle resolution from an injected database
- Document mapping (domain ↔ MongoDB)
- Error handling: driver failures are logged and wrapped in RepositoryError

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Dict, Any, List
import logging

from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from domain.shared.errors import RepositoryError


# Type variables for generics
TEntity = TypeVar("TEntity")  # Domain entity type

# Everything the driver can raise for a bad connection, query or document.
# The BSON encoder raises OverflowError for ints beyond 8 bytes and
# UnicodeEncodeError for lone surrogates.
STORAGE_ERRORS = (PyMongoError, InvalidDocument, OverflowError, UnicodeEncodeError)

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Document ↔ Entity mapping
    - Error handling with proper logging

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoUserRepository(MongoBaseRepository[Dict[str, Any]]):
            @property
            def collection_name(self) -> str:
                return "users"
            ...
    """

    def __init__(self, db: Optional[AsyncIOMotorDatabase[Dict[str, Any]]]):
        """
        Initialize repository with the process-wide database handle.

        Args:
            db: Motor database, or None when no connection could be set up.
                In that case every operation raises RepositoryError.
        """
        self._db = db
        self._collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None
        if db is not None:
            self._collection = db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """
        Convert domain entity to MongoDB document.

        Args:
            entity: Domain entity

        Returns:
            MongoDB document (dict)
        """
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Args:
            doc: MongoDB document

        Returns:
            Domain entity
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle.

        Raises:
            RepositoryError: If the repository has no database
        """
        if self._collection is None:
            logger.error(f"No MongoDB connection: collection={self.collection_name}")
            raise RepositoryError("connect", self.collection_name)
        return self._collection

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Args:
            filter_dict: MongoDB filter
            projection: Optional projection

        Returns:
            List of document dicts, in store order

        Raises:
            RepositoryError: If MongoDB operation fails (logged and wrapped)
        """
        collection = self.collection
        try:
            cursor = collection.find(filter_dict, projection)

            documents: List[Dict[str, Any]] = await cursor.to_list(length=None)
            return documents
        except STORAGE_ERRORS as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise RepositoryError("find_many", self.collection_name, e) from e

    async def _insert_one(self, document: Dict[str, Any]) -> Any:
        """
        Insert single document with error handling.

        Args:
            document: MongoDB document to insert

        Returns:
            The identifier MongoDB stored the document under

        Raises:
            RepositoryError: If MongoDB operation fails (logged and wrapped)
        """
        collection = self.collection
        try:
            result = await collection.insert_one(document)
            return result.inserted_id
        except STORAGE_ERRORS as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise RepositoryError("insert_one", self.collection_name, e) from e
