"""In-memory User Repository for testing."""

import copy
from typing import Any, Dict, List

from bson import ObjectId

from domain.shared.errors import RepositoryError
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.persistence.serialization import document_to_json


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Keeps documents in insertion order and assigns ``ObjectId`` identifiers
    the way MongoDB does, so responses have the same shape as production.
    Useful for API tests and local runs without a MongoDB server.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create({"name": "Ada"})
        >>> users = await repo.list_all()
    """

    COLLECTION_NAME = "users"

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._documents: List[Dict[str, Any]] = []

    async def list_all(self) -> List[Dict[str, Any]]:
        return [document_to_json(doc) for doc in self._documents]

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Store a copy of the document.

        A client-supplied ``_id`` is kept, and a duplicate one fails like a
        unique index violation would.

        Raises:
            RepositoryError: If ``_id`` is already taken
        """
        stored = copy.deepcopy(document)
        if "_id" not in stored:
            stored["_id"] = ObjectId()
        elif any(existing["_id"] == stored["_id"] for existing in self._documents):
            raise RepositoryError("insert_one", self.COLLECTION_NAME)

        self._documents.append(stored)
        return document_to_json(stored)

    def clear(self) -> None:
        """Remove all documents (test helper)."""
        self._documents.clear()

    def count(self) -> int:
        """Get total user count (test helper)."""
        return len(self._documents)
