"""MongoDB User Repository implementation."""

from __future__ import annotations

from typing import Any, Dict, List

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.persistence.serialization import document_to_json


class MongoUserRepository(MongoBaseRepository[Dict[str, Any]], IUserRepository):
    """MongoDB implementation of User repository.

    Users are schema-less: the request body is stored as-is in the ``users``
    collection and MongoDB assigns ``_id``. Nothing is ever updated or
    deleted from here.

    Examples:
        >>> repo = MongoUserRepository(client["app"])
        >>> user = await repo.create({"name": "Ada"})
        >>> users = await repo.list_all()
    """

    COLLECTION_NAME = "users"

    @property
    def collection_name(self) -> str:
        return self.COLLECTION_NAME

    def to_document(self, entity: Dict[str, Any]) -> Dict[str, Any]:
        # insert_one writes _id into the dict it receives; keep the caller's clean
        return dict(entity)

    def from_document(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return document_to_json(doc)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Return every user document in natural order."""
        documents = await self._find_many({})
        return [self.from_document(doc) for doc in documents]

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert the document and return it with its assigned ``_id``."""
        to_insert = self.to_document(document)
        inserted_id = await self._insert_one(to_insert)
        to_insert["_id"] = inserted_id
        return self.from_document(to_insert)
