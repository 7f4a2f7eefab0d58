"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IUserRepository(ABC):
    """Repository interface for user documents.

    Documents are plain dicts. Implementations return them JSON-ready, with
    the assigned identifier under ``_id`` as a string.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def list_all(self) -> List[Dict[str, Any]]:
        ...         # Read from MongoDB
        ...         pass
    """

    @abstractmethod
    async def list_all(self) -> List[Dict[str, Any]]:
        """Return every stored user document.

        Order is whatever the store yields; no sort is applied.

        Raises:
            RepositoryError: If the read fails
        """
        pass

    @abstractmethod
    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Persist a document verbatim as a new user.

        Args:
            document: Arbitrary JSON object sent by the client

        Returns:
            The stored document including its assigned ``_id``

        Raises:
            RepositoryError: If the write fails
        """
        pass
