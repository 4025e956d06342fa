"""Document store contract shared by the storage backends.

Backends keep self-describing documents keyed by a unique ``id`` field.
Concrete implementations (Cosmos DB, in-memory) live next to this module.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StorageError(Exception):
    """Base error raised by non-Azure storage backends."""
    pass


class DuplicateKeyError(StorageError):
    """Raised when inserting a document whose id already exists."""
    pass


class DocumentClient(ABC):
    """Async document store keyed by document id."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying connection."""

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""

    async def __aenter__(self) -> "DocumentClient":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Async context manager exit with cleanup."""
        await self.close()
        return False

    @abstractmethod
    async def find_all(self) -> list[dict[str, Any]]:
        """Return every document in the collection."""

    @abstractmethod
    async def find_one(self, item_id: str) -> Optional[dict[str, Any]]:
        """Return the document with the given id, or None if absent."""

    @abstractmethod
    async def insert_one(self, item: dict[str, Any]) -> dict[str, Any]:
        """Insert a new document. Fails if the id is already taken."""

    @abstractmethod
    async def replace_one(self, item_id: str, item: dict[str, Any]) -> bool:
        """Replace the document with the given id.

        Returns:
            True if a document matched, False otherwise. Never inserts.
        """

    @abstractmethod
    async def delete_one(self, item_id: str) -> bool:
        """Delete the document with the given id.

        Returns:
            True if a document was deleted, False if none matched.
        """
