"""In-process document store for local development and tests."""

import copy
from typing import Any, Optional

from product_api.clients.base import DocumentClient, DuplicateKeyError


class InMemoryDocumentClient(DocumentClient):
    """Document store backed by a dict, keyed by the document ``id``.

    Documents are deep-copied on the way in and out so callers never share
    state with the store. Iteration follows insertion order.
    """

    def __init__(self):
        self._documents: Optional[dict[str, dict[str, Any]]] = None

    async def connect(self) -> None:
        if self._documents is None:
            self._documents = {}

    async def close(self) -> None:
        """Close the store.

        Documents are kept so a reconnect in the same process sees them.
        """

    def _require_documents(self) -> dict[str, dict[str, Any]]:
        if self._documents is None:
            raise RuntimeError("In-memory client not connected. Call connect() first.")
        return self._documents

    async def find_all(self) -> list[dict[str, Any]]:
        documents = self._require_documents()
        return [copy.deepcopy(doc) for doc in documents.values()]

    async def find_one(self, item_id: str) -> Optional[dict[str, Any]]:
        documents = self._require_documents()
        doc = documents.get(item_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def insert_one(self, item: dict[str, Any]) -> dict[str, Any]:
        documents = self._require_documents()
        item_id = item["id"]
        if item_id in documents:
            raise DuplicateKeyError(f"Document with id '{item_id}' already exists")
        documents[item_id] = copy.deepcopy(item)
        return copy.deepcopy(item)

    async def replace_one(self, item_id: str, item: dict[str, Any]) -> bool:
        documents = self._require_documents()
        if item_id not in documents:
            return False
        documents[item_id] = copy.deepcopy(item)
        return True

    async def delete_one(self, item_id: str) -> bool:
        documents = self._require_documents()
        return documents.pop(item_id, None) is not None
