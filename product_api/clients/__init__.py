"""Client modules for document storage."""

from product_api.clients.base import DocumentClient, DuplicateKeyError, StorageError
from product_api.clients.cosmosdb_client import CosmosDBClient
from product_api.clients.memory_client import InMemoryDocumentClient

__all__ = [
    "CosmosDBClient",
    "DocumentClient",
    "DuplicateKeyError",
    "InMemoryDocumentClient",
    "StorageError",
]
