"""Azure Cosmos DB client for product document storage."""

from typing import Any, Optional

from azure.cosmos.aio import CosmosClient
from azure.cosmos.aio._container import ContainerProxy
from azure.cosmos.aio._database import DatabaseProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from product_api.clients.base import DocumentClient


class CosmosDBClient(DocumentClient):
    """Async Cosmos DB client with connection management.

    Uses the NoSQL API with one container per collection.
    Supports async context manager pattern for proper resource cleanup.
    """

    def __init__(
        self,
        endpoint: str,
        key: str,
        database_name: str,
        container_name: str,
        partition_key_path: str = "/id",
    ):
        """Initialize the Cosmos DB client.

        Args:
            endpoint: Cosmos DB account endpoint URL
            key: Cosmos DB account key
            database_name: Name of the database to use
            container_name: Name of the container to use
            partition_key_path: Path to the partition key field (default: /id)
        """
        self._endpoint = endpoint
        self._key = key
        self._database_name = database_name
        self._container_name = container_name
        self._partition_key_path = partition_key_path

        self._client: Optional[CosmosClient] = None
        self._database: Optional[DatabaseProxy] = None
        self._container: Optional[ContainerProxy] = None

    async def connect(self) -> None:
        """Establish connection and ensure database/container exist."""
        self._client = CosmosClient(url=self._endpoint, credential=self._key)
        await self._client.__aenter__()

        # Get or create database
        try:
            self._database = self._client.get_database_client(self._database_name)
            # Verify database exists by reading it
            await self._database.read()
        except CosmosResourceNotFoundError:
            self._database = await self._client.create_database(self._database_name)

        # Get or create container
        try:
            self._container = self._database.get_container_client(self._container_name)
            # Verify container exists by reading it
            await self._container.read()
        except CosmosResourceNotFoundError:
            self._container = await self._database.create_container(
                id=self._container_name,
                partition_key={"paths": [self._partition_key_path], "kind": "Hash"},
            )

    async def close(self) -> None:
        """Close the Cosmos DB connection."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None
            self._container = None

    def _require_container(self) -> ContainerProxy:
        if self._container is None:
            raise RuntimeError("CosmosDB client not connected. Call connect() first.")
        return self._container

    def _partition_key_for(self, item_id: str, item: Optional[dict[str, Any]] = None) -> Any:
        """Resolve the partition key value for a document.

        Containers partitioned on /id use the id itself; any other path is
        read from the document body.
        """
        if self._partition_key_path == "/id" or item is None:
            return item_id
        value: Any = item
        for part in self._partition_key_path.strip("/").split("/"):
            value = value.get(part) if isinstance(value, dict) else None
        return value

    async def query_items(
        self,
        query: str,
        parameters: Optional[list[dict[str, Any]]] = None,
    ) -> list[dict[str, Any]]:
        """Query items from the container.

        Args:
            query: SQL query string
            parameters: Optional query parameters as list of {"name": "@param", "value": value}

        Returns:
            List of matching items.

        Raises:
            RuntimeError: If client is not connected.
        """
        container = self._require_container()

        items = []
        async for item in container.query_items(
            query=query,
            parameters=parameters,
        ):
            items.append(dict(item))

        return items

    async def find_all(self) -> list[dict[str, Any]]:
        """Return every document in the container."""
        return await self.query_items("SELECT * FROM c")

    async def find_one(self, item_id: str) -> Optional[dict[str, Any]]:
        """Read a single item by id.

        Containers not partitioned on /id fall back to a cross-partition
        query filtered on the id.

        Returns:
            The item data, or None if no item has that id.

        Raises:
            RuntimeError: If client is not connected.
        """
        container = self._require_container()

        if self._partition_key_path != "/id":
            items = await self.query_items(
                "SELECT * FROM c WHERE c.id = @id",
                parameters=[{"name": "@id", "value": item_id}],
            )
            return items[0] if items else None

        try:
            result = await container.read_item(item=item_id, partition_key=item_id)
        except CosmosResourceNotFoundError:
            return None
        return dict(result)

    async def insert_one(self, item: dict[str, Any]) -> dict[str, Any]:
        """Create a new item in the container.

        Returns:
            The created item with any system-generated fields.

        Raises:
            RuntimeError: If client is not connected.
            CosmosResourceExistsError: If an item with the same id exists.
        """
        container = self._require_container()

        result = await container.create_item(body=item)
        return dict(result)

    async def replace_one(self, item_id: str, item: dict[str, Any]) -> bool:
        """Replace an existing item. Never creates a missing one.

        Returns:
            True if the item existed and was replaced, False otherwise.

        Raises:
            RuntimeError: If client is not connected.
        """
        container = self._require_container()

        try:
            await container.replace_item(item=item_id, body=item)
        except CosmosResourceNotFoundError:
            return False
        return True

    async def delete_one(self, item_id: str) -> bool:
        """Delete an item by id.

        Returns:
            True if the item was deleted, False if it did not exist.

        Raises:
            RuntimeError: If client is not connected.
        """
        container = self._require_container()

        partition_key = self._partition_key_for(item_id)
        if self._partition_key_path != "/id":
            existing = await self.find_one(item_id)
            if existing is None:
                return False
            partition_key = self._partition_key_for(item_id, existing)

        try:
            await container.delete_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return False
        return True
