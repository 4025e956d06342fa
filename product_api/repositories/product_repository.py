"""Product data access on top of a document store."""

import logging
import uuid
from typing import Optional
from uuid import UUID

from product_api.clients import DocumentClient
from product_api.models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """Translates product CRUD operations into document store calls.

    Every operation logs the attempt, and on failure logs the error and
    re-raises it untouched.
    """

    def __init__(self, client: DocumentClient):
        """Initialize the repository.

        Args:
            client: Connected document store holding the product documents.
        """
        self._client = client

    async def get_all_products(self) -> list[Product]:
        """Fetch every stored product, in storage order."""
        try:
            logger.info("Fetching all products.")
            documents = await self._client.find_all()
        except Exception:
            logger.exception("Error fetching products.")
            raise
        return [Product.from_document(doc) for doc in documents]

    async def get_product_by_id(self, product_id: UUID) -> Optional[Product]:
        """Fetch a single product.

        Returns:
            The product, or None if no product has that id.
        """
        try:
            logger.info(f"Fetching product with ID: {product_id}")
            document = await self._client.find_one(str(product_id))
        except Exception:
            logger.exception(f"Error fetching product with ID: {product_id}")
            raise
        if document is None:
            return None
        return Product.from_document(document)

    async def create_product(self, product: Product) -> Product:
        """Insert a new product document.

        A product without an id is assigned a fresh UUID4 before insertion.

        Returns:
            The stored product.
        """
        if product.id is None:
            product = product.model_copy(update={"id": uuid.uuid4()})

        try:
            logger.info(f"Creating product with ID: {product.id}")
            document = await self._client.insert_one(product.to_document())
        except Exception:
            logger.exception(f"Error creating product with ID: {product.id}")
            raise
        return Product.from_document(document)

    async def update_product(self, product: Product) -> bool:
        """Replace the stored document whose id equals ``product.id``.

        Returns:
            Whether a document matched. A miss is not treated as an error here.
        """
        try:
            logger.info(f"Updating product with ID: {product.id}")
            return await self._client.replace_one(str(product.id), product.to_document())
        except Exception:
            logger.exception(f"Error updating product with ID: {product.id}")
            raise

    async def delete_product(self, product_id: UUID) -> None:
        """Delete a product by id. Deleting a missing id is a no-op."""
        try:
            logger.info(f"Deleting product with ID: {product_id}")
            await self._client.delete_one(str(product_id))
        except Exception:
            logger.exception(f"Error deleting product with ID: {product_id}")
            raise
