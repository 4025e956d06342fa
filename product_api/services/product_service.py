"""Product service layer."""

from typing import Optional
from uuid import UUID

from product_api.models import Product
from product_api.repositories import ProductRepository


class ProductService:
    """Application logic for products.

    Forwards to the repository so request handling never depends on the
    storage technology.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_all_products(self) -> list[Product]:
        return await self._repository.get_all_products()

    async def get_product_by_id(self, product_id: UUID) -> Optional[Product]:
        return await self._repository.get_product_by_id(product_id)

    async def create_product(self, product: Product) -> Product:
        return await self._repository.create_product(product)

    async def update_product(self, product: Product) -> bool:
        return await self._repository.update_product(product)

    async def delete_product(self, product_id: UUID) -> None:
        await self._repository.delete_product(product_id)
