"""Tests for ProductService forwarding."""

import uuid
from unittest.mock import AsyncMock

import pytest

from product_api.models import Product
from product_api.repositories import ProductRepository
from product_api.services import ProductService


class TestProductService:
    """Test that every operation forwards to the repository unchanged."""

    @pytest.fixture
    def repository(self):
        return AsyncMock(spec=ProductRepository)

    @pytest.fixture
    def service(self, repository):
        return ProductService(repository)

    @pytest.mark.asyncio
    async def test_get_all_products(self, service, repository):
        products = [Product(id=uuid.uuid4(), name="A")]
        repository.get_all_products.return_value = products

        assert await service.get_all_products() is products
        repository.get_all_products.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_get_product_by_id(self, service, repository):
        product_id = uuid.uuid4()
        repository.get_product_by_id.return_value = None

        assert await service.get_product_by_id(product_id) is None
        repository.get_product_by_id.assert_awaited_once_with(product_id)

    @pytest.mark.asyncio
    async def test_create_product(self, service, repository):
        product = Product(id=uuid.uuid4(), name="New Product")
        repository.create_product.return_value = product

        assert await service.create_product(product) is product
        repository.create_product.assert_awaited_once_with(product)

    @pytest.mark.asyncio
    async def test_update_product(self, service, repository):
        product = Product(id=uuid.uuid4(), name="Updated Product")
        repository.update_product.return_value = False

        assert await service.update_product(product) is False
        repository.update_product.assert_awaited_once_with(product)

    @pytest.mark.asyncio
    async def test_delete_product(self, service, repository):
        product_id = uuid.uuid4()

        await service.delete_product(product_id)

        repository.delete_product.assert_awaited_once_with(product_id)

    @pytest.mark.asyncio
    async def test_errors_propagate_unchanged(self, service, repository):
        error = RuntimeError("boom")
        repository.get_all_products.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            await service.get_all_products()

        assert exc_info.value is error
