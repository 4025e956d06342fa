"""REST controller for the product resource."""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from product_api.models import Product
from product_api.services import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


def get_product_service(request: Request) -> ProductService:
    """Return the service wired up at application startup."""
    return request.app.state.product_service


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)):
    """List all products."""
    return await service.get_all_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
):
    """Get a specific product by ID."""
    product = await service.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: Product,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Create a new product and point the Location header at it."""
    created = await service.create_product(product)
    response.headers["Location"] = str(request.url_for("get_product", product_id=str(created.id)))
    return created


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: UUID,
    product: Product,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace an existing product.

    The id in the path must match the id in the body.
    """
    if product.id != product_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product id in path does not match body",
        )

    existing = await service.get_product_by_id(product_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    # The replace never inserts, so a delete racing the check above lands here
    matched = await service.update_product(product)
    if not matched:
        logger.info(f"Product {product_id} disappeared before update")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    existing = await service.get_product_by_id(product_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
