"""Data access module."""

from product_api.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
