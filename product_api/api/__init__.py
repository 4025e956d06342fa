"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from azure.core.exceptions import AzureError
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from product_api.api.controller import product_router
from product_api.clients import (
    CosmosDBClient,
    DocumentClient,
    InMemoryDocumentClient,
    StorageError,
)
from product_api.config import AppConfig, get_config
from product_api.repositories import ProductRepository
from product_api.services import ProductService

logger = logging.getLogger(__name__)


def create_document_client(config: AppConfig) -> DocumentClient:
    """Build the storage client for the configured backend."""
    if config.storage.backend == "memory":
        return InMemoryDocumentClient()

    cosmosdb = config.cosmosdb
    return CosmosDBClient(
        endpoint=cosmosdb.endpoint,
        key=cosmosdb.key,
        database_name=cosmosdb.database_name,
        container_name=cosmosdb.container_name,
        partition_key_path=cosmosdb.partition_key_path,
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report any storage failure as a 500."""
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage operation failed"},
    )


def create_app(client: Optional[DocumentClient] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        client: Document store to use. When omitted, one is built from the
            application configuration at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        document_client = client if client is not None else create_document_client(get_config())
        async with document_client:
            logger.info(f"Connected document store: {type(document_client).__name__}")
            app.state.product_service = ProductService(ProductRepository(document_client))
            yield
        logger.info("Document store closed")

    app = FastAPI(
        title="Product API",
        description="CRUD API for products backed by a document store",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(AzureError, storage_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
