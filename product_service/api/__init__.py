"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from product_service.api.controller import product_router
from product_service.config import get_config
from product_service.handlers import ProductHandlers
from product_service.services import ProductStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Product store to serve from. Built from config at startup if omitted.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        product_store = store
        if product_store is None:
            config = get_config()
            logging.basicConfig(level=config.logging.level)
            product_store = ProductStore()

        # One store connection for the whole process
        await product_store.connect()
        app.state.handlers = ProductHandlers(product_store)
        logger.info(f"Product store connected ({product_store.backend})")
        try:
            yield
        finally:
            await product_store.close()

    app = FastAPI(
        title="Product API",
        description="CRUD API for the product catalog",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
