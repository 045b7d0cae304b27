"""Product CRUD handlers.

Each handler takes a request event ({"body": ..., "pathParameters": ...})
and returns {"statusCode": ..., "body": ...}. Pipeline per request:
parse → validate → one store call → map response. No state is kept
between invocations; the store is injected once and shared.
"""

import logging
import uuid
from typing import Any

from product_service.exceptions import ProductNotFoundError, StoreError, ValidationError
from product_service.handlers.events import (
    error_response,
    json_body,
    path_product_id,
    response,
    utc_timestamp,
)
from product_service.models import Product
from product_service.services import ProductStore
from product_service.validation import validate_product

logger = logging.getLogger(__name__)

NOT_FOUND = "Product not found"


class ProductHandlers:
    """Create, get, update and delete handlers over one ProductStore."""

    def __init__(self, store: ProductStore):
        self._store = store

    async def create_product(self, event: dict[str, Any]) -> dict[str, Any]:
        """Validate the body and store a new product.

        Returns:
            201 with {"productId": ...}; 400 on invalid input; 500 on store failure.
        """
        try:
            data = validate_product(json_body(event))
        except ValidationError as e:
            return error_response(400, e.message)

        product = Product.create(str(uuid.uuid4()), data, utc_timestamp())

        try:
            await self._store.put(product.to_item())
        except StoreError as e:
            logger.exception(f"Could not create product {product.product_id}")
            return error_response(500, "Could not create product", e.message)

        logger.info(f"Created product {product.product_id}")
        return response(201, {"productId": product.product_id})

    async def get_product_by_id(self, event: dict[str, Any]) -> dict[str, Any]:
        """Return the stored item, or 404 when absent."""
        try:
            product_id = path_product_id(event)
        except ValidationError as e:
            return error_response(400, e.message)

        try:
            item = await self._store.get(product_id)
        except StoreError as e:
            logger.exception(f"Could not retrieve product {product_id}")
            return error_response(500, "Could not retrieve product", e.message)

        if item is None:
            return error_response(404, NOT_FOUND)
        return response(200, item)

    async def update_product(self, event: dict[str, Any]) -> dict[str, Any]:
        """Replace all mutable fields of an existing product.

        An unknown productId yields 404 and nothing is written.
        """
        try:
            product_id = path_product_id(event)
            data = validate_product(json_body(event))
        except ValidationError as e:
            return error_response(400, e.message)

        try:
            item = await self._store.update(product_id, data.to_attributes(), utc_timestamp())
        except ProductNotFoundError:
            return error_response(404, NOT_FOUND)
        except StoreError as e:
            logger.exception(f"Could not update product {product_id}")
            return error_response(500, "Could not update product", e.message)

        logger.info(f"Updated product {product_id}")
        return response(200, item)

    async def delete_product(self, event: dict[str, Any]) -> dict[str, Any]:
        """Delete a product; deleting an absent product still returns 204."""
        try:
            product_id = path_product_id(event)
        except ValidationError as e:
            return error_response(400, e.message)

        try:
            await self._store.delete(product_id)
        except StoreError as e:
            logger.exception(f"Could not delete product {product_id}")
            return error_response(500, "Could not delete product", e.message)

        logger.info(f"Deleted product {product_id}")
        return response(204)
