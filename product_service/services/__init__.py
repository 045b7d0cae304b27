"""Service layer."""

from product_service.services.product_store import ProductStore

__all__ = ["ProductStore"]
